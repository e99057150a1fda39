"""
Typed response objects for operations.

Each dataclass represents the *output* of a single operation beyond the
generic :class:`OperationResult` envelope.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ------------------------------------------------------------------ #
# Migration responses
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class MigrationListing:
    """One entry of :func:`lessonbase.ops.migrations.get_migration_files`."""

    filename: str
    size_bytes: int
    is_default: bool = False


# ------------------------------------------------------------------ #
# Content responses
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class LessonRow:
    id: int
    title: str
    level: str | None


@dataclass(frozen=True, slots=True)
class TopicRow:
    id: int
    title: str
    lesson_id: int


@dataclass(frozen=True, slots=True)
class SubtopicRow:
    id: int
    title: str
    topic_id: int


@dataclass(frozen=True, slots=True)
class ContentSummary:
    """Result payload for :func:`lessonbase.ops.content.get_content_summary`."""

    lessons: list[LessonRow] = field(default_factory=list)
    topics: list[TopicRow] = field(default_factory=list)
    subtopics: list[SubtopicRow] = field(default_factory=list)
    resource_count: int = 0
    quiz_question_count: int = 0


@dataclass(frozen=True, slots=True)
class CleanupResult:
    """Result payload for :func:`lessonbase.ops.content.cleanup_content`.

    ``rows_deleted`` maps table name to deleted row count, in delete order.
    """

    rows_deleted: dict[str, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.rows_deleted.values())


# ------------------------------------------------------------------ #
# Admin responses
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class AdminSeedResult:
    """Result payload for :func:`lessonbase.ops.admin.create_admin_user`.

    ``action`` is ``"registered"`` for a new user or ``"logged_in"`` when
    the user already existed.
    """

    action: str
    user: dict[str, Any]
    saved_to: str
