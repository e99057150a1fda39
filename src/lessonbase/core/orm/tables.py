"""ORM models for the lesson content hierarchy.

Lesson → Topic → Subtopic → (Resource, QuizQuestion).  Parent links are
plain integer columns, as in the platform schema; there are no
database-level foreign keys, so deletes must run children-first.

The DDL that creates these tables in production lives in
``migrations/001-update-schema.sql``; the models only describe them.
"""

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.orm import Mapped, mapped_column

from lessonbase.core.orm.base import LessonbaseBase


class LessonTable(LessonbaseBase):
    __tablename__ = "lessons"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(nullable=False)
    description: Mapped[str | None] = mapped_column(nullable=True)
    level: Mapped[str | None] = mapped_column(nullable=True)
    language: Mapped[str | None] = mapped_column(nullable=True)
    icon: Mapped[str | None] = mapped_column(server_default=text("'book'"), nullable=True)
    is_active: Mapped[bool | None] = mapped_column(server_default=text("true"), nullable=True)


class TopicTable(LessonbaseBase):
    __tablename__ = "topics"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    lesson_id: Mapped[int] = mapped_column(nullable=False)
    title: Mapped[str] = mapped_column(nullable=False)
    order: Mapped[int | None] = mapped_column(nullable=True)


class SubtopicTable(LessonbaseBase):
    __tablename__ = "subtopics"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    topic_id: Mapped[int] = mapped_column(nullable=False)
    title: Mapped[str] = mapped_column(nullable=False)
    objective: Mapped[str | None] = mapped_column(nullable=True)
    key_concepts: Mapped[list | None] = mapped_column(nullable=True)
    order: Mapped[int | None] = mapped_column(nullable=True)


class ResourceTable(LessonbaseBase):
    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    subtopic_id: Mapped[int] = mapped_column(nullable=False)
    type: Mapped[str | None] = mapped_column(nullable=True)  # text, image, video, audio
    url: Mapped[str | None] = mapped_column(nullable=True)
    title: Mapped[str | None] = mapped_column(nullable=True)
    description: Mapped[str | None] = mapped_column(nullable=True)
    purpose: Mapped[str | None] = mapped_column(nullable=True)
    content_tags: Mapped[list | None] = mapped_column(nullable=True)
    recommended_when: Mapped[str | None] = mapped_column(nullable=True)
    is_optional: Mapped[bool | None] = mapped_column(server_default=text("true"), nullable=True)


class QuizQuestionTable(LessonbaseBase):
    __tablename__ = "quiz_questions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    subtopic_id: Mapped[int] = mapped_column(nullable=False)
    question: Mapped[str | None] = mapped_column(nullable=True)
    options: Mapped[list | None] = mapped_column(nullable=True)
    answer: Mapped[int | None] = mapped_column(nullable=True)  # index into options
    explanation: Mapped[str | None] = mapped_column(nullable=True)


# Children first: the order content rows must be deleted in.
CONTENT_DELETE_ORDER = (
    QuizQuestionTable,
    ResourceTable,
    SubtopicTable,
    TopicTable,
    LessonTable,
)
