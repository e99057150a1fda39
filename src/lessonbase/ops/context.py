"""
Request-scoped context for operations.

Every operation function receives an :class:`OperationContext` as its first
argument.  The context carries the engine (connection pool), the settings
the command was started with, and caller identity.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sqlalchemy.engine import Engine

from lessonbase.core.settings import LessonbaseSettings


@dataclass
class OperationContext:
    """Context passed to every operation function.

    Attributes:
        settings: Settings resolved for this invocation.
        engine: SQLAlchemy engine, or ``None`` for operations that never
            touch the database.
        request_id: Unique ID for this operation invocation (auto-generated).
        caller: Origin of the request: ``"cli"`` or ``"sdk"``.
        metadata: Arbitrary key/value pairs forwarded to logging.
    """

    settings: LessonbaseSettings
    engine: Engine | None = None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    caller: str = "sdk"
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def migrations_dir(self) -> Path:
        return self.settings.resolved_migrations_dir()

    def require_engine(self) -> Engine:
        if self.engine is None:
            raise RuntimeError("operation needs a database engine but the context has none")
        return self.engine
