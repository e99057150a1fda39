"""
Operation result envelope.

Every operation in :mod:`lessonbase.ops` returns an :class:`OperationResult`
instead of raising, so the CLI can turn any failure into
``Error (<CODE>): <message>`` and exit 1 without its own try/except.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from lessonbase.core.errors import LessonbaseError


@dataclass(frozen=True, slots=True)
class OperationError:
    """Why an operation failed.

    ``code`` is what the CLI prints in parentheses; for errors raised by
    the lower layers it is the :class:`~lessonbase.core.errors.ErrorCategory`
    value.  ``details`` carries the error context (migration, path,
    http_status).
    """

    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    retryable: bool = False


@dataclass
class OperationResult[T]:
    """Success or failure of one operation, with its payload and timing."""

    success: bool
    data: T | None = None
    error: OperationError | None = None
    warnings: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @classmethod
    def ok(cls, data: T, *, warnings: list[str] | None = None, elapsed_ms: float = 0.0) -> OperationResult[T]:
        return cls(success=True, data=data, warnings=list(warnings or ()), elapsed_ms=elapsed_ms)

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        error = OperationError(code=code, message=message, details=dict(details or {}), retryable=retryable)
        return cls(success=False, error=error, elapsed_ms=elapsed_ms)

    @classmethod
    def from_error(cls, exc: LessonbaseError, *, elapsed_ms: float = 0.0) -> OperationResult[T]:
        """Fail with the category of *exc* as the code."""
        return cls.fail(
            exc.category.value,
            exc.message,
            details=exc.context.to_dict(),
            retryable=exc.retryable,
            elapsed_ms=elapsed_ms,
        )


def start_timer() -> Callable[[], float]:
    """Return a zero-argument callable giving milliseconds since the call."""
    started = time.perf_counter()
    return lambda: (time.perf_counter() - started) * 1000
