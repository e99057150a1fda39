"""
Structured error types for lessonbase.

Every failure the operator tools can hit (missing configuration, a missing
migration file, a driver rejecting SQL, an unreachable API) is raised as a
:class:`LessonbaseError` subclass.  Each error carries:

- **Category:** What kind of error (config, source, database, ...)
- **Retryable:** Whether running the command again could succeed unchanged
- **Context:** Structured metadata (migration, path, url, http status)
- **Cause:** The chained driver or OS exception

Manifesto:
    - **Typed Error Hierarchy:** Different error types for different domains
    - **Rich Context:** Errors carry metadata for logging
    - **Error Chaining:** Keep the driver exception as ``__cause__``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                     LessonbaseError                          │
        │  (category, retryable, context, cause)                       │
        ├─────────────────────────────────────────────────────────────┤
        │  ConfigError        SourceError          DatabaseError       │
        │  (CONFIG)           (SOURCE)             (DATABASE)          │
        │       │                  │                    │              │
        │  MissingConfig      MigrationNotFound    MigrationExecution  │
        │  InvalidConfig                           DatabaseConnection  │
        │                                          (retryable)         │
        │  ApiError                                                    │
        │  (NETWORK)                                                   │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = MigrationNotFoundError("Migration file not found: 009.sql")
    >>> error.category
    <ErrorCategory.SOURCE: 'SOURCE'>
    >>> error.with_context(migration="009.sql").context.migration
    '009.sql'

Tags:
    error-handling, exception-hierarchy, error-context, lessonbase

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification.

    The category value doubles as the error code shown by the CLI
    (``Error (DATABASE): ...``).
    """

    NETWORK = "NETWORK"           # Connection refused, timeout, HTTP errors
    DATABASE = "DATABASE"         # Connection pool, SQL rejected by driver
    SOURCE = "SOURCE"             # Migration file missing or unreadable
    CONFIG = "CONFIG"             # Missing or invalid settings
    INTERNAL = "INTERNAL"         # Bugs, unexpected state


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Only non-``None`` fields end up in :meth:`to_dict`, so a context can be
    logged as-is.

    Attributes:
        migration: Migration filename being applied
        path: Filesystem path involved
        url: URL that was being accessed
        http_status: HTTP status code if applicable
        metadata: Additional key-value pairs
    """

    migration: str | None = None
    path: str | None = None
    url: str | None = None
    http_status: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["migration", "path", "url", "http_status"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class LessonbaseError(Exception):
    """
    Base exception for all lessonbase errors.

    Subclasses set ``default_category`` and ``default_retryable`` so callers
    rarely pass them explicitly.

    Examples:
        >>> error = LessonbaseError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.retryable
        False

        Chaining a driver exception:

        >>> try:
        ...     raise OSError("disk gone")
        ... except OSError as e:
        ...     error = LessonbaseError("Read failed", cause=e)
        >>> error.cause
        OSError('disk gone')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> LessonbaseError:
        """
        Add context to this error (fluent API).

        Usage:
            raise MigrationNotFoundError("Missing").with_context(
                migration="002-add-crypto-tables.sql",
                path="/srv/app/migrations/002-add-crypto-tables.sql",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# DATABASE ERRORS
# =============================================================================


class DatabaseError(LessonbaseError):
    """Database query or transaction error."""

    default_category = ErrorCategory.DATABASE
    default_retryable = False


class DatabaseConnectionError(DatabaseError):
    """The pool could not open a connection; running again may succeed."""

    default_retryable = True


class MigrationExecutionError(DatabaseError):
    """The driver rejected a migration batch."""


# =============================================================================
# SOURCE ERRORS
# =============================================================================


class SourceError(LessonbaseError):
    """Error reading an input (file, directory)."""

    default_category = ErrorCategory.SOURCE
    default_retryable = False


class MigrationNotFoundError(SourceError):
    """Migration file does not exist or cannot be read."""

    pass


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(LessonbaseError):
    """
    Configuration error.

    Never retryable - configuration must be fixed.
    """

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class MissingConfigError(ConfigError):
    """Required configuration is missing."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Missing required configuration: {key}")


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")


# =============================================================================
# API ERRORS
# =============================================================================


class ApiError(LessonbaseError):
    """HTTP API request failed (non-2xx response or transport error)."""

    default_category = ErrorCategory.NETWORK
    default_retryable = False

    def __init__(self, message: str, *, status_code: int | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        if status_code is not None:
            self.context.http_status = status_code


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "LessonbaseError",
    "DatabaseConnectionError",
    "SourceError",
    "MigrationNotFoundError",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
    "DatabaseError",
    "MigrationExecutionError",
    "ApiError",
]
