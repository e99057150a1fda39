"""
Migration operations.

Thin wrappers around :mod:`lessonbase.migrations.runner` that turn runner
exceptions into :class:`OperationResult` envelopes for the CLI.
"""

from __future__ import annotations

from lessonbase.core.errors import LessonbaseError
from lessonbase.core.logging import LogContext, get_logger
from lessonbase.migrations.runner import (
    MigrationApplied,
    list_migrations,
    resolve_migration_path,
    run_migration,
)
from lessonbase.ops.context import OperationContext
from lessonbase.ops.requests import MigrationRequest
from lessonbase.ops.responses import MigrationListing
from lessonbase.ops.result import OperationResult, start_timer

logger = get_logger(__name__)


def apply_migration(
    ctx: OperationContext,
    request: MigrationRequest | None = None,
) -> OperationResult[MigrationApplied]:
    """Apply one migration file (the configured default when unnamed)."""
    request = request or MigrationRequest()
    elapsed = start_timer()
    filename = request.filename or ctx.settings.default_migration

    with LogContext(request_id=ctx.request_id, caller=ctx.caller):
        try:
            applied = run_migration(ctx.require_engine(), filename, ctx.migrations_dir)
        except LessonbaseError as exc:
            return OperationResult.from_error(exc, elapsed_ms=elapsed())

    return OperationResult.ok(applied, elapsed_ms=elapsed())


def get_migration_files(ctx: OperationContext) -> OperationResult[list[MigrationListing]]:
    """List migration files available in the migrations directory."""
    elapsed = start_timer()
    listings = [
        MigrationListing(
            filename=name,
            size_bytes=resolve_migration_path(name, ctx.migrations_dir).stat().st_size,
            is_default=name == ctx.settings.default_migration,
        )
        for name in list_migrations(ctx.migrations_dir)
    ]
    warnings = []
    if not ctx.migrations_dir.is_dir():
        warnings.append(f"Migrations directory not found: {ctx.migrations_dir}")
    return OperationResult.ok(listings, warnings=warnings, elapsed_ms=elapsed())
