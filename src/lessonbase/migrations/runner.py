"""SQL migration runner.

Applies one named ``.sql`` file from the migrations directory: read the
whole file, submit it as a single batch over a pooled connection, commit.
There is no ledger of applied migrations; running a file twice executes
it twice, so idempotence has to come from the SQL itself
(``CREATE TABLE IF NOT EXISTS``, ``ADD COLUMN IF NOT EXISTS``).
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from lessonbase.core.errors import (
    DatabaseConnectionError,
    MigrationExecutionError,
    MigrationNotFoundError,
)
from lessonbase.core.logging import get_logger

logger = get_logger(__name__)

# Resolved against the working directory at call time, not import time.
MIGRATIONS_DIRNAME = "migrations"


@dataclass(frozen=True)
class MigrationFile:
    """A migration file read from disk."""

    filename: str
    path: Path
    sql: str


@dataclass(frozen=True)
class MigrationApplied:
    """Outcome of a successfully applied migration."""

    filename: str
    path: str
    statements_bytes: int
    elapsed_ms: float


def default_migrations_dir() -> Path:
    """Return ``<cwd>/migrations``."""
    return Path.cwd() / MIGRATIONS_DIRNAME


def resolve_migration_path(filename: str, migrations_dir: Path | str | None = None) -> Path:
    """Join *filename* onto the migrations directory."""
    base = Path(migrations_dir) if migrations_dir is not None else default_migrations_dir()
    return base / filename


def read_migration(filename: str, migrations_dir: Path | str | None = None) -> MigrationFile:
    """Read a migration file as UTF-8 text.

    Raises :class:`MigrationNotFoundError` when the file is missing,
    is a directory, or cannot be decoded.
    """
    path = resolve_migration_path(filename, migrations_dir)
    try:
        sql = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MigrationNotFoundError(
            f"Cannot read migration file {path}: {exc}", cause=exc
        ).with_context(migration=filename, path=str(path)) from exc
    return MigrationFile(filename=filename, path=path, sql=sql)


def execute_sql_batch(engine: Engine, sql: str) -> None:
    """Submit *sql* as one batch over a pooled DB-API connection and commit.

    Multi-statement handling is left to the driver: SQLite goes through
    ``executescript``; psycopg2 accepts several statements in a single
    ``cursor.execute`` call.
    """
    # raw_connection() comes straight from the pool, so connect failures
    # arrive as the driver's own exception class, not DBAPIError.
    try:
        raw = engine.raw_connection()
    except (DBAPIError, engine.dialect.loaded_dbapi.Error) as exc:
        raise DatabaseConnectionError(
            f"Cannot connect to database: {_driver_message(exc)}", cause=exc
        ) from exc

    try:
        if engine.dialect.name == "sqlite":
            raw.driver_connection.executescript(sql)
        else:
            cursor = raw.cursor()
            try:
                cursor.execute(sql)
            finally:
                cursor.close()
        raw.commit()
    except Exception as exc:
        try:
            raw.rollback()
        except Exception:
            logger.warning("migration_rollback_failed", exc_info=True)
        raise MigrationExecutionError(_driver_message(exc), cause=exc) from exc
    finally:
        raw.close()


def _driver_message(exc: Exception) -> str:
    driver_exc = exc.orig if isinstance(exc, DBAPIError) else exc
    return str(driver_exc).strip()


def run_migration(
    engine: Engine,
    filename: str,
    migrations_dir: Path | str | None = None,
) -> MigrationApplied:
    """Read *filename* and execute it against *engine*.

    The file is read before any connection is checked out, so a missing
    file never reaches the database.
    """
    start = time.perf_counter()
    migration = read_migration(filename, migrations_dir)

    logger.info("migration_started", migration=filename, path=str(migration.path))
    try:
        execute_sql_batch(engine, migration.sql)
    except (MigrationExecutionError, DatabaseConnectionError) as exc:
        exc.with_context(migration=filename, path=str(migration.path))
        logger.error("migration_failed", migration=filename, error=exc.message)
        raise
    except SQLAlchemyError as exc:
        logger.error("migration_failed", migration=filename, error=str(exc))
        raise MigrationExecutionError(str(exc), cause=exc).with_context(
            migration=filename, path=str(migration.path)
        ) from exc

    applied = MigrationApplied(
        filename=filename,
        path=str(migration.path),
        statements_bytes=len(migration.sql.encode("utf-8")),
        elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    logger.info("migration_applied", migration=filename, elapsed_ms=applied.elapsed_ms)
    return applied


def list_migrations(migrations_dir: Path | str | None = None) -> list[str]:
    """Return sorted ``.sql`` filenames in the migrations directory."""
    base = Path(migrations_dir) if migrations_dir is not None else default_migrations_dir()
    if not base.is_dir():
        return []
    return sorted(p.name for p in base.glob("*.sql") if p.is_file())
