"""Migration runner for the lesson platform database.

Manifesto:
    A migration is a hand-written SQL file applied by a hand-invoked
    command.  The runner reads one file from ``<cwd>/migrations/`` and
    submits it as a single batch; which files have been applied, and in
    what order, is the operator's call.

Modules
-------
runner    run_migration() / read_migration() / list_migrations()

Tags:
    lessonbase, migrations, schema, database, DDL

Doc-Types:
    package-overview
"""

from lessonbase.migrations.runner import (
    MigrationApplied,
    MigrationFile,
    execute_sql_batch,
    list_migrations,
    read_migration,
    resolve_migration_path,
    run_migration,
)

__all__ = [
    "MigrationApplied",
    "MigrationFile",
    "execute_sql_batch",
    "list_migrations",
    "read_migration",
    "resolve_migration_path",
    "run_migration",
]
