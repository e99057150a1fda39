"""
CLI: ``lessonbase migrate`` and the standalone ``run-migration`` command.
"""

from __future__ import annotations

import typer

from lessonbase.cli.utils import cli_context, console, fail_if_error, output_result

app = typer.Typer(no_args_is_help=True)

# ``run-migration [FILENAME]``: one command, no sub-commands.
run_app = typer.Typer(add_completion=False)


def _apply(filename: str | None, *, legacy: bool = False) -> None:
    from lessonbase.ops.migrations import apply_migration
    from lessonbase.ops.requests import MigrationRequest

    with cli_context() as ctx:
        if legacy:
            filename = ctx.settings.legacy_migration
        name = filename or ctx.settings.default_migration
        console.print(f"Applying database migration: {name}...", markup=False, highlight=False)
        result = apply_migration(ctx, MigrationRequest(filename=name))

    fail_if_error(result)
    console.print("Migration applied successfully!")


@app.command()
def run(
    filename: str | None = typer.Argument(
        None, help="Migration file in ./migrations (default: DEFAULT_MIGRATION)"
    ),
) -> None:
    """Apply one migration file from ./migrations."""
    _apply(filename)


@app.command()
def apply() -> None:
    """Apply the schema-update migration (LEGACY_MIGRATION)."""
    _apply(None, legacy=True)


@app.command("list")
def list_files(
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """List migration files in ./migrations."""
    from lessonbase.ops.migrations import get_migration_files

    with cli_context(with_engine=False) as ctx:
        result = get_migration_files(ctx)
    output_result(result, as_json=json_out, title="Migrations")


@run_app.command()
def run_migration(
    filename: str | None = typer.Argument(
        None, help="Migration file in ./migrations (default: DEFAULT_MIGRATION)"
    ),
) -> None:
    """Apply one SQL migration file from ./migrations and exit."""
    _apply(filename)


def main() -> None:
    """Console-script entry point for ``run-migration``."""
    run_app()
