"""
Root Typer application for the lessonbase CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

app = Typer(
    name="lessonbase",
    help="lessonbase - database and admin tooling for the lesson platform.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from importlib.metadata import PackageNotFoundError
        from importlib.metadata import version as pkg_version

        try:
            v = pkg_version("lessonbase")
        except PackageNotFoundError:
            from lessonbase import __version__ as v
        typer.echo(f"lessonbase {v}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """lessonbase CLI - apply migrations, inspect content, seed the admin user."""


# ── Sub-command registration ─────────────────────────────────────────────

from lessonbase.cli.admin import app as admin_app  # noqa: E402
from lessonbase.cli.db import app as db_app  # noqa: E402
from lessonbase.cli.migrate import app as migrate_app  # noqa: E402

app.add_typer(migrate_app, name="migrate", help="Apply and list SQL migrations.")
app.add_typer(db_app, name="db", help="Lesson content inspection and cleanup.")
app.add_typer(admin_app, name="admin", help="Admin account seeding.")
