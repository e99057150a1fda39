"""
CLI: ``lessonbase admin`` - admin account seeding.
"""

from __future__ import annotations

from pathlib import Path

import typer

from lessonbase.cli.utils import cli_context, console, fail_if_error

app = typer.Typer(no_args_is_help=True)


@app.command()
def create(
    base_url: str | None = typer.Option(None, "--base-url", help="Platform API URL (default: API_BASE_URL)"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Where to save the user JSON"),
    username: str = typer.Option("admin", "--username"),
    password: str = typer.Option("admin123", "--password"),
) -> None:
    """Register the admin user (or log in if it exists) and save it."""
    from lessonbase.ops.admin import create_admin_user
    from lessonbase.ops.requests import AdminSeedRequest

    with cli_context(with_engine=False) as ctx:
        result = create_admin_user(
            ctx,
            AdminSeedRequest(
                username=username,
                password=password,
                base_url=base_url,
                output_path=output,
            ),
        )
    fail_if_error(result)

    seeded = result.data
    if seeded.action == "registered":
        console.print("Admin user created successfully!")
    else:
        console.print("Admin user already exists, logged in successfully!")
    console.print(f"User info saved to {seeded.saved_to}", markup=False, highlight=False)
