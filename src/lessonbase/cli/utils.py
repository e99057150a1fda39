"""
CLI utility helpers: output formatting and context management.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict
from typing import Any

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from lessonbase.core.connection import engine_from_settings
from lessonbase.core.errors import LessonbaseError
from lessonbase.core.logging import configure_logging
from lessonbase.core.settings import LessonbaseSettings, get_settings
from lessonbase.ops.context import OperationContext
from lessonbase.ops.result import OperationResult

console = Console()
err_console = Console(stderr=True)


# ── Context helpers ──────────────────────────────────────────────────────


def load_settings() -> LessonbaseSettings:
    """Load settings and configure logging, exiting 1 on invalid config."""
    try:
        settings = get_settings(_force_reload=True)
    except ValidationError as exc:
        print_error("CONFIG", str(exc))
        raise typer.Exit(code=1) from exc
    configure_logging(level=settings.log_level, json_format=settings.log_json)
    return settings


@contextmanager
def cli_context(*, with_engine: bool = True) -> Iterator[OperationContext]:
    """Yield an ``OperationContext`` for a CLI command.

    The engine is created lazily (no connection is opened here) and
    disposed when the command finishes.
    """
    settings = load_settings()
    engine = None
    if with_engine:
        try:
            engine = engine_from_settings(settings)
        except LessonbaseError as exc:
            print_error(exc.category.value, exc.message)
            raise typer.Exit(code=1) from exc
    try:
        yield OperationContext(settings=settings, engine=engine, caller="cli")
    finally:
        if engine is not None:
            engine.dispose()


# ── Output helpers ───────────────────────────────────────────────────────


def print_error(code: str, message: str) -> None:
    err_console.print(f"[bold red]Error[/bold red] ({code}): ", end="")
    err_console.print(message, markup=False, highlight=False)


def _to_dict(obj: Any) -> dict[str, Any]:
    """Convert dataclass / dict to plain dict."""
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    if isinstance(obj, dict):
        return obj
    return {"value": str(obj)}


def fail_if_error(result: OperationResult) -> None:
    """Print the error of a failed result and exit 1."""
    if result.success:
        return
    err = result.error
    print_error(err.code if err else "ERROR", err.message if err else "Unknown error")
    raise typer.Exit(code=1)


def output_result(
    result: OperationResult,
    *,
    as_json: bool = False,
    title: str = "",
) -> None:
    """Render an ``OperationResult`` to the terminal."""
    fail_if_error(result)

    for warning in result.warnings:
        err_console.print(f"[yellow]Warning:[/yellow] {warning}")

    data = result.data

    if as_json:
        payload = _to_dict(data) if not isinstance(data, list | tuple) else [_to_dict(d) for d in data]
        console.print_json(json.dumps(payload, default=str))
        return

    if isinstance(data, list):
        if not data:
            console.print("[dim]No items.[/dim]")
            return
        print_table(data, title=title)
    else:
        _print_dict(_to_dict(data), title=title)


def print_table(items: list, *, title: str = "") -> None:
    """Render a list of dataclasses/dicts as a Rich table."""
    first = _to_dict(items[0])
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in first:
        table.add_column(col, overflow="fold")
    for item in items:
        d = _to_dict(item)
        table.add_row(*(str(v) for v in d.values()))
    console.print(table)


def _print_dict(data: dict[str, Any], *, title: str = "") -> None:
    """Render a single dict as key-value pairs."""
    if title:
        console.print(f"[bold]{title}[/bold]")
    for k, v in data.items():
        console.print(f"  [cyan]{k}[/cyan]: {v}")
