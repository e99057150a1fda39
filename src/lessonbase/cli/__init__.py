"""
CLI layer for lessonbase.

Provides Typer applications that delegate to the operations layer
(``lessonbase.ops``).  This package handles only terminal transport:
argument parsing, coloured output, and table formatting.

Entry points::

    lessonbase --help
    run-migration [FILENAME]
"""

from lessonbase.cli.app import app

__all__ = ["app"]
