"""
reckon CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
import sys

import typer
from rich.console import Console
from rich.markup import escape

from reckon.core.errors import ExpressionError, describe_error

# Results go to stdout untouched; diagnostics go through rich on stderr
err_console = Console(stderr=True, highlight=False)


def get_version() -> str:
    """Get reckon version from package metadata."""
    from reckon import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"reckon version {get_version()}")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")

        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr; DEBUG when verbose, warnings otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )


def print_expression_error(
    error: ExpressionError,
    source: str,
    *,
    show_position: bool,
    prefix: str = "",
) -> None:
    """Print an expression error to stderr as ``[prefix]error: message``."""
    detail = describe_error(error, source, show_position)
    err_console.print(
        f"{escape(prefix)}[bold red]error:[/bold red] {escape(detail)}", soft_wrap=True
    )
