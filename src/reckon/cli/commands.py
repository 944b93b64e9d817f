"""
reckon command-line entry point.

Three ways in, one engine:

- ``reckon "2 + 3 * 4"`` evaluates the argument once
- ``echo "2 + 3" | reckon`` evaluates each piped line independently
- ``reckon`` on a terminal (or ``reckon -i``) opens an interactive prompt

Exit codes: 0 on success, 1 if any expression failed, 2 for usage and
configuration errors. Expressions starting with ``-`` need a ``--``
separator: ``reckon -- "-2 * 3"``.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from reckon.cli.lines import evaluate_lines
from reckon.cli.repl import Repl
from reckon.cli.utils import (
    configure_logging,
    err_console,
    print_expression_error,
    version_callback,
)
from reckon.core.config import DEFAULT_CONFIG_FILE, ReckonConfig, load_config
from reckon.core.engine import evaluate_expression
from reckon.core.errors import ConfigError, ExpressionError

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="reckon - evaluate arithmetic expressions (+ - * / and parentheses).",
    add_completion=False,
)


@app.command()
def calculate(
    expression: Annotated[
        str | None,
        typer.Argument(help="Expression to evaluate. Omit to read lines from stdin."),
    ] = None,
    precision: Annotated[
        int | None,
        typer.Option(
            "--precision",
            "-p",
            envvar="RECKON_PRECISION",
            help="Maximum digits after the decimal point (default 10).",
        ),
    ] = None,
    config_file: Annotated[
        Path,
        typer.Option("--config", "-c", help="Path to a reckon.toml configuration file."),
    ] = Path(DEFAULT_CONFIG_FILE),
    hide_position: Annotated[
        bool,
        typer.Option("--hide-position", help="Do not show where in the input an error is."),
    ] = False,
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-i", help="Start the interactive prompt."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log engine activity to stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information.",
        ),
    ] = None,
) -> None:
    """Evaluate an arithmetic expression, piped lines, or an interactive session."""
    configure_logging(verbose)
    config = _resolve_config(config_file, precision, hide_position)

    if expression is not None and interactive:
        err_console.print("[bold red]error:[/bold red] --interactive takes no expression")
        raise typer.Exit(code=2)

    if expression is not None:
        raise typer.Exit(code=_run_once(expression, config))

    if interactive or sys.stdin.isatty():
        repl = Repl(config)
        repl.run()
        raise typer.Exit(code=1 if repl.had_error else 0)

    raise typer.Exit(code=_run_lines(_stdin_lines(), config))


def _resolve_config(
    config_file: Path, precision: int | None, hide_position: bool
) -> ReckonConfig:
    """Merge the config file with command-line overrides."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        err_console.print(f"[bold red]error:[/bold red] {escape(e.message)}", soft_wrap=True)
        raise typer.Exit(code=2)

    if precision is not None:
        if precision < 0:
            logger.warning("Negative precision %d clamped to 0", precision)
            precision = 0
        config = config.with_precision(precision)

    if hide_position:
        config = config.model_copy(
            update={"cli": config.cli.model_copy(update={"show_position": False})}
        )
    return config


def _run_once(expression: str, config: ReckonConfig) -> int:
    """Evaluate a single argument expression. Returns the exit code."""
    text = expression.strip()
    try:
        result = evaluate_expression(text, config.format)
    except ExpressionError as e:
        print_expression_error(e, text, show_position=config.cli.show_position)
        return 1
    typer.echo(result)
    return 0


def _run_lines(lines: Iterable[str], config: ReckonConfig) -> int:
    """Evaluate piped lines, one result per line. Returns the exit code."""
    had_error = False
    for outcome in evaluate_lines(lines, config.format):
        if outcome.error is not None:
            had_error = True
            print_expression_error(
                outcome.error,
                outcome.text,
                show_position=config.cli.show_position,
                prefix=f"line {outcome.line_no}: ",
            )
        else:
            typer.echo(outcome.result)
    return 1 if had_error else 0


def _stdin_lines() -> Iterator[str]:
    """Yield stdin lines, replacing undecodable bytes instead of failing."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        yield from sys.stdin
        return
    encoding = sys.stdin.encoding or "utf-8"
    for raw in buffer:
        yield raw.decode(encoding, errors="replace")
