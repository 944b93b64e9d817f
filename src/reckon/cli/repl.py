"""
Interactive prompt for reckon.

Every entry is evaluated on its own; the only thing kept between entries is
the session history shown by the ``history`` command. The following
commands are recognised:

* ``quit`` / ``exit`` - leave the prompt
* ``history`` - list the calculations of this session
* ``clear`` - forget the session history
* ``help`` - show this list
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reckon.core.config import ReckonConfig
from reckon.core.engine import evaluate_expression
from reckon.core.errors import ExpressionError, describe_error

logger = logging.getLogger(__name__)

_QUIT_COMMANDS = {"quit", "exit"}

HELP_TEXT = """Enter an arithmetic expression, e.g. (2 + 3) * 4
Operators: + - * / and parentheses; a leading - negates.
Commands: history, clear, help, quit"""


class Repl:
    """Read-evaluate-print loop over a rich console."""

    def __init__(
        self,
        config: ReckonConfig,
        console: Console | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.config = config
        self.console = console or Console(highlight=False)
        # Read from ``stream`` instead of the terminal when given
        self.stream = stream
        self.history: list[tuple[str, str]] = []
        self.had_error = False

    def run(self) -> None:
        """Loop until ``quit``, end of input or Ctrl-C."""
        line_history = _LineHistory(self.config.cli.history_file)
        line_history.load()
        self.console.print("[bold]reckon[/bold] - type [cyan]help[/cyan] for usage")
        try:
            while True:
                try:
                    text = self._read_line()
                except (EOFError, KeyboardInterrupt):
                    self.console.print()
                    break
                if not self.handle(text):
                    break
        finally:
            line_history.save()

    def handle(self, text: str) -> bool:
        """Process one entry. Returns False when the session should end."""
        text = text.strip()
        if not text:
            return True

        command = text.lower()
        if command in _QUIT_COMMANDS:
            return False
        if command == "history":
            self._print_history()
            return True
        if command == "clear":
            self.history.clear()
            self.console.print("History cleared.")
            return True
        if command == "help":
            self.console.print(escape(HELP_TEXT))
            return True

        try:
            result = evaluate_expression(text, self.config.format)
        except ExpressionError as e:
            self.had_error = True
            detail = describe_error(e, text, self.config.cli.show_position)
            self.console.print(f"[bold red]error:[/bold red] {escape(detail)}", soft_wrap=True)
            return True

        self.history.append((text, result))
        self.console.print(result, soft_wrap=True)
        return True

    def _read_line(self) -> str:
        line = self.console.input(escape(self.config.cli.prompt), stream=self.stream)
        # A stream signals end of input with an empty read rather than EOFError
        if self.stream is not None and line == "":
            raise EOFError
        return line

    def _print_history(self) -> None:
        if not self.history:
            self.console.print("No calculations yet.")
            return
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Expression")
        table.add_column("Result", justify="right")
        for idx, (expr, result) in enumerate(self.history, 1):
            table.add_row(str(idx), escape(expr), result)
        self.console.print(table)


class _LineHistory:
    """Persist line-editing history through ``readline`` when available."""

    def __init__(self, path: Path | None) -> None:
        self.path = path.expanduser() if path is not None else None
        self._readline = None
        if path is None:
            return
        try:
            import readline
        except ImportError:
            logger.debug("readline unavailable; history file %s not used", path)
            return
        self._readline = readline

    def load(self) -> None:
        if self._readline is None or not self.path.exists():
            return
        try:
            self._readline.read_history_file(str(self.path))
        except OSError as e:
            logger.warning("Could not read history file %s: %s", self.path, e)

    def save(self) -> None:
        if self._readline is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._readline.write_history_file(str(self.path))
        except OSError as e:
            logger.warning("Could not write history file %s: %s", self.path, e)
