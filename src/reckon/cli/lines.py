"""
Line-at-a-time evaluation for piped input.

Each non-blank line is one independent expression. The caller folds the
outcomes (``had_error``) to pick the exit code; nothing here touches
process state.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from reckon.core.config import FormatConfig
from reckon.core.engine import evaluate_expression
from reckon.core.errors import ExpressionError


@dataclass(frozen=True)
class LineOutcome:
    """Result of evaluating one input line."""

    line_no: int
    text: str
    result: str | None = None
    error: ExpressionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate_lines(lines: Iterable[str], config: FormatConfig) -> Iterator[LineOutcome]:
    """Evaluate every non-blank line, continuing past failures.

    Args:
        lines: Raw input lines, with or without line terminators.
        config: Formatting settings shared by all lines.

    Yields:
        One outcome per non-blank line; ``line_no`` counts blank lines too.
    """
    for line_no, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text:
            continue
        try:
            yield LineOutcome(line_no, text, result=evaluate_expression(text, config))
        except ExpressionError as e:
            yield LineOutcome(line_no, text, error=e)
