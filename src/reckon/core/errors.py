"""
Error types for reckon expression tokenizing, parsing, and evaluation.
"""

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Why an expression could not be turned into a result."""

    # Tokenizer
    INVALID_NUMBER = "invalid_number"
    UNEXPECTED_CHAR = "unexpected_char"
    # Parser
    UNMATCHED_PAREN = "unmatched_paren"
    TRAILING_INPUT = "trailing_input"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    EXPECTED_EXPRESSION = "expected_expression"
    NESTING_TOO_DEEP = "nesting_too_deep"
    # Evaluator
    DIVISION_BY_ZERO = "division_by_zero"
    NUMERIC_OVERFLOW = "numeric_overflow"


class ReckonError(Exception):
    """Base exception for all reckon errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ExpressionError(ReckonError):
    """
    Raised when an expression cannot be evaluated.

    The message never embeds the position; callers decide whether to show
    ``pos`` (see :class:`ErrorContext`).
    """

    def __init__(self, kind: ErrorKind, message: str, pos: int | None = None):
        self.kind = kind
        self.pos = pos
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind}, {self.message!r}, pos={self.pos})"


class LexError(ExpressionError):
    """
    Raised when the tokenizer meets text it cannot classify.

    Examples:
    - Malformed numeric literals (``3.5.2``, ``.5``, ``3.``)
    - Characters outside the language (``^``, ``%``, letters)
    """

    pass


class ParseError(ExpressionError):
    """
    Raised when the token sequence is not a valid expression.

    Examples:
    - Unclosed or stray parentheses
    - Missing operands
    - Tokens after a complete expression
    """

    pass


class EvalError(ExpressionError):
    """
    Raised when a well-formed expression has no finite result.

    Examples:
    - Division by zero
    - Overflow to infinity
    """

    pass


class ConfigError(ReckonError):
    """Raised when a reckon.toml file cannot be read or validated."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of an expression error.

    Attributes:
        source: The expression text the error refers to
        pos: 0-based offset into ``source``
    """

    source: str
    pos: int

    def format(self) -> str:
        """
        Format the location as a snippet with a caret marker.

        Returns:
            Two lines: the source, and a ``^`` under the offending column.
        """
        pos = min(max(self.pos, 0), len(self.source))
        # Expand tabs so the caret lines up with what a terminal shows
        line = self.source.expandtabs()
        column = len(self.source[:pos].expandtabs())
        return f"  {line}\n  {' ' * column}^"



def describe_error(
    error: ExpressionError,
    source: str | None = None,
    show_position: bool = True,
) -> str:
    """
    Render an expression error for display.

    Args:
        error: The failure to describe
        source: Expression text; when given, a caret snippet is appended
        show_position: Whether to mention the position at all

    Returns:
        ``message`` alone, or ``message at position N`` plus an optional snippet.
    """
    if not show_position or error.pos is None:
        return error.message

    text = f"{error.message} at position {error.pos}"
    if source:
        text += "\n" + ErrorContext(source=source, pos=error.pos).format()
    return text
