"""
The single entry point from callers into the expression engine.

``evaluate_expression`` runs tokenize -> parse -> evaluate -> format for one
expression. Every call is independent; nothing is kept between calls.
"""

from __future__ import annotations

import logging

from reckon.core.config import FormatConfig
from reckon.core.expression_lang.evaluator import evaluate
from reckon.core.expression_lang.formatter import format_number
from reckon.core.expression_lang.parser import parse_expr

logger = logging.getLogger(__name__)


def evaluate_expression(text: str, config: FormatConfig | None = None) -> str:
    """Evaluate an arithmetic expression and format the result.

    Callers are expected to pass non-blank, trimmed text; blank text is
    still answered, with an ``UNEXPECTED_END_OF_INPUT`` error.

    Args:
        text: The whole expression, e.g. ``"2 + 3 * 4"``.
        config: Formatting settings; defaults to ``FormatConfig()``.

    Returns:
        The formatted result without a trailing newline, e.g. ``"14"``.

    Raises:
        ExpressionError: ``LexError``, ``ParseError`` or ``EvalError``
            carrying the kind, message and position of the first problem.
    """
    config = config or FormatConfig()

    expr = parse_expr(text)
    logger.debug("Parsed %r as %s", text, expr)
    value = evaluate(expr)
    result = format_number(value, config.precision)

    logger.debug("Evaluated %r -> %r (formatted %s)", text, value, result)
    return result
