"""
reckon arithmetic expression language.

Tokenizer, parser, evaluator, and formatter for ``+ - * /``, parentheses
and unary minus over double-precision numbers.

Usage:
    from reckon.core.expression_lang import evaluate, format_number, parse_expr

    expr = parse_expr("2 + 3 * 4")
    format_number(evaluate(expr))
    # "14"
"""

from reckon.core.expression_lang.evaluator import evaluate
from reckon.core.expression_lang.formatter import format_number
from reckon.core.expression_lang.parser import parse, parse_expr
from reckon.core.expression_lang.tokenizer import tokenize

__all__ = ["evaluate", "format_number", "parse", "parse_expr", "tokenize"]
