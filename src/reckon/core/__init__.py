"""reckon core: the expression engine, its errors, and configuration."""

from reckon.core.config import FormatConfig
from reckon.core.engine import evaluate_expression
from reckon.core.errors import ErrorKind, EvalError, ExpressionError, LexError, ParseError

__all__ = [
    "ErrorKind",
    "EvalError",
    "ExpressionError",
    "FormatConfig",
    "LexError",
    "ParseError",
    "evaluate_expression",
]
