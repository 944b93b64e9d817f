"""
reckon - a command-line arithmetic evaluator.

Evaluates ``+ - * /`` expressions with parentheses and unary minus, and
reports malformed input with positioned diagnostics.
"""

from __future__ import annotations

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

# Re-export commonly used types for convenience
from .core.config import FormatConfig
from .core.engine import evaluate_expression
from .core.errors import ErrorKind, EvalError, ExpressionError, LexError, ParseError, ReckonError


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    # In editable mode, read directly from pyproject.toml for live updates
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    # Fall back to installed metadata
    try:
        return _metadata_version("reckon")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "evaluate_expression",
    "FormatConfig",
    "ReckonError",
    "ExpressionError",
    "LexError",
    "ParseError",
    "EvalError",
    "ErrorKind",
]
