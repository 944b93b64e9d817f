"""
Canonical number formatting for reckon results.

Rounding works on the shortest decimal string that round-trips the double
(``repr``), so ``2.675`` rounds like the literal a user typed rather than
like its binary expansion ``2.67499999...``. Ties round away from zero.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from reckon.core.errors import ErrorKind, EvalError

DEFAULT_PRECISION = 10

# The shortest repr of any double has no digits past this place (5e-324)
_MAX_PLACES = 340


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a finite double as a plain decimal string.

    Args:
        value: The number to render.
        precision: Maximum digits after the decimal point.

    Returns:
        ``"3"`` for integral results, ``"3.5"`` with trailing zeros trimmed
        otherwise. Never ``-0``, never scientific notation.

    Raises:
        EvalError: If ``value`` is infinite or NaN.
        ValueError: If ``precision`` is negative.
    """
    if not math.isfinite(value):
        raise EvalError(ErrorKind.NUMERIC_OVERFLOW, f"Cannot format non-finite value {value!r}")
    if precision < 0:
        raise ValueError(f"precision must be >= 0, got {precision}")

    places = min(precision, _MAX_PLACES)
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits for the integer part plus every requested decimal
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

    if rounded.is_zero():
        return "0"

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
