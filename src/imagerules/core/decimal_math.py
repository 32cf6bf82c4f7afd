from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, localcontext
from typing import Union

Number = Union[int, str, Decimal]


def _quantum(scale: int) -> Decimal:
    return Decimal(1).scaleb(-scale)


def _working_precision(value: Decimal, scale: int) -> int:
    # Enough significant digits to hold every integer digit plus `scale` fractional ones.
    return max(28, value.adjusted() + scale + 3)


def truncate(value: Number, scale: int) -> Decimal:
    """Drop every fractional digit past `scale` (toward zero, never rounding up)."""
    d = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = _working_precision(d, scale)
        ctx.rounding = ROUND_DOWN
        return d.quantize(_quantum(scale))


def divide(numerator: Number, denominator: Number, scale: int) -> Decimal:
    """
    numerator / denominator truncated to `scale` fractional digits.

    Raises ZeroDivisionError for a zero denominator.
    """
    num = Decimal(numerator)
    den = Decimal(denominator)
    if den == 0:
        raise ZeroDivisionError(f"division of {num} by zero")
    if num == 0:
        return truncate(num, scale)
    with localcontext() as ctx:
        ctx.prec = max(28, num.adjusted() - den.adjusted() + scale + 3)
        ctx.rounding = ROUND_DOWN
        return (num / den).quantize(_quantum(scale))


def compare(left: Number, right: Number, scale: int) -> int:
    """Compare two values on their first `scale` fractional digits. Returns -1, 0 or 1."""
    a = truncate(left, scale)
    b = truncate(right, scale)
    if a == b:
        return 0
    return -1 if a < b else 1
