"""
Text rendering for fitted models and prices.

Numbers are rounded half away from zero on their exact binary value, so
0.125 renders as "0.13" rather than Python's round-half-even "0.12".
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP

from pricefit.config import (
    SLOPE_DECIMALS,
    INTERCEPT_DECIMALS,
    DEGENERATE_EQUATION,
)


def _round_half_up(value: float, digits: int) -> Decimal:
    exact = Decimal(value)
    # Enough precision that quantize never overflows the context
    prec = max(exact.adjusted(), 0) + digits + 2
    return exact.quantize(
        Decimal(1).scaleb(-digits),
        rounding=ROUND_HALF_UP,
        context=Context(prec=prec),
    )


def to_fixed(value: float, digits: int) -> str:
    """
    Render value in fixed-point notation with exactly `digits` decimals.
    
    Never switches to scientific notation. Negative zero renders unsigned.
    
    Example:
        >>> to_fixed(2000.0, 4)
        '2000.0000'
        >>> to_fixed(-0.0, 2)
        '0.00'
    """
    if not math.isfinite(value):
        return str(value)
    value = value + 0.0  # -0.0 -> 0.0
    return f"{_round_half_up(value, digits):f}"


def format_equation(slope: float, intercept: float, *, degenerate: bool = False) -> str:
    """
    Render a fitted line as "y = {slope}x + {intercept}".
    
    Slope uses SLOPE_DECIMALS and intercept INTERCEPT_DECIMALS digits. A
    negative intercept keeps the literal "+" ("y = 1.0000x + -3.00").
    
    Args:
        slope: Fitted slope
        intercept: Fitted intercept
        degenerate: If True, return the vertical-line marker instead
    """
    if degenerate:
        return DEGENERATE_EQUATION
    return (
        f"y = {to_fixed(slope, SLOPE_DECIMALS)}x"
        f" + {to_fixed(intercept, INTERCEPT_DECIMALS)}"
    )


def format_money(value: float) -> str:
    """
    Render a price as whole US dollars with thousands separators.
    
    Non-finite values render as "-".
    
    Example:
        >>> format_money(150000.0)
        '$150,000'
        >>> format_money(-1234.5)
        '-$1,235'
    """
    if not math.isfinite(value):
        return "-"
    rounded = _round_half_up(abs(value), 0)
    sign = "-" if value < 0 else ""
    return f"{sign}${rounded:,f}"
