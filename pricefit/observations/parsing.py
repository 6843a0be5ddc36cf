"""
Parsing and range checks for user-entered numbers.

Text arrives from a form field; these helpers turn it into floats and
reject values outside the accepted ranges with end-user messages.
"""

import math
import re

from pricefit.config import AREA_MAX, PRICE_MAX
from pricefit.core.validation import check_positive_bounded

# Plain ASCII decimal with optional sign and exponent: "12", "-1.5", ".5", "1e3"
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(text: str) -> float:
    """
    Parse a user-entered number.
    
    Thousands separators (",") and surrounding whitespace are ignored.
    Blank or unparsable input yields NaN rather than raising, so that the
    range check reports it as missing. Only plain ASCII decimal notation is
    accepted; "1_000", "inf" and non-ASCII digits are unparsable.
    
    Example:
        >>> parse_number(" 250,000 ")
        250000.0
        >>> parse_number("")
        nan
    """
    cleaned = text.replace(",", "").strip()
    if not _NUMBER.fullmatch(cleaned):
        return math.nan
    return float(cleaned)


def validate_area(value: float) -> float:
    """
    Check a floor area lies in (0, AREA_MAX].
    
    Returns:
        The value as a float
        
    Raises:
        ValidationError: "Area is required.", "Area must be a positive
            number." or "Area must be ≤ 10,000."
    """
    value = float(value)
    check_positive_bounded(value, AREA_MAX, "Area")
    return value


def validate_price(value: float) -> float:
    """
    Check a price lies in (0, PRICE_MAX].
    
    Raises:
        ValidationError: "Price is required.", "Price must be a positive
            number." or "Price must be ≤ $100,000,000."
    """
    value = float(value)
    check_positive_bounded(value, PRICE_MAX, "Price", upper_label=f"${PRICE_MAX:,}")
    return value
