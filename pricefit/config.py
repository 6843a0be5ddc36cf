"""
Configuration constants for pricefit.

This module is the SINGLE SOURCE OF TRUTH for limits and display settings
shared by the regression core and the observation helpers. Import from here,
never hard-code the numbers.

Usage:
    from pricefit.config import MIN_OBSERVATIONS, DEFAULT_CAPACITY

    if len(points) < MIN_OBSERVATIONS:
        ...
"""

# Fewest observations for which a line can be fitted
MIN_OBSERVATIONS = 2

# Maximum number of observations a TrainingSet holds unless told otherwise
DEFAULT_CAPACITY = 50

# Accepted input ranges (exclusive lower bound of zero, inclusive upper bound)
AREA_MAX = 10_000
PRICE_MAX = 100_000_000

# Fixed-point digits used when rendering the fitted equation
SLOPE_DECIMALS = 4
INTERCEPT_DECIMALS = 2

# Equation text reported when all x values coincide
DEGENERATE_EQUATION = "Undefined (Vertical Line)"

__all__ = [
    'MIN_OBSERVATIONS',
    'DEFAULT_CAPACITY',
    'AREA_MAX',
    'PRICE_MAX',
    'SLOPE_DECIMALS',
    'INTERCEPT_DECIMALS',
    'DEGENERATE_EQUATION',
]
