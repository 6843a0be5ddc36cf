"""
Core infrastructure for pricefit.

This module provides shared abstractions and utilities used by the
domain-specific submodules (regression, observations).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    formatting: Equation and currency rendering
    compute: Timing and tolerance tiers
"""

from pricefit.core.result import Result
from pricefit.core.exceptions import (
    PriceFitError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    CapacityError,
    ObservationNotFoundError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PriceFitError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "CapacityError",
    "ObservationNotFoundError",
]
