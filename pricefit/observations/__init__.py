"""
Observations: the samples a line is fitted to.

Public API:
    Observation: immutable (x, y) sample with optional id
    TrainingSet: bounded, editable collection of observations
    parse_number, validate_area, validate_price: form-input helpers

Example:
    >>> from pricefit.observations import TrainingSet, parse_number
    >>> ts = TrainingSet()
    >>> ts.add(parse_number("120"), parse_number("250,000"))
"""

from pricefit.observations.observation import Observation
from pricefit.observations.parsing import parse_number, validate_area, validate_price
from pricefit.observations.training_set import TrainingSet

__all__ = [
    "Observation",
    "TrainingSet",
    "parse_number",
    "validate_area",
    "validate_price",
]
