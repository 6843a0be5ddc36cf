"""
pricefit: least-squares price prediction from floor area.

Fits a straight line to (area, price) observations, reports how well it
fits, and predicts prices for new areas. Pure functions over in-memory
data; storage and rendering belong to the caller.

Submodules:
    regression: fit(), predict() and plot diagnostics
    observations: Observation, TrainingSet and input validation
    core: result envelope, exceptions, validation, formatting
"""

__version__ = "0.1.0"

from pricefit import regression
from pricefit import observations
from pricefit.core.exceptions import (
    PriceFitError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    CapacityError,
    ObservationNotFoundError,
)
from pricefit.core.formatting import format_money
from pricefit.observations import Observation, TrainingSet
from pricefit.regression import FitResult, FittedLine, fit, fit_arrays, predict

__all__ = [
    "__version__",
    "regression",
    "observations",
    "fit",
    "fit_arrays",
    "predict",
    "FitResult",
    "FittedLine",
    "Observation",
    "TrainingSet",
    "format_money",
    "PriceFitError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "CapacityError",
    "ObservationNotFoundError",
]
