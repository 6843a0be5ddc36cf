"""
Simple linear regression.

This module fits y = slope·x + intercept by ordinary least squares and
evaluates the fitted line.

Public API:
    fit(observations) -> FitResult
    fit_arrays(x, y) -> FitResult
    predict(x, line) -> float

fit() handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pricefit.regression import fit, predict
    >>> result = fit([(1, 5), (2, 7), (3, 9), (4, 11)])
    >>> result.equation_text
    'y = 2.0000x + 3.00'
    >>> predict(10, result.line)
    23.0
"""

from pricefit.regression.design import RegressionDesign
from pricefit.regression.solution import FitResult, FittedLine, LineParams
from pricefit.regression.solvers import fit, fit_arrays, predict
from pricefit.regression.diagnostics import Residual, regression_segment, residual_table

__all__ = [
    "fit",
    "fit_arrays",
    "predict",
    "RegressionDesign",
    "FitResult",
    "FittedLine",
    "LineParams",
    "Residual",
    "regression_segment",
    "residual_table",
]
