"""
Solver dispatch for regression.

This module provides the fit() and predict() functions (public API) and
backend selection.
"""

from collections.abc import Iterable
from typing import Literal, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pricefit.core.validation import check_array
from pricefit.observations.observation import Observation
from pricefit.regression.design import RegressionDesign
from pricefit.regression.solution import FitResult, FittedLine
from pricefit.regression.backends.cpu import CPUClosedFormBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_closed_form']


def fit(
    observations: Iterable[Observation | tuple[float, float]],
    *,
    backend: BackendChoice = 'auto',
) -> FitResult:
    """
    Fit a straight line to observations by ordinary least squares.

    Solves
        min_{m, b} Σ (y − (m·x + b))²

    and reports R² and RMSE for the fitted line on the same data.

    Args:
        observations: Observations, (x, y) pairs, a TrainingSet, or an
            (n, 2) array. Order does not matter to the answer but is the
            order sums are accumulated in.
        backend: Computational backend to use ('auto' or 'cpu')

    Returns:
        FitResult with line, r2, rmse and equation_text. If every x is
        equal the result is the degenerate sentinel: slope, intercept, r2
        and rmse all zero, equation_text "Undefined (Vertical Line)" and
        is_degenerate True.

    Raises:
        InsufficientDataError: Fewer than two observations
        ValidationError: Non-numeric or non-finite values

    Example:
        >>> result = fit([(50, 100_000), (100, 200_000), (150, 300_000)])
        >>> result.equation_text
        'y = 2000.0000x + 0.00'
        >>> predict(75, result.line)
        150000.0
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    design = RegressionDesign.from_observations(observations)

    # === Solve ===
    result = _get_backend(backend).solve(design)

    # === Wrap and Return ===
    return FitResult(_result=result)


def fit_arrays(
    x: ArrayLike,
    y: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> FitResult:
    """
    Fit a straight line to parallel x and y arrays.

    Same semantics as fit(); see there.

    Raises:
        InsufficientDataError: Fewer than two observations
        DimensionError: x and y differ in length or are not 1D
        ValidationError: Non-numeric or non-finite values
    """
    design = RegressionDesign.from_arrays(x, y)
    result = _get_backend(backend).solve(design)
    return FitResult(_result=result)


@overload
def predict(x: float, line: FittedLine | FitResult) -> float: ...
@overload
def predict(x: NDArray, line: FittedLine | FitResult) -> NDArray: ...


def predict(x, line):
    """
    Evaluate a fitted line at x.

    No range checking is done; NaN or infinite inputs propagate to the
    output. Array-likes are evaluated elementwise. Strings and other
    non-numeric input raise ValidationError for scalars and arrays alike.

    Args:
        x: Scalar or array-like of predictor values
        line: FittedLine, or a FitResult whose line is used

    Returns:
        slope·x + intercept, as a float for scalar x or an ndarray

    Raises:
        ValidationError: If x is not numeric
    """
    if isinstance(line, FitResult):
        line = line.line

    x_arr = check_array(x, 'x')
    if x_arr.ndim == 0:
        return line.slope * float(x_arr) + line.intercept

    return line.slope * x_arr + line.intercept


def _get_backend(choice: BackendChoice):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_closed_form'):
        return CPUClosedFormBackend()

    raise ValueError(f"Unknown backend: {choice!r}")
