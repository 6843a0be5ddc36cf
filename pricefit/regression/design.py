"""
Regression Design.

Design takes whatever collection of observations the caller has and
extracts x (predictor) and y (response) as validated float arrays.
Backends trust a Design; all checking happens here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pricefit.config import MIN_OBSERVATIONS
from pricefit.core.exceptions import ValidationError
from pricefit.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_consistent_length,
    check_min_samples,
)
from pricefit.observations.observation import Observation


@dataclass(frozen=True)
class RegressionDesign:
    """
    Simple linear regression design: one predictor, one response.

    Immutable after construction. Arrays preserve input order, which is the
    order sums are accumulated in.

    Construction:
        RegressionDesign.from_observations([(1, 5), (2, 7)])
        RegressionDesign.from_observations(training_set)
        RegressionDesign.from_arrays(x, y)
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_observations(cls, observations: Iterable[Observation | tuple[float, float]]) -> RegressionDesign:
        """
        Build Design from observations or (x, y) pairs.

        The count is checked before anything else, so fewer than
        MIN_OBSERVATIONS items always raises InsufficientDataError.

        Raises:
            InsufficientDataError: Fewer than MIN_OBSERVATIONS items
            ValidationError: An item is not an (x, y) pair of finite numbers
        """
        pairs = [_as_pair(obs, i) for i, obs in enumerate(observations)]
        check_min_samples(pairs, MIN_OBSERVATIONS, 'observations')

        arr = check_array(pairs, 'observations')
        return cls._build(arr[:, 0], arr[:, 1])

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> RegressionDesign:
        """Build Design directly from x and y arrays."""
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')

        # Accept column vectors
        if x_arr.ndim == 2 and x_arr.shape[1] == 1:
            x_arr = x_arr.ravel()
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()

        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, MIN_OBSERVATIONS, 'x')
        return cls._build(x_arr, y_arr)

    @classmethod
    def _build(cls, x: NDArray, y: NDArray) -> RegressionDesign:
        """Internal builder with validation."""
        x = np.ascontiguousarray(x, dtype=np.float64)
        y = np.ascontiguousarray(y, dtype=np.float64)
        check_finite(x, 'x')
        check_finite(y, 'y')
        return cls(_x=x, _y=y, _n=x.shape[0])

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Predictor values (n,)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response values (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n


def _as_pair(obs: Any, index: int) -> tuple[Any, Any]:
    """Unpack an Observation or any 2-item sequence into (x, y)."""
    if isinstance(obs, Observation):
        return obs.x, obs.y
    try:
        x, y = obs
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"observations[{index}]: expected an (x, y) pair, got {obs!r}"
        ) from e
    return x, y
