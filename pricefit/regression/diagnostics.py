"""
Plot-ready diagnostics for a fitted line.

Chart layers need two things from a fit: the segment of the line spanning
the observed x-range, and each observation's residual. Both are computed
here so rendering code never evaluates the model itself.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pricefit.observations.observation import Observation
from pricefit.regression.design import _as_pair
from pricefit.regression.solution import FitResult, FittedLine
from pricefit.regression.solvers import predict


@dataclass(frozen=True)
class Residual:
    """One observation compared with the line."""
    x: float
    actual: float
    predicted: float
    residual: float


def _pairs(observations: Iterable[Observation | tuple[float, float]]) -> list[tuple[float, float]]:
    return [tuple(map(float, _as_pair(obs, i))) for i, obs in enumerate(observations)]


def regression_segment(
    line: FittedLine | FitResult,
    observations: Iterable[Observation | tuple[float, float]],
) -> tuple[tuple[float, float], ...]:
    """
    Endpoints of the fitted line over the observed x-range.

    Returns:
        ((min_x, ŷ(min_x)), (max_x, ŷ(max_x))), or () with no observations
    """
    xs = [x for x, _ in _pairs(observations)]
    if not xs:
        return ()
    lo, hi = min(xs), max(xs)
    return ((lo, predict(lo, line)), (hi, predict(hi, line)))


def residual_table(
    line: FittedLine | FitResult,
    observations: Iterable[Observation | tuple[float, float]],
) -> tuple[Residual, ...]:
    """Residual of every observation, in input order."""
    table = []
    for x, y in _pairs(observations):
        y_hat = predict(x, line)
        table.append(Residual(x=x, actual=y, predicted=y_hat, residual=y - y_hat))
    return tuple(table)
