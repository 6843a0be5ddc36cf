"""
Regression solution types.

Contains the fitted line, the parameter payload computed by backends,
and the user-facing result wrapper.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pricefit.core.formatting import format_equation
from pricefit.core.result import Result


@dataclass(frozen=True)
class FittedLine:
    """
    Parameters of y = slope·x + intercept.

    Produced by fit(); may also be constructed directly to predict from a
    known line.
    """
    slope: float
    intercept: float


@dataclass(frozen=True)
class LineParams:
    """
    Parameter payload for simple linear regression.

    This is the immutable data computed by backends. For degenerate input
    (no variance in x) slope, intercept and both sums of squares are zero.
    """
    slope: float
    intercept: float
    ss_res: float
    ss_tot: float
    n_observations: int
    degenerate: bool = False


@dataclass(frozen=True)
class FitResult:
    """
    User-facing regression results.

    Wraps the backend Result and derives the fit-quality metrics from the
    sums of squares. Immutable; discard it when the observations change.
    """
    _result: Result[LineParams]

    @property
    def line(self) -> FittedLine:
        params = self._result.params
        return FittedLine(slope=params.slope, intercept=params.intercept)

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def ss_res(self) -> float:
        """Residual sum of squares Σ(y − ŷ)²."""
        return self._result.params.ss_res

    @property
    def ss_tot(self) -> float:
        """Total sum of squares Σ(y − ȳ)²."""
        return self._result.params.ss_tot

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def is_degenerate(self) -> bool:
        """True when all x values were identical and no line was fitted."""
        return self._result.params.degenerate

    @property
    def r2(self) -> float:
        """
        Coefficient of determination, 1 − SSres/SStot.

        Zero when y has no variance. Not clamped: values below zero mean
        the line does worse than predicting the mean.
        """
        if self.ss_tot == 0:
            return 0.0
        return 1.0 - self.ss_res / self.ss_tot

    @property
    def rmse(self) -> float:
        """Root-mean-squared residual, sqrt(SSres / n), in units of y."""
        return math.sqrt(self.ss_res / self.n_observations)

    @property
    def equation_text(self) -> str:
        return format_equation(self.slope, self.intercept, degenerate=self.is_degenerate)

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, str]:
        return self._result.provenance

    def summary(self) -> str:
        """Generate a plain-text summary of the fit."""
        lines = [
            "Simple Linear Regression Results",
            "=" * 60,
            f"Observations: {self.n_observations}",
            f"Equation: {self.equation_text}",
            "-" * 60,
            f"Slope: {self.slope:18.6f}",
            f"Intercept: {self.intercept:14.6f}",
            f"R-squared: {self.r2:14.6f}",
            f"RMSE: {self.rmse:19.6f}",
            f"SS residual: {self.ss_res:.6g}",
            f"SS total: {self.ss_tot:.6g}",
            "-" * 60,
        ]
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"FitResult(n={self.n_observations}, slope={self.slope:.4f}, "
            f"intercept={self.intercept:.2f}, r2={self.r2:.4f})"
        )
