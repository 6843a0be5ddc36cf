"""
CPU reference backend for simple linear regression.

Solves the one-predictor normal equations in closed form from running
sums. Sums are accumulated in input order with plain float arithmetic so
the same input sequence always produces bit-identical output.
"""

from typing import Any

from pricefit.config import DEGENERATE_EQUATION
from pricefit.core.result import Result
from pricefit.core.compute.timing import Timer
from pricefit.regression.design import RegressionDesign
from pricefit.regression.solution import LineParams


class CPUClosedFormBackend:
    """
    CPU backend using the closed-form OLS solution.

    Takes a RegressionDesign and produces Result[LineParams].
    """

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: RegressionDesign) -> Result[LineParams]:
        """
        Fit y = slope·x + intercept by ordinary least squares.

        Algorithm:
            1. One pass for Σx, Σy, Σxy, Σx²
            2. denominator = n·Σx² − (Σx)²; zero means every x is equal
            3. slope = (n·Σxy − Σx·Σy) / denominator
               intercept = (Σy − slope·Σx) / n
            4. Second pass for SStot and SSres

        Args:
            design: Validated regression design

        Returns:
            Result containing LineParams. Degenerate input yields zeroed
            params with degenerate=True rather than an error.
        """
        timer = Timer()
        timer.start()

        xs = design.x.tolist()
        ys = design.y.tolist()
        n = design.n

        # === Running Sums ===
        with timer.section('sums'):
            sum_x = 0.0
            sum_y = 0.0
            sum_xy = 0.0
            sum_xx = 0.0
            for x, y in zip(xs, ys):
                sum_x += x
                sum_y += y
                sum_xy += x * y
                sum_xx += x * x

        denominator = n * sum_xx - sum_x * sum_x

        if denominator == 0:
            timer.stop()
            params = LineParams(
                slope=0.0,
                intercept=0.0,
                ss_res=0.0,
                ss_tot=0.0,
                n_observations=n,
                degenerate=True,
            )
            return Result(
                params=params,
                info={'method': 'closed_form', 'degenerate': True, 'denominator': denominator},
                timing=timer.result(),
                backend_name=self.name,
                warnings=(f"all x values are equal: {DEGENERATE_EQUATION}",),
            )

        # === Coefficients ===
        with timer.section('solve'):
            slope = (n * sum_xy - sum_x * sum_y) / denominator
            intercept = (sum_y - slope * sum_x) / n

        # === Sums of Squares ===
        with timer.section('statistics'):
            mean_y = sum_y / n
            ss_tot = 0.0
            ss_res = 0.0
            for x, y in zip(xs, ys):
                deviation = y - mean_y
                residual = y - (slope * x + intercept)
                ss_tot += deviation * deviation
                ss_res += residual * residual

        timer.stop()

        params = LineParams(
            slope=slope,
            intercept=intercept,
            ss_res=ss_res,
            ss_tot=ss_tot,
            n_observations=n,
        )

        info: dict[str, Any] = {
            'method': 'closed_form',
            'degenerate': False,
            'denominator': denominator,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
