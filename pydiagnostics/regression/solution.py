"""
Regression solution types.

TrendSolution wraps Result[TrendParams] and provides accessors and an
R-style coefficient table.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydiagnostics.core.result import Result
from pydiagnostics.regression._common import TrendParams


_REGRESSOR_LABELS = {'index': 'Index', 'lag1': 'Y[t-1]'}


@dataclass
class TrendSolution:
    """
    User-facing result for a straight-line least-squares fit.

    Produced by fit_trend() and fit_lag_model().
    """
    _result: Result[TrendParams]

    @property
    def regressor(self) -> str:
        return self._result.params.regressor

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept_se(self) -> float:
        return self._result.params.intercept_se

    @property
    def slope_se(self) -> float:
        return self._result.params.slope_se

    @property
    def slope_t(self) -> float:
        return self._result.params.slope_t

    @property
    def slope_p_value(self) -> float:
        return self._result.params.slope_p_value

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def residual_std_error(self) -> float:
        return self._result.params.residual_std_error

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style coefficient table."""
        label = _REGRESSOR_LABELS.get(self.regressor, self.regressor)
        lines = [
            f"Linear Fit: Y = A0 + A1 * {label}",
            "=" * 60,
            f"{'Term':<12} {'Estimate':>14} {'Std.Error':>12} {'t value':>10}",
            "-" * 60,
        ]
        intercept_t = (
            self.intercept / self.intercept_se if self.intercept_se > 0 else float('nan')
        )
        lines.append(
            f"{'A0':<12} {self.intercept:14.6g} {self.intercept_se:12.6g} {intercept_t:10.3f}"
        )
        lines.append(
            f"{'A1':<12} {self.slope:14.6g} {self.slope_se:12.6g} {self.slope_t:10.3f}"
        )
        lines.append("-" * 60)
        lines.append(
            f"Residual Std. Error: {self.residual_std_error:.6g} on {self.df_residual} DF"
        )
        lines.append(f"R-squared: {self.r_squared:.6f}")
        lines.append(f"Slope p-value: {self.slope_p_value:.4e}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TrendSolution(regressor={self.regressor!r}, slope={self.slope:.6g}, "
            f"t={self.slope_t:.4g}, df={self.df_residual})"
        )
