"""
Solver dispatch for trend regression.

Public API:
    fit_trend(series) -> TrendSolution        # y on index 1..N
    fit_lag_model(series) -> TrendSolution    # y_t on y_{t-1}
"""

import math
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pydiagnostics.core.compute.timing import Timer
from pydiagnostics.core.exceptions import DegenerateInputError
from pydiagnostics.core.result import Result
from pydiagnostics.core.series import Series
from pydiagnostics.core.validation import check_min_samples
from pydiagnostics.regression._common import TrendParams
from pydiagnostics.regression._ols import ols_qr
from pydiagnostics.regression.solution import TrendSolution


def fit_trend(series: ArrayLike | Series) -> TrendSolution:
    """
    Fit y = A0 + A1 * t by ordinary least squares, t = 1..N.

    A slope t-value far from zero indicates a drift in location.

    Args:
        series: Series or 1D numeric array-like

    Returns:
        TrendSolution with slope, its standard error, t-value and
        df_residual = N - 2. An exact line gives slope_se = 0 and
        t = +/-inf with a RuntimeWarning.

    Raises:
        InsufficientDataError: If the series has fewer than 3 observations

    Examples:
        >>> result = fit_trend(series)
        >>> result.slope_t, result.df_residual
        >>> print(result.summary())
    """
    s = Series.coerce(series)
    check_min_samples(s.n, 3, 'fit_trend')
    return _fit_line(s.index, s.values, regressor='index')


def fit_lag_model(series: ArrayLike | Series) -> TrendSolution:
    """
    Fit y_t = A0 + A1 * y_{t-1} by ordinary least squares.

    The usual follow-up once the diagnostics show a random walk: the
    residuals of this model should behave like white noise.

    Args:
        series: Series or 1D numeric array-like

    Returns:
        TrendSolution on N - 1 pairs, df_residual = N - 3

    Raises:
        InsufficientDataError: If the series has fewer than 4 observations
        DegenerateInputError: If y_1..y_{N-1} is constant
    """
    s = Series.coerce(series)
    check_min_samples(s.n, 4, 'fit_lag_model')
    y = s.values
    if np.ptp(y[:-1]) == 0:
        raise DegenerateInputError("fit_lag_model: y[1..N-1] is constant")
    return _fit_line(y[:-1], y[1:], regressor='lag1')


def _fit_line(x: NDArray, y: NDArray, *, regressor: str) -> TrendSolution:
    timer = Timer()
    timer.start()
    warnings_list: list[str] = []

    with timer.section('qr_solve'):
        X = np.column_stack([np.ones_like(x), x])
        fit = ols_qr(X, y, regressor=regressor)

    with timer.section('statistics'):
        intercept, slope = (float(b) for b in fit.coefficients)
        intercept_se, slope_se = (float(v) for v in fit.standard_errors)
        df = fit.df_residual
        n = len(y)
        eps = np.finfo(np.float64).eps

        # Residuals at rounding level relative to the data count as an exact fit
        exact = fit.rss <= n * eps * max(fit.tss, float(y @ y))

        if not exact:
            slope_t = slope / slope_se
            p_value = float(2.0 * sp_stats.t.sf(abs(slope_t), df))
        else:
            if abs(slope) * np.ptp(x) <= n * eps * float(np.max(np.abs(y))):
                slope = 0.0
            intercept_se = slope_se = 0.0
            slope_t = math.copysign(math.inf, slope) if slope != 0 else math.nan
            p_value = 0.0 if slope != 0 else math.nan
            msg = "exact fit: residual variance is zero, slope t-value is not finite"
            warnings_list.append(msg)
            warnings.warn(msg, RuntimeWarning, stacklevel=3)

        if exact:
            r_squared = 1.0 if slope != 0 else 0.0
        else:
            r_squared = 1.0 - fit.rss / fit.tss

    timer.stop()

    params = TrendParams(
        regressor=regressor,
        intercept=intercept,
        slope=slope,
        intercept_se=intercept_se,
        slope_se=slope_se,
        slope_t=slope_t,
        slope_p_value=p_value,
        df_residual=df,
        residual_std_error=math.sqrt(fit.rss / df),
        r_squared=r_squared,
        n_obs=len(y),
        residuals=fit.residuals,
        fitted_values=fit.fitted_values,
    )

    result = Result(
        params=params,
        info={'method': 'qr', 'regressor': regressor},
        timing=timer.result(),
        backend_name='cpu_qr',
        warnings=tuple(warnings_list),
    )
    return TrendSolution(_result=result)
