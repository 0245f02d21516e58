"""
Sample autocorrelation function.

Algorithm (matches R's acf(type='correlation')):

    d_t  = y_t - mean(y)
    c_h  = (1/N) * sum_{t=1}^{N-h} d_t * d_{t+h}
    r_h  = c_h / c_0

c_0 is the population variance (divisor N) at every lag, so the
coefficients form a positive semi-definite sequence. r_0 is exactly 1.
"""

import numpy as np
from numpy.typing import NDArray

from pydiagnostics.core.exceptions import DegenerateInputError, InvalidConfigurationError
from pydiagnostics.core.validation import check_int
from pydiagnostics.timeseries._common import AcfParams


def _centered_denominator(y: NDArray) -> tuple[NDArray, float]:
    d = y - np.mean(y)
    ss = float(d @ d)
    if ss == 0.0:
        raise DegenerateInputError(
            "autocorrelation undefined for a constant series (zero variance)"
        )
    return d, ss


def autocorrelation(y: NDArray, lag: int) -> float:
    """
    Sample autocorrelation at a single lag.

    Args:
        y: 1D float64 array
        lag: Lag h with 0 <= h < len(y)

    Raises:
        DegenerateInputError: If y is constant
        InvalidConfigurationError: If lag is outside [0, len(y) - 1]
    """
    n = len(y)
    lag = check_int(lag, 'lag', minimum=0)
    if lag >= n:
        raise InvalidConfigurationError(
            f"lag must be in [0, {n - 1}], got {lag}", parameter='lag', value=lag,
        )
    d, ss = _centered_denominator(y)
    if lag == 0:
        return 1.0
    return float(d[: n - lag] @ d[lag:]) / ss


def acf_impl(y: NDArray, max_lag: int) -> AcfParams:
    """
    Autocorrelation coefficients for lags 0..max_lag.

    max_lag must already be clamped to len(y) - 1 by the caller.
    """
    n = len(y)
    d, ss = _centered_denominator(y)

    coefs = np.empty(max_lag + 1, dtype=np.float64)
    coefs[0] = 1.0
    for h in range(1, max_lag + 1):
        coefs[h] = (d[: n - h] @ d[h:]) / ss

    return AcfParams(
        lags=np.arange(max_lag + 1),
        coefficients=coefs,
        n_obs=n,
        max_lag=max_lag,
        conf_bound=1.96 / np.sqrt(n),
    )
