"""
Common data types for trend regression.

Contains the frozen parameter payload that goes inside Result[P] envelopes.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class TrendParams:
    """
    Parameter payload for a straight-line fit y = intercept + slope * x.

    For fit_trend() x is the index 1..N; for fit_lag_model() x is the
    previous observation y_{t-1}.
    """
    regressor: str                 # 'index' or 'lag1'
    intercept: float
    slope: float
    intercept_se: float
    slope_se: float
    slope_t: float                 # slope / slope_se; +/-inf for an exact fit
    slope_p_value: float           # two-sided Student t on df_residual
    df_residual: int
    residual_std_error: float
    r_squared: float
    n_obs: int
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
