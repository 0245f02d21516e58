"""
Common data types for time-series diagnostics.

Frozen parameter payloads that go inside Result[P] envelopes.
Payloads are plain data containers with no computation.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class AcfParams:
    """Parameter payload for the sample autocorrelation function."""
    lags: NDArray[np.integer[Any]]          # 0..max_lag
    coefficients: NDArray[np.floating[Any]]
    n_obs: int
    max_lag: int                            # after truncation to n_obs - 1
    conf_bound: float                       # 1.96 / sqrt(n_obs)


@dataclass(frozen=True)
class SpectrumParams:
    """Parameter payload for the smoothed periodogram."""
    frequencies: NDArray[np.floating[Any]]  # k/N, k = 1..N//2
    power: NDArray[np.floating[Any]]
    n_obs: int
    span: int
    kernel_weights: NDArray[np.floating[Any]]   # modified Daniell, length 2m+1
    taper: float
    detrend: bool
    df: float                               # equivalent degrees of freedom
    bandwidth: float
