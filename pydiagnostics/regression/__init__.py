"""
Straight-line regression diagnostics.

Public API:
    fit_trend(series) -> TrendSolution        # drift in location
    fit_lag_model(series) -> TrendSolution    # lag-1 autoregressive follow-up
"""

from pydiagnostics.regression.solvers import fit_trend, fit_lag_model
from pydiagnostics.regression._common import TrendParams
from pydiagnostics.regression.solution import TrendSolution

__all__ = [
    "fit_trend",
    "fit_lag_model",
    "TrendParams",
    "TrendSolution",
]
