"""
Time-series diagnostics.

Public API:
    acf(series, max_lag)           - Sample autocorrelation function
    spectrum(series, span, ...)    - Modified-Daniell smoothed periodogram
    autocorrelation(values, lag)   - Single coefficient on a raw array
"""

from pydiagnostics.timeseries.solvers import acf, spectrum
from pydiagnostics.timeseries._acf import autocorrelation
from pydiagnostics.timeseries._common import AcfParams, SpectrumParams
from pydiagnostics.timeseries.solution import AcfSolution, SpectrumSolution

__all__ = [
    "acf",
    "spectrum",
    "autocorrelation",
    "AcfParams",
    "SpectrumParams",
    "AcfSolution",
    "SpectrumSolution",
]
