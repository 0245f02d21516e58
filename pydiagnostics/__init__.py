"""
pydiagnostics: exploratory diagnostics for a univariate numeric series.

Runs the classical battery used to decide whether a series behaves like
a fixed-location, fixed-variation random process: summary statistics,
autocorrelation, smoothed periodogram, linear trend, Levene test over
contiguous blocks, and the runs test.

Submodules:
    descriptive: Summary statistics, Tukey hinges, type-7 quantiles
    timeseries: Autocorrelation function and spectrum
    regression: Linear trend and lag-1 model
    anova: Levene / Brown-Forsythe test across contiguous groups
    hypothesis: Runs test for randomness
    pipeline: run_diagnostics() and DiagnosticReport
"""

__version__ = "0.1.0"

from pydiagnostics import descriptive
from pydiagnostics import timeseries
from pydiagnostics import regression
from pydiagnostics import anova
from pydiagnostics import hypothesis
from pydiagnostics import pipeline
from pydiagnostics.core import Series, load_series
from pydiagnostics.pipeline import run_diagnostics, DiagnosticConfig, DiagnosticReport

__all__ = [
    "__version__",
    "descriptive",
    "timeseries",
    "regression",
    "anova",
    "hypothesis",
    "pipeline",
    "Series",
    "load_series",
    "run_diagnostics",
    "DiagnosticConfig",
    "DiagnosticReport",
]
