"""
Core infrastructure for pydiagnostics.

Shared abstractions used by every domain subpackage (descriptive,
timeseries, regression, anova, hypothesis, pipeline).

Key components:
    series: Immutable univariate Series input
    datasource: Loading a Series from a text resource
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing utilities
"""

from pydiagnostics.core.series import Series
from pydiagnostics.core.result import Result
from pydiagnostics.core.datasource import load_series
from pydiagnostics.core.exceptions import (
    PyDiagnosticsError,
    ValidationError,
    DimensionError,
    InsufficientDataError,
    EmptySeriesError,
    InvalidGroupCountError,
    InvalidConfigurationError,
    NumericalError,
    DegenerateInputError,
    DiagnosticStageError,
)

__all__ = [
    # Data
    "Series",
    "load_series",
    # Result
    "Result",
    # Exceptions
    "PyDiagnosticsError",
    "ValidationError",
    "DimensionError",
    "InsufficientDataError",
    "EmptySeriesError",
    "InvalidGroupCountError",
    "InvalidConfigurationError",
    "NumericalError",
    "DegenerateInputError",
    "DiagnosticStageError",
]
