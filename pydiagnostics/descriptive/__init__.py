"""
Descriptive statistics module.

Public API:
    describe(series)       - All summary statistics at once
    fivenum(x)             - Tukey five-number summary (R fivenum)
    quantile(x, probs)     - Type-7 quantiles (R quantile default)
"""

from pydiagnostics.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    FiveNumberSummary,
)
from pydiagnostics.descriptive.solvers import describe, fivenum, quantile

__all__ = [
    "describe",
    "fivenum",
    "quantile",
    "DescriptiveParams",
    "DescriptiveSolution",
    "FiveNumberSummary",
]
