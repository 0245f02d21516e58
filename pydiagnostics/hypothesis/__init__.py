"""
Hypothesis testing module.

Public API:
    runs_test(series, center)   - Runs test for randomness (normal approximation)
"""

from pydiagnostics.hypothesis.solvers import runs_test
from pydiagnostics.hypothesis._common import RunsParams, VALID_ALTERNATIVES
from pydiagnostics.hypothesis.solution import RunsSolution

__all__ = [
    "runs_test",
    "RunsParams",
    "RunsSolution",
    "VALID_ALTERNATIVES",
]
