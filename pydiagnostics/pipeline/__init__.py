"""
Diagnostic pipeline.

Public API:
    run_diagnostics(series, config) -> DiagnosticReport
    DiagnosticConfig(n_groups=4, alpha=0.05, max_lag=100, span=3)
"""

from pydiagnostics.pipeline.config import DiagnosticConfig
from pydiagnostics.pipeline.report import DiagnosticReport
from pydiagnostics.pipeline.runner import run_diagnostics

__all__ = [
    "run_diagnostics",
    "DiagnosticConfig",
    "DiagnosticReport",
]
