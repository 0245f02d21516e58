"""
Configuration for the diagnostic pipeline.

DiagnosticConfig validates itself at construction, so an invalid setting
fails before any statistic is computed.
"""

from dataclasses import dataclass

from pydiagnostics.core.validation import check_alpha, check_int


@dataclass(frozen=True)
class DiagnosticConfig:
    """
    Tuning parameters for run_diagnostics().

    Attributes:
        n_groups: Contiguous blocks for the Levene test (>= 2)
        alpha: Significance level for Levene and runs tests, in (0, 1)
        max_lag: Largest autocorrelation lag (>= 0; truncated to N - 1)
        span: Modified Daniell span for the periodogram (>= 1)

    Raises:
        InvalidConfigurationError: On any out-of-range value
    """
    n_groups: int = 4
    alpha: float = 0.05
    max_lag: int = 100
    span: int = 3

    def __post_init__(self):
        check_int(self.n_groups, 'n_groups', minimum=2)
        check_alpha(self.alpha)
        check_int(self.max_lag, 'max_lag', minimum=0)
        check_int(self.span, 'span', minimum=1)
