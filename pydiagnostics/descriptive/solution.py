"""
Descriptive statistics solution types.

Contains the parameter payloads and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydiagnostics.core.result import Result


@dataclass(frozen=True)
class FiveNumberSummary:
    """Tukey five-number summary; values are non-decreasing in field order."""
    minimum: float
    lower_hinge: float
    median: float
    upper_hinge: float
    maximum: float

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return (self.minimum, self.lower_hinge, self.median,
                self.upper_hinge, self.maximum)


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics of one series.

    variance uses divisor n - 1. q1/q3/iqr are type-7 quantiles and
    generally differ from the Tukey hinges in fivenum.
    """
    n: int
    mean: float
    variance: float
    sd: float
    se_mean: float
    range: float
    fivenum: FiveNumberSummary
    q1: float
    q3: float
    iqr: float
    lag1_autocorrelation: float   # NaN for a constant series


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def se_mean(self) -> float:
        """Standard error of the mean, sd / sqrt(n)."""
        return self._result.params.se_mean

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def fivenum(self) -> FiveNumberSummary:
        return self._result.params.fivenum

    @property
    def minimum(self) -> float:
        return self._result.params.fivenum.minimum

    @property
    def median(self) -> float:
        return self._result.params.fivenum.median

    @property
    def maximum(self) -> float:
        return self._result.params.fivenum.maximum

    @property
    def q1(self) -> float:
        return self._result.params.q1

    @property
    def q3(self) -> float:
        return self._result.params.q3

    @property
    def iqr(self) -> float:
        return self._result.params.iqr

    @property
    def lag1_autocorrelation(self) -> float:
        return self._result.params.lag1_autocorrelation

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        f = self.fivenum
        lines = [
            "Summary Statistics",
            "=" * 50,
            f"{'Number of Observations':<28} {self.n:>14d}",
            f"{'Mean':<28} {self.mean:>14.6g}",
            f"{'Std Dev':<28} {self.sd:>14.6g}",
            f"{'Std Error of Mean':<28} {self.se_mean:>14.6g}",
            f"{'Variance':<28} {self.variance:>14.6g}",
            f"{'Range':<28} {self.range:>14.6g}",
            f"{'Minimum':<28} {f.minimum:>14.6g}",
            f"{'Lower Hinge':<28} {f.lower_hinge:>14.6g}",
            f"{'Median':<28} {f.median:>14.6g}",
            f"{'Upper Hinge':<28} {f.upper_hinge:>14.6g}",
            f"{'Maximum':<28} {f.maximum:>14.6g}",
            f"{'Interquartile Range':<28} {self.iqr:>14.6g}",
            f"{'Lag-1 Autocorrelation':<28} {self.lag1_autocorrelation:>14.6g}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, sd={self.sd:.6g})"
