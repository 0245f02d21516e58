"""
User-facing time-series solution types.

Each solution wraps a Result[Params] and provides convenient accessors
and a formatted summary.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pydiagnostics.core.result import Result
from pydiagnostics.timeseries._common import AcfParams, SpectrumParams


# =====================================================================
# AcfSolution
# =====================================================================


@dataclass
class AcfSolution:
    """
    User-facing result for the sample autocorrelation function.

    Produced by acf().
    """
    _result: Result[AcfParams]

    @property
    def lags(self) -> NDArray[np.integer[Any]]:
        return self._result.params.lags

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def max_lag(self) -> int:
        return self._result.params.max_lag

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def conf_bound(self) -> float:
        """Approximate 95% bound for white noise, 1.96 / sqrt(N)."""
        return self._result.params.conf_bound

    @property
    def lag1(self) -> float:
        """Coefficient at lag 1 (NaN when only lag 0 was computed)."""
        if self.max_lag < 1:
            return float('nan')
        return float(self.coefficients[1])

    def at(self, lag: int) -> float:
        """Coefficient at a single lag."""
        if not 0 <= lag <= self.max_lag:
            raise KeyError(f"lag {lag} not computed (0..{self.max_lag})")
        return float(self.coefficients[lag])

    def pairs(self) -> list[tuple[int, float]]:
        """(lag, coefficient) pairs in lag order."""
        return [(int(h), float(r)) for h, r in zip(self.lags, self.coefficients)]

    def significant_lags(self) -> NDArray[np.integer[Any]]:
        """Lags >= 1 whose coefficient falls outside the white-noise bound."""
        mask = np.abs(self.coefficients) > self.conf_bound
        mask[0] = False
        return self.lags[mask]

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self, max_rows: int = 10) -> str:
        lines = [
            "Autocorrelation Function",
            "=" * 50,
            f"n = {self.n_obs}, lags 0..{self.max_lag}, "
            f"95% bound = +/-{self.conf_bound:.4f}",
            "",
            f"{'Lag':>5} {'ACF':>10}",
            "-" * 16,
        ]
        for h, r in self.pairs()[: max_rows + 1]:
            flag = " *" if h > 0 and abs(r) > self.conf_bound else ""
            lines.append(f"{h:>5} {r:>10.4f}{flag}")
        if self.max_lag > max_rows:
            lines.append(f"  ... {self.max_lag - max_rows} more lags")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"AcfSolution(n={self.n_obs}, max_lag={self.max_lag}, lag1={self.lag1:.4f})"


# =====================================================================
# SpectrumSolution
# =====================================================================


@dataclass
class SpectrumSolution:
    """
    User-facing result for the smoothed periodogram.

    Produced by spectrum().
    """
    _result: Result[SpectrumParams]

    @property
    def frequencies(self) -> NDArray[np.floating[Any]]:
        return self._result.params.frequencies

    @property
    def power(self) -> NDArray[np.floating[Any]]:
        return self._result.params.power

    @property
    def span(self) -> int:
        return self._result.params.span

    @property
    def kernel_weights(self) -> NDArray[np.floating[Any]]:
        return self._result.params.kernel_weights

    @property
    def taper(self) -> float:
        return self._result.params.taper

    @property
    def df(self) -> float:
        """Equivalent degrees of freedom of the smoothed estimate."""
        return self._result.params.df

    @property
    def bandwidth(self) -> float:
        return self._result.params.bandwidth

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def peak_frequency(self) -> float:
        """Frequency carrying the largest power."""
        return float(self.frequencies[int(np.argmax(self.power))])

    def pairs(self) -> list[tuple[float, float]]:
        """(frequency, power) pairs in frequency order."""
        return [(float(f), float(p)) for f, p in zip(self.frequencies, self.power)]

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
        lines = [
            "Smoothed Periodogram (modified Daniell)",
            "=" * 50,
            f"n = {self.n_obs}, span = {self.span}, taper = {self.taper}",
            f"df = {self.df:.3f}, bandwidth = {self.bandwidth:.5f}",
            f"Peak frequency: {self.peak_frequency:.4f} "
            f"(power {float(np.max(self.power)):.4g})",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"SpectrumSolution(n={self.n_obs}, span={self.span}, "
            f"peak={self.peak_frequency:.4f})"
        )
