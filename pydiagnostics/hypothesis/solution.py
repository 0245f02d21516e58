"""
User-facing runs test solution.

Wraps Result[RunsParams] and provides accessors and an R-style summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydiagnostics.core.result import Result
from pydiagnostics.hypothesis._common import RunsParams


@dataclass
class RunsSolution:
    """
    User-facing result for the runs test.

    Produced by runs_test().
    """
    _result: Result[RunsParams]

    @property
    def n_runs(self) -> int:
        return self._result.params.n_runs

    @property
    def expected_runs(self) -> float:
        return self._result.params.expected_runs

    @property
    def variance_runs(self) -> float:
        return self._result.params.variance_runs

    @property
    def z_statistic(self) -> float:
        return self._result.params.z_statistic

    @property
    def statistic(self) -> float:
        """Alias of z_statistic."""
        return self._result.params.z_statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def n_above(self) -> int:
        return self._result.params.n_above

    @property
    def n_below(self) -> int:
        return self._result.params.n_below

    @property
    def n_ties(self) -> int:
        return self._result.params.n_ties

    @property
    def center(self) -> float:
        return self._result.params.center

    @property
    def center_method(self) -> str:
        return self._result.params.center_method

    @property
    def alternative(self) -> str:
        return self._result.params.alternative

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def reject(self) -> bool:
        return self._result.params.reject

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
        p = self._result.params
        lines = [
            "",
            "\tRuns Test for Randomness",
            "",
            f"center: {p.center_method} = {p.center:.6g} "
            f"({p.n_above} above, {p.n_below} below, {p.n_ties} tied and dropped)",
            f"runs = {p.n_runs}, expected = {p.expected_runs:.4f}, "
            f"variance = {p.variance_runs:.4f}",
            f"Z = {p.z_statistic:.4f}, p-value = {p.p_value:.4e}",
            f"alternative hypothesis: {p.alternative}",
            f"decision at alpha = {p.alpha}: "
            f"{'reject' if p.reject else 'do not reject'} randomness",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RunsSolution(runs={self.n_runs}, z={self.z_statistic:.4f}, "
            f"p={self.p_value:.4e})"
        )
