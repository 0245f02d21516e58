"""
User-facing Levene test solution.

Wraps a Result[LeveneParams] and provides convenient accessors and a
formatted summary.
"""

from dataclasses import dataclass
from typing import Any

from pydiagnostics.core.result import Result
from pydiagnostics.anova._common import LeveneParams
from pydiagnostics.anova._partition import GroupPartition


@dataclass
class LeveneSolution:
    """
    User-facing result for Levene's test.

    Produced by levene_test().
    """
    _result: Result[LeveneParams]
    _partition: GroupPartition

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def statistic(self) -> float:
        """Alias of f_value."""
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def critical_value(self) -> float:
        return self._result.params.critical_value

    @property
    def reject(self) -> bool:
        return self._result.params.reject

    @property
    def center(self) -> str:
        return self._result.params.center

    @property
    def group_vars(self) -> dict[int, float]:
        return self._result.params.group_vars

    @property
    def partition(self) -> GroupPartition:
        return self._partition

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
        variant = "Brown-Forsythe" if self.center == 'median' else "Levene"
        conclusion = "reject" if self.reject else "do not reject"
        lines = [
            f"{variant} Test for Homogeneity of Variances",
            "=" * 50,
            f"Groups: {self._partition.n_groups} contiguous blocks, "
            f"sizes {self._partition.sizes}",
            f"F({self.df_between}, {self.df_within}) = {self.f_value:.4f}, "
            f"p = {self.p_value:.4e}",
            f"Critical value (alpha = {self.alpha}): {self.critical_value:.4f}",
            f"Conclusion: {conclusion} H0 of equal variances",
            "",
            f"Center: {self.center}",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LeveneSolution(F={self.f_value:.4f}, "
            f"p={self.p_value:.4e}, reject={self.reject})"
        )
