"""
Common types for hypothesis testing.

Defines RunsParams and the set of valid alternatives.
"""

from __future__ import annotations

from dataclasses import dataclass


VALID_ALTERNATIVES = ("two.sided", "less", "greater")


@dataclass(frozen=True)
class RunsParams:
    """
    Parameter payload for the runs test for randomness.

    Attributes
    ----------
    n_runs : int
        Observed number of runs R.
    expected_runs : float
        E[R] = 1 + 2 n1 n2 / n under randomness.
    variance_runs : float
        Var(R) = 2 n1 n2 (2 n1 n2 - n) / (n^2 (n - 1)).
    z_statistic : float
        (R - E[R]) / sqrt(Var(R)).
    p_value : float
        From the standard normal for the chosen alternative.
    n_above, n_below : int
        Observations strictly above / below the center (n1, n2).
    n_ties : int
        Observations equal to the center, dropped before counting.
    center : float
        Value the signs were taken against.
    center_method : str
        'median', 'mean' or 'value'.
    alternative : str
        'two.sided', 'less' (too few runs) or 'greater' (too many runs).
    alpha : float
        Significance level for reject.
    reject : bool
        p_value < alpha.
    """
    n_runs: int
    expected_runs: float
    variance_runs: float
    z_statistic: float
    p_value: float
    n_above: int
    n_below: int
    n_ties: int
    center: float
    center_method: str
    alternative: str
    alpha: float
    reject: bool
