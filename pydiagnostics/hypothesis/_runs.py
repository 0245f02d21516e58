"""
Runs test for randomness (normal approximation).

Each observation is classified as above (+) or below (-) the center.
Observations exactly equal to the center are dropped before runs are
counted, so a tie never starts or breaks a run. With n1 above and n2
below (n = n1 + n2) and R runs:

    E[R]   = 1 + 2 n1 n2 / n
    Var(R) = 2 n1 n2 (2 n1 n2 - n) / (n^2 (n - 1))
    Z      = (R - E[R]) / sqrt(Var(R))

Large positive Z means too many runs (oscillation), large negative Z
too few (trend or persistence).
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pydiagnostics.core.exceptions import DegenerateInputError
from pydiagnostics.hypothesis._common import RunsParams


def count_runs(signs: NDArray) -> int:
    """Number of maximal blocks of equal sign in a non-empty sequence."""
    return int(1 + np.count_nonzero(signs[1:] != signs[:-1]))


def runs_test_impl(
    y: NDArray,
    center_value: float,
    center_method: str,
    *,
    alternative: str,
    alpha: float,
) -> RunsParams:
    """
    Runs test of y about center_value.

    Raises:
        DegenerateInputError: If all untied observations fall on one side
            of the center, or Var(R) is zero
    """
    above = y > center_value
    below = y < center_value
    n1 = int(np.count_nonzero(above))
    n2 = int(np.count_nonzero(below))
    n_ties = len(y) - n1 - n2

    if n1 == 0 or n2 == 0:
        raise DegenerateInputError(
            f"runs test needs observations on both sides of the center "
            f"({center_value:g}): {n1} above, {n2} below, {n_ties} tied"
        )

    signs = above[above | below]
    r = count_runs(signs)

    n = n1 + n2
    expected = 1.0 + 2.0 * n1 * n2 / n
    variance = 2.0 * n1 * n2 * (2.0 * n1 * n2 - n) / (n ** 2 * (n - 1))
    if variance <= 0.0:
        raise DegenerateInputError(
            f"runs test undefined: Var(R) = 0 with n1={n1}, n2={n2}"
        )

    z = (r - expected) / np.sqrt(variance)

    if alternative == 'two.sided':
        p_val = 2.0 * sp_stats.norm.sf(abs(z))
    elif alternative == 'less':
        p_val = sp_stats.norm.cdf(z)
    else:
        p_val = sp_stats.norm.sf(z)
    p_val = float(min(1.0, p_val))

    return RunsParams(
        n_runs=r,
        expected_runs=expected,
        variance_runs=variance,
        z_statistic=float(z),
        p_value=p_val,
        n_above=n1,
        n_below=n2,
        n_ties=n_ties,
        center=float(center_value),
        center_method=center_method,
        alternative=alternative,
        alpha=alpha,
        reject=p_val < alpha,
    )
