"""
Levene's test for homogeneity of variances across contiguous groups.

Algorithm: transform y to z_i = |y_i - center(group_j)|, then run a
one-way ANOVA on z. center='median' gives the Brown-Forsythe variant
(robust to non-normality, the default). center='mean' gives the
original Levene test.

    F = [sum_j n_j (zbar_j - zbar)^2 / (k - 1)] / [sum_j sum_i (z_ij - zbar_j)^2 / (N - k)]

Under H0 (equal variances) F ~ F(k - 1, N - k).
"""

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pydiagnostics.anova._common import LeveneParams
from pydiagnostics.anova._partition import GroupPartition
from pydiagnostics.core.exceptions import DegenerateInputError, ValidationError


def levene_test_impl(
    y: NDArray,
    partition: GroupPartition,
    *,
    alpha: float,
    center: str = 'median',
) -> LeveneParams:
    """
    Compute Levene's test (or Brown-Forsythe variant).

    Args:
        y: 1D response array in original order
        partition: Contiguous group partition of y
        alpha: Significance level for the critical value
        center: 'median' (Brown-Forsythe, default) or 'mean' (original Levene)

    Returns:
        LeveneParams with F statistic, p-value, critical value and decision

    Raises:
        DegenerateInputError: If the within-group sum of squares of the
            absolute deviations is zero
    """
    if center not in ('mean', 'median'):
        raise ValidationError(f"center must be 'mean' or 'median', got {center!r}")

    center_fn = np.mean if center == 'mean' else np.median
    groups = partition.split(y)
    k = partition.n_groups
    n = partition.n_obs

    z_groups = [np.abs(g - center_fn(g)) for g in groups]
    group_vars = {
        label: float(np.var(g, ddof=1))
        for label, g in enumerate(groups, start=1)
    }

    z_grand_mean = float(np.mean(np.concatenate(z_groups)))
    ss_between = 0.0
    ss_within = 0.0
    for z_group in z_groups:
        z_mean_j = np.mean(z_group)
        ss_between += len(z_group) * (z_mean_j - z_grand_mean) ** 2
        ss_within += float(np.sum((z_group - z_mean_j) ** 2))

    df_between = k - 1
    df_within = n - k

    if ss_within == 0.0:
        raise DegenerateInputError(
            "Levene test undefined: absolute deviations are constant within every group"
        )

    f_val = float((ss_between / df_between) / (ss_within / df_within))
    p_val = float(sp_stats.f.sf(f_val, df_between, df_within))
    critical = float(sp_stats.f.ppf(1.0 - alpha, df_between, df_within))

    return LeveneParams(
        f_value=f_val,
        p_value=p_val,
        df_between=df_between,
        df_within=df_within,
        alpha=alpha,
        critical_value=critical,
        reject=f_val > critical,
        center=center,
        group_vars=group_vars,
    )
