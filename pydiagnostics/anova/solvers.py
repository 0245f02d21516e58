"""
Grouped variance test dispatch.

Public API:
    partition_groups(n_obs, n_groups) -> GroupPartition
    levene_test(series, n_groups, ...) -> LeveneSolution
"""

from typing import Any

from numpy.typing import ArrayLike

from pydiagnostics.core.compute.timing import Timer
from pydiagnostics.core.exceptions import DimensionError, ValidationError
from pydiagnostics.core.result import Result
from pydiagnostics.core.series import Series
from pydiagnostics.core.validation import check_alpha
from pydiagnostics.anova._levene import levene_test_impl
from pydiagnostics.anova._partition import (
    GroupPartition,
    check_group_count,
    partition_impl,
)
from pydiagnostics.anova.solution import LeveneSolution


def partition_groups(n_obs: int, n_groups: Any = 4) -> GroupPartition:
    """
    Split positions 0..n_obs-1 into n_groups contiguous blocks.

    Each block gets floor(n_obs / n_groups) observations; the remainder is
    appended to the last block.

    Raises:
        InvalidGroupCountError: If n_groups < 2 or n_groups > n_obs / 2
    """
    k = check_group_count(n_groups, n_obs)
    return partition_impl(n_obs, k)


def levene_test(
    series: ArrayLike | Series,
    n_groups: Any = 4,
    *,
    alpha: float = 0.05,
    center: str = 'median',
    partition: GroupPartition | None = None,
) -> LeveneSolution:
    """
    Levene's test for constant variance over time.

    The series is cut into n_groups contiguous blocks in original order
    and the test asks whether the blocks share a common variance. With
    center='median' (default) this is the Brown-Forsythe variant.

    Args:
        series: Series or 1D numeric array-like
        n_groups: Number of contiguous blocks. Default 4.
        alpha: Significance level for the critical value. Default 0.05.
        center: 'median' (Brown-Forsythe, default) or 'mean' (original Levene)
        partition: Partition already built for this series (e.g. by
            partition_groups); used as is instead of cutting n_groups blocks

    Returns:
        LeveneSolution with F statistic, critical value, decision and p-value

    Raises:
        InvalidGroupCountError: If n_groups < 2 or n_groups > N / 2
        InvalidConfigurationError: If alpha is outside (0, 1)
        ValidationError: If center is unknown
        DimensionError: If partition covers a different number of observations
        DegenerateInputError: If within-group spread of deviations is zero

    Examples:
        >>> result = levene_test(series, n_groups=4)
        >>> result.reject
        >>> print(result.summary())
    """
    timer = Timer()
    timer.start()

    s = Series.coerce(series)
    alpha = check_alpha(alpha)
    if center not in ('mean', 'median'):
        raise ValidationError(f"center must be 'mean' or 'median', got {center!r}")

    with timer.section('partition'):
        if partition is None:
            partition = partition_groups(s.n, n_groups)
        elif partition.n_obs != s.n:
            raise DimensionError(
                f"partition covers {partition.n_obs} observations, series has {s.n}"
            )

    with timer.section('levene'):
        params = levene_test_impl(s.values, partition, alpha=alpha, center=center)

    timer.stop()

    result = Result(
        params=params,
        info={'center': center, 'group_sizes': partition.sizes},
        timing=timer.result(),
        backend_name='cpu',
    )
    return LeveneSolution(_result=result, _partition=partition)
