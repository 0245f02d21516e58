"""
Contiguous group partition of a series.

Observations keep their original order: group 1 holds the first block,
group k the last. This is what makes the grouped Levene test a check on
variance drift over time rather than on arbitrary subsets.

Remainder policy: each group gets floor(N / k) observations and the
N mod k leftovers are appended to the last group. With N = 10, k = 4 the
sizes are (2, 2, 2, 4).
"""

from dataclasses import dataclass
from typing import Any
import numbers

import numpy as np
from numpy.typing import NDArray

from pydiagnostics.core.exceptions import DimensionError, InvalidGroupCountError


@dataclass(frozen=True, eq=False)
class GroupPartition:
    """Mapping from observation position to contiguous group label 1..k."""
    labels: NDArray[np.integer[Any]]           # length N, values 1..k
    sizes: tuple[int, ...]
    bounds: tuple[tuple[int, int], ...]        # 0-based [start, stop)
    n_groups: int
    n_obs: int

    def split(self, values: NDArray) -> list[NDArray]:
        """Slice values into the k groups, in order."""
        if len(values) != self.n_obs:
            raise DimensionError(
                f"partition covers {self.n_obs} observations, got {len(values)}"
            )
        return [values[start:stop] for start, stop in self.bounds]

    def __repr__(self) -> str:
        return f"GroupPartition(n_groups={self.n_groups}, sizes={self.sizes})"


def check_group_count(n_groups: Any, n_obs: int) -> int:
    """
    Validate the number of groups for a series of length n_obs.

    Valid when 2 <= n_groups <= n_obs / 2, so every group holds at least
    two observations.

    Raises:
        InvalidGroupCountError
    """
    if isinstance(n_groups, bool) or not isinstance(n_groups, numbers.Integral):
        raise InvalidGroupCountError(
            f"n_groups must be an integer, got {n_groups!r}",
            n_groups=n_groups, n_observations=n_obs,
        )
    if n_groups < 2 or n_groups > n_obs / 2:
        raise InvalidGroupCountError(
            f"n_groups must be in [2, {n_obs // 2}] for {n_obs} observations, "
            f"got {n_groups}",
            n_groups=int(n_groups), n_observations=n_obs,
        )
    return int(n_groups)


def partition_impl(n_obs: int, n_groups: int) -> GroupPartition:
    """Build the contiguous partition; inputs are assumed validated."""
    base = n_obs // n_groups
    sizes = [base] * n_groups
    sizes[-1] += n_obs - base * n_groups

    bounds = []
    start = 0
    for size in sizes:
        bounds.append((start, start + size))
        start += size

    labels = np.repeat(np.arange(1, n_groups + 1), sizes)
    labels.setflags(write=False)

    return GroupPartition(
        labels=labels,
        sizes=tuple(sizes),
        bounds=tuple(bounds),
        n_groups=n_groups,
        n_obs=n_obs,
    )
