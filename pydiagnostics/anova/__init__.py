"""
Homogeneity of variance across contiguous groups.

Public API:
    levene_test(series, n_groups, ...) -> LeveneSolution
    partition_groups(n_obs, n_groups) -> GroupPartition
"""

from pydiagnostics.anova.solvers import levene_test, partition_groups
from pydiagnostics.anova._common import LeveneParams
from pydiagnostics.anova._partition import GroupPartition
from pydiagnostics.anova.solution import LeveneSolution

__all__ = [
    "levene_test",
    "partition_groups",
    "GroupPartition",
    "LeveneParams",
    "LeveneSolution",
]
