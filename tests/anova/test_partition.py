"""
Tests for contiguous group partitioning.
"""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from pydiagnostics.anova import partition_groups
from pydiagnostics.core.exceptions import DimensionError, InvalidGroupCountError


class TestPartition:

    def test_remainder_goes_to_last_group(self):
        p = partition_groups(10, 4)
        assert p.sizes == (2, 2, 2, 4)
        assert p.bounds == ((0, 2), (2, 4), (4, 6), (6, 10))
        assert_array_equal(p.labels, [1, 1, 2, 2, 3, 3, 4, 4, 4, 4])

    def test_even_split(self):
        p = partition_groups(500, 4)
        assert p.sizes == (125, 125, 125, 125)

    def test_labels_non_decreasing(self):
        p = partition_groups(37, 5)
        assert np.all(np.diff(p.labels) >= 0)
        assert sum(p.sizes) == 37
        assert p.labels.min() == 1 and p.labels.max() == 5

    def test_largest_valid_group_count(self):
        p = partition_groups(10, 5)
        assert p.sizes == (2, 2, 2, 2, 2)

    def test_labels_read_only(self):
        p = partition_groups(10, 2)
        with pytest.raises(ValueError):
            p.labels[0] = 2

    def test_split(self):
        p = partition_groups(6, 2)
        first, second = p.split(np.arange(6.0))
        assert_array_equal(first, [0.0, 1.0, 2.0])
        assert_array_equal(second, [3.0, 4.0, 5.0])

    def test_split_length_mismatch(self):
        with pytest.raises(DimensionError):
            partition_groups(6, 2).split(np.arange(5.0))

    def test_default_group_count(self):
        assert partition_groups(40).n_groups == 4

    @pytest.mark.parametrize("k", [1, 6, 0, -2, 2.5, True])
    def test_invalid_group_count(self, k):
        with pytest.raises(InvalidGroupCountError) as exc_info:
            partition_groups(10, k)
        assert exc_info.value.n_observations == 10
