"""
Tests for Levene's test over contiguous groups.

Cross-checked against scipy.stats.levene on the same groups.
"""

import numpy as np
import pytest
from scipy import stats

from pydiagnostics.anova import levene_test, partition_groups
from pydiagnostics.core.exceptions import (
    DegenerateInputError,
    DimensionError,
    InvalidConfigurationError,
    InvalidGroupCountError,
    ValidationError,
)

BASE = np.linspace(-1.5, 1.5, 25)


class TestLeveneDecision:

    def test_shifted_blocks_do_not_reject(self):
        y = np.concatenate([BASE, BASE + 5.0, BASE - 3.0, BASE + 1.0])
        result = levene_test(y, 4)
        assert result.f_value == pytest.approx(0.0, abs=1e-10)
        assert not result.reject

    def test_permuted_blocks_do_not_reject(self, rng):
        y = np.concatenate([rng.permutation(BASE) for _ in range(4)])
        assert not levene_test(y, 4).reject

    def test_inflated_block_rejects(self):
        y = np.concatenate([BASE, BASE, BASE, 10.0 * BASE])
        result = levene_test(y, 4)
        assert result.reject
        assert result.f_value > result.critical_value
        assert result.p_value < 0.05

    def test_group_variances(self):
        y = np.concatenate([BASE, BASE, BASE, 10.0 * BASE])
        group_vars = levene_test(y, 4).group_vars
        assert set(group_vars) == {1, 2, 3, 4}
        assert group_vars[4] == pytest.approx(100.0 * group_vars[1])


class TestLeveneReference:

    @pytest.mark.parametrize("center", ['median', 'mean'])
    def test_matches_scipy(self, rng, center):
        y = rng.normal(size=100) * np.repeat([1.0, 1.5, 1.0, 2.0], 25)
        result = levene_test(y, 4, center=center)
        ref = stats.levene(*np.split(y, 4), center=center)
        assert result.f_value == pytest.approx(ref.statistic)
        assert result.p_value == pytest.approx(ref.pvalue)

    def test_degrees_of_freedom_and_critical_value(self, rng):
        result = levene_test(rng.normal(size=103), 4, alpha=0.05)
        assert result.df_between == 3
        assert result.df_within == 99
        assert result.critical_value == pytest.approx(stats.f.ppf(0.95, 3, 99))
        assert result.partition.sizes == (25, 25, 25, 28)

    def test_statistic_alias(self, rng):
        result = levene_test(rng.normal(size=40))
        assert result.statistic == result.f_value
        assert result.center == 'median'


class TestLevenePartition:

    def test_uses_given_partition(self, rng):
        y = rng.normal(size=40)
        partition = partition_groups(40, 4)
        result = levene_test(y, 4, partition=partition)
        assert result.partition is partition
        assert result.f_value == pytest.approx(levene_test(y, 4).f_value)

    def test_partition_length_mismatch(self, rng):
        with pytest.raises(DimensionError):
            levene_test(rng.normal(size=40), 4, partition=partition_groups(30, 3))


class TestLeveneErrors:

    def test_groups_of_two_are_degenerate(self):
        with pytest.raises(DegenerateInputError):
            levene_test([1.0, 2.0, 5.0, 3.0, 8.0, 1.0, 4.0, 6.0], 4)

    @pytest.mark.parametrize("k", [1, 6])
    def test_invalid_group_count(self, k):
        with pytest.raises(InvalidGroupCountError):
            levene_test(np.arange(10.0), k)

    def test_invalid_alpha(self):
        with pytest.raises(InvalidConfigurationError):
            levene_test(np.arange(20.0), 4, alpha=1.0)

    def test_unknown_center(self):
        with pytest.raises(ValidationError):
            levene_test(np.arange(20.0), 4, center='trimmed')

    def test_summary(self, rng):
        text = levene_test(rng.normal(size=40)).summary()
        assert "Brown-Forsythe" in text
        assert "Critical value" in text
