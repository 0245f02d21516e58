"""
Tests for describe(): moments, order statistics and lag-1 autocorrelation.
"""

import math

import numpy as np
import pytest

from pydiagnostics.core.exceptions import EmptySeriesError, InsufficientDataError
from pydiagnostics.core.series import Series
from pydiagnostics.descriptive import describe


class TestDescribeOutlierSeries:
    """Ten observations 1..8, 100, 10."""

    def test_moments(self, outlier_series):
        result = describe(outlier_series)
        assert result.n == 10
        assert result.mean == pytest.approx(14.6)
        assert result.variance == pytest.approx(8172.4 / 9)
        assert result.sd == pytest.approx(math.sqrt(8172.4 / 9))
        assert result.se_mean == pytest.approx(result.sd / math.sqrt(10))

    def test_order_statistics(self, outlier_series):
        result = describe(outlier_series)
        assert result.range == pytest.approx(99.0)
        assert result.fivenum.as_tuple() == pytest.approx((1.0, 3.0, 5.5, 8.0, 100.0))
        assert result.minimum == 1.0
        assert result.median == 5.5
        assert result.maximum == 100.0
        assert result.q1 == pytest.approx(3.25)
        assert result.q3 == pytest.approx(7.75)
        assert result.iqr == pytest.approx(4.5)

    def test_lag1_matches_definition(self, outlier_series):
        d = outlier_series - outlier_series.mean()
        expected = (d[:-1] @ d[1:]) / (d @ d)
        assert describe(outlier_series).lag1_autocorrelation == pytest.approx(expected)


class TestDescribeProperties:

    def test_agrees_with_numpy(self, rng):
        y = rng.normal(3.0, 2.0, 200)
        result = describe(y)
        assert result.mean == pytest.approx(np.mean(y))
        assert result.variance == pytest.approx(np.var(y, ddof=1))
        assert result.sd == pytest.approx(np.std(y, ddof=1))
        q1, q3 = np.quantile(y, [0.25, 0.75])
        assert result.q1 == pytest.approx(q1)
        assert result.q3 == pytest.approx(q3)

    def test_fivenum_is_ordered(self, rng):
        f = describe(rng.standard_t(3, 57)).fivenum
        values = f.as_tuple()
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_accepts_series(self):
        s = Series.from_array([1.0, 2.0, 4.0], name='x')
        assert describe(s).mean == pytest.approx(7.0 / 3.0)

    def test_trending_series_has_high_lag1(self):
        result = describe(np.arange(1.0, 101.0))
        assert result.lag1_autocorrelation > 0.9

    def test_timing_sections(self, outlier_series):
        timing = describe(outlier_series).timing
        assert 'moments' in timing
        assert 'total_seconds' in timing


class TestDescribeEdgeCases:

    def test_constant_series_lag1_is_nan(self):
        with pytest.warns(RuntimeWarning, match="lag-1"):
            result = describe([5.0, 5.0, 5.0, 5.0])
        assert result.variance == 0.0
        assert math.isnan(result.lag1_autocorrelation)
        assert len(result.warnings) == 1

    def test_single_observation(self):
        with pytest.raises(InsufficientDataError):
            describe([1.0])

    def test_empty(self):
        with pytest.raises(EmptySeriesError):
            describe([])

    def test_summary_and_repr(self, outlier_series):
        result = describe(outlier_series)
        text = result.summary()
        assert "Lower Hinge" in text
        assert "Interquartile Range" in text
        assert repr(result).startswith("DescriptiveSolution(n=10")
