"""
Tests for fit_trend() and fit_lag_model().

Reference values come from scipy.stats.linregress.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from pydiagnostics.core.exceptions import DegenerateInputError, InsufficientDataError
from pydiagnostics.regression import fit_lag_model, fit_trend


class TestFitTrend:

    def test_matches_linregress(self, rng):
        y = 2.0 + 0.3 * np.arange(1, 51) + rng.normal(size=50)
        result = fit_trend(y)
        ref = stats.linregress(np.arange(1, 51), y)
        assert result.slope == pytest.approx(ref.slope)
        assert result.intercept == pytest.approx(ref.intercept)
        assert result.slope_se == pytest.approx(ref.stderr)
        assert result.intercept_se == pytest.approx(ref.intercept_stderr)
        assert result.slope_p_value == pytest.approx(ref.pvalue, rel=1e-6, abs=1e-300)
        assert result.r_squared == pytest.approx(ref.rvalue ** 2)

    def test_t_value_and_df(self, rng):
        y = rng.normal(size=30)
        result = fit_trend(y)
        assert result.df_residual == 28
        assert result.n_obs == 30
        assert result.slope_t == pytest.approx(result.slope / result.slope_se)

    def test_near_line_has_large_t(self):
        t = np.arange(1.0, 41.0)
        result = fit_trend(t + 0.1 * np.sin(t))
        assert result.slope == pytest.approx(1.0, abs=0.01)
        assert result.slope_t > 100
        assert result.slope_p_value < 1e-10

    @pytest.mark.parametrize("n", [5, 10, 20, 37, 100, 1000])
    def test_strictly_increasing_is_exact_fit(self, n):
        with pytest.warns(RuntimeWarning, match="exact fit"):
            result = fit_trend(np.arange(1.0, n + 1))
        assert result.slope == pytest.approx(1.0)
        assert result.slope_se == 0.0
        assert result.slope_t == np.inf
        assert result.slope_p_value == 0.0
        assert result.df_residual == n - 2
        assert result.r_squared == 1.0
        assert len(result.warnings) == 1

    def test_decreasing_line_has_negative_infinite_t(self):
        with pytest.warns(RuntimeWarning, match="exact fit"):
            result = fit_trend(50.0 - 2.5 * np.arange(1.0, 31.0))
        assert result.slope == pytest.approx(-2.5)
        assert result.slope_t == -np.inf

    def test_constant_series_has_nan_t(self):
        with pytest.warns(RuntimeWarning, match="exact fit"):
            result = fit_trend([2.0] * 6)
        assert result.slope == 0.0
        assert np.isnan(result.slope_t)
        assert np.isnan(result.slope_p_value)

    def test_noisy_line_is_not_exact(self, rng):
        y = np.arange(1.0, 101.0) + 1e-3 * rng.normal(size=100)
        result = fit_trend(y)
        assert result.slope_se > 0
        assert np.isfinite(result.slope_t)
        assert result.warnings == ()

    def test_residuals_sum_to_zero(self, random_walk):
        result = fit_trend(random_walk)
        assert abs(result.residuals.sum()) < 1e-8
        assert_allclose(result.fitted_values + result.residuals, random_walk)

    def test_residual_std_error(self, rng):
        y = rng.normal(size=25)
        result = fit_trend(y)
        rss = float(result.residuals @ result.residuals)
        assert result.residual_std_error == pytest.approx(np.sqrt(rss / 23))

    def test_too_short(self):
        with pytest.raises(InsufficientDataError):
            fit_trend([1.0, 2.0])

    def test_summary(self, rng):
        result = fit_trend(rng.normal(size=20))
        text = result.summary()
        assert "A1" in text
        assert "on 18 DF" in text
        assert result.info['regressor'] == 'index'


class TestFitLagModel:

    def test_matches_linregress(self, random_walk):
        result = fit_lag_model(random_walk)
        ref = stats.linregress(random_walk[:-1], random_walk[1:])
        assert result.slope == pytest.approx(ref.slope)
        assert result.slope_se == pytest.approx(ref.stderr)
        assert result.df_residual == len(random_walk) - 3
        assert result.n_obs == len(random_walk) - 1

    def test_random_walk_slope_near_one(self, random_walk):
        assert fit_lag_model(random_walk).slope == pytest.approx(1.0, abs=0.05)

    def test_constant_regressor(self):
        with pytest.raises(DegenerateInputError):
            fit_lag_model([3.0, 3.0, 3.0, 3.0, 4.0])

    def test_too_short(self):
        with pytest.raises(InsufficientDataError):
            fit_lag_model([1.0, 2.0, 4.0])
