"""
Tests for the modified-Daniell smoothed periodogram.
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from pydiagnostics.core.exceptions import (
    InsufficientDataError,
    InvalidConfigurationError,
    ValidationError,
)
from pydiagnostics.timeseries import spectrum
from pydiagnostics.timeseries._spectrum import modified_daniell, split_cosine_bell


class TestKernel:

    def test_span_one_is_identity(self):
        assert_allclose(modified_daniell(1), [1.0])

    def test_span_three(self):
        assert_allclose(modified_daniell(3), [0.25, 0.5, 0.25])

    @pytest.mark.parametrize("span", [4, 5])
    def test_even_span_rounds_down(self, span):
        assert_allclose(modified_daniell(span), [0.125, 0.25, 0.25, 0.25, 0.125])

    @pytest.mark.parametrize("span", [1, 3, 7, 12])
    def test_weights_sum_to_one(self, span):
        assert modified_daniell(span).sum() == pytest.approx(1.0)

    def test_taper_zero_is_noop(self):
        x = np.arange(10.0)
        assert_allclose(split_cosine_bell(x, 0.0), x)

    def test_taper_touches_only_ends(self):
        x = np.ones(20)
        out = split_cosine_bell(x, 0.1)
        assert_allclose(out[2:18], 1.0)
        assert np.all(out[:2] < 1.0)
        assert np.all(out[18:] < 1.0)


class TestSpectrumGrid:

    def test_frequencies_even_length(self, rng):
        result = spectrum(rng.normal(size=64))
        assert len(result.frequencies) == 32
        assert result.frequencies[0] == pytest.approx(1 / 64)
        assert result.frequencies[-1] == pytest.approx(0.5)
        assert len(result.power) == 32

    def test_frequencies_odd_length(self, rng):
        result = spectrum(rng.normal(size=21))
        assert len(result.frequencies) == 10
        assert result.frequencies[-1] < 0.5

    def test_power_non_negative(self, random_walk):
        assert np.all(spectrum(random_walk).power >= 0.0)


class TestSpectrumValues:

    def test_raw_periodogram(self, rng):
        y = rng.normal(size=40)
        result = spectrum(y, span=1, taper=0.0, detrend=False)
        expected = np.abs(np.fft.fft(y - y.mean())) ** 2 / 40
        assert_allclose(result.power, expected[1:21], rtol=1e-10)
        assert result.df == pytest.approx(2.0)
        assert result.bandwidth == pytest.approx(np.sqrt(1 / 12) / 40)

    def test_sinusoid_peak(self):
        t = np.arange(1, 65)
        result = spectrum(np.sin(2 * np.pi * 0.25 * t))
        assert result.peak_frequency == pytest.approx(0.25)

    def test_degrees_of_freedom_span_three(self, rng):
        result = spectrum(rng.normal(size=50), span=3, taper=0.0)
        assert result.df == pytest.approx(2.0 / 0.375)

    def test_taper_inflates_df_correction(self, rng):
        y = rng.normal(size=50)
        untapered = spectrum(y, span=3, taper=0.0)
        tapered = spectrum(y, span=3, taper=0.1)
        assert tapered.df < untapered.df

    def test_detrend_removes_line(self):
        t = np.arange(1.0, 65.0)
        noise = np.sin(2 * np.pi * 0.125 * t)
        result = spectrum(noise + 5.0 * t, span=1, taper=0.0, detrend=True)
        assert result.peak_frequency == pytest.approx(0.125)

    def test_random_walk_power_at_low_frequency(self, random_walk):
        result = spectrum(random_walk)
        assert result.peak_frequency < 0.05


class TestSpectrumErrors:

    def test_kernel_wider_than_series(self):
        with pytest.raises(ValidationError, match="wider"):
            spectrum([1.0, 2.0, 3.0, 5.0], span=5)

    def test_default_span_on_two_points(self):
        with pytest.raises(ValidationError):
            spectrum([1.0, 2.0])

    def test_two_points_raw(self):
        result = spectrum([1.0, 2.0], span=1, detrend=False)
        assert len(result.frequencies) == 1

    def test_span_zero(self):
        with pytest.raises(InvalidConfigurationError):
            spectrum(np.arange(10.0), span=0)

    @pytest.mark.parametrize("taper", [-0.1, 0.6])
    def test_taper_out_of_range(self, taper):
        with pytest.raises(InvalidConfigurationError):
            spectrum(np.arange(10.0), taper=taper)

    @pytest.mark.parametrize("taper", ["0.1", None, True])
    def test_taper_not_a_number(self, taper):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            spectrum(np.arange(10.0), taper=taper)
        assert exc_info.value.parameter == 'taper'

    def test_single_observation(self):
        with pytest.raises(InsufficientDataError):
            spectrum([1.0])


class TestSpectrumSolution:

    def test_pairs_and_summary(self, rng):
        result = spectrum(rng.normal(size=30))
        pairs = result.pairs()
        assert len(pairs) == 15
        assert pairs[0][0] == pytest.approx(1 / 30)
        assert "modified Daniell" in result.summary()
        assert result.kernel_weights.sum() == pytest.approx(1.0)
