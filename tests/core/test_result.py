"""
Tests for the Result[P] envelope and the section Timer.
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pydiagnostics.core.compute import Timer, timed
from pydiagnostics.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.backend_name == "cpu"
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"

    def test_has_warning(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu",
            warnings=("max_lag=50 truncated to 9",),
        )
        assert result.has_warning("truncated")
        assert not result.has_warning("exact fit")


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('fft'):
            pass
        with timer.section('fft'):
            pass
        timer.stop()
        timing = timer.result()
        assert set(timing) == {'total_seconds', 'fft'}
        assert timing['fft'] <= timing['total_seconds']

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()['total_seconds'] >= 0.0
