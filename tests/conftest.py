"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_walk(rng):
    """500-step random walk with uniform(-0.5, 0.5) increments."""
    return np.cumsum(rng.uniform(-0.5, 0.5, 500))


@pytest.fixture
def outlier_series():
    """Ten observations with one gross outlier."""
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 100.0, 10.0])


@pytest.fixture
def nist_style_file(tmp_path):
    """Text file laid out like the NIST random walk data: header, then values."""
    header = [f"header line {i}" for i in range(1, 26)]
    values = ["  -0.399027", "  -0.645651", "  -0.625516", "  -0.262049", "  -0.407173"]
    path = tmp_path / "randwalk.dat"
    path.write_text("\n".join(header + values) + "\n")
    return path
