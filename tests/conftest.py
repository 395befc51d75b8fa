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
def one_to_ten():
    """The integers 1..10 as floats."""
    return np.arange(1.0, 11.0)


@pytest.fixture
def normal_sample(rng):
    """200 draws from N(50, 5^2)."""
    return rng.normal(loc=50.0, scale=5.0, size=200)


@pytest.fixture
def interval_text():
    """Two-class interval table with a known median of 13.75."""
    return "0-10:2\n10-20:8"
