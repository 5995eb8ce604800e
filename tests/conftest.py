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
def one_to_five():
    """The sample 1, 2, 3, 4, 5."""
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def with_outlier():
    """1..9 plus a far outlier at 100."""
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 100.0])


@pytest.fixture
def normal_sample(rng):
    """500 draws from N(10, 2^2)."""
    return rng.normal(10.0, 2.0, 500)
