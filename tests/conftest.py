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
def gamma_sample(rng):
    """Positive sample from Gamma(shape=4, scale=2), n = 60."""
    return rng.gamma(shape=4.0, scale=2.0, size=60)


@pytest.fixture
def small_sample():
    """The 1..5 sample used for closed-form checks."""
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0])
