"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def small_ints(rng):
    """Factory for integer-valued float64 samples (exact in float32 too)."""
    def draw(*shape):
        return rng.integers(-9, 10, size=shape).astype(np.float64)
    return draw
