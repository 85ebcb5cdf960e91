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
def random_blocks(rng):
    """12 blocks x 4 treatments of continuous data (no ties)."""
    return rng.normal(50.0, 10.0, size=(12, 4))
