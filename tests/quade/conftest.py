"""
Shared fixtures for Quade test tests.

Provides the Conover (1999) reference dataset and small hand-checkable
designs covering rejection, non-rejection, ties and degeneracy.
"""

import numpy as np
import pytest


@pytest.fixture
def conover_data():
    """7 blocks x 5 treatments, Conover (1999) Quade test example."""
    return np.array([
        [115, 142, 36, 91, 28],
        [28, 31, 7, 21, 6],
        [220, 311, 108, 51, 117],
        [82, 56, 24, 46, 33],
        [256, 298, 124, 46, 84],
        [294, 322, 176, 54, 86],
        [98, 87, 55, 84, 25],
    ])


@pytest.fixture
def conover_scores():
    """Hand-computed treatment scores Ti for conover_data."""
    return np.array([33.0, 51.0, -18.0, -36.0, -30.0])


@pytest.fixture
def balanced_no_effect():
    """Opposing rank patterns cancel: Ti = 0, W = 0, p = 1."""
    return np.array([
        [1.0, 2.0, 3.0],
        [3.0, 2.0, 1.0],
        [1.0, 2.0, 3.0],
        [3.0, 2.0, 1.0],
    ])


@pytest.fixture
def tied_blocks():
    """3 x 3 design with a tie inside the first block."""
    return np.array([
        [1.0, 1.0, 2.0],
        [3.0, 5.0, 4.0],
        [2.0, 9.0, 6.0],
    ])


@pytest.fixture
def shifted_rows():
    """Every block is a constant shift of the same row: T4 = 0."""
    base = np.array([3.0, 1.0, 4.0, 2.0])
    return np.vstack([base, base + 10.0, base - 5.0, base + 0.5])
