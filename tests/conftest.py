"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyfixedmatrix import FixedMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_matrix(rng):
    """Factory for FixedMatrix[rows, cols] with uniform(-10, 10) elements."""
    def make(rows, cols):
        return FixedMatrix[rows, cols].from_array(rng.uniform(-10.0, 10.0, rows * cols))
    return make


@pytest.fixture
def scenario_a():
    """
    2x2 matrix of the form:
        0.1    92.3
        653.0   2.0
    """
    return FixedMatrix[2, 2].from_array([0.1, 92.3, 653.0, 2.0])


@pytest.fixture
def scenario_b():
    """
    2x2 matrix of the form:
        29.0  0.2
         9.2  1.2
    """
    return FixedMatrix[2, 2].from_array([29.0, 0.2, 9.2, 1.2])
