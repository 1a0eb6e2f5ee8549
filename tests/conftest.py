"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_system(rng):
    """Diagonally dominant (hence nonsingular) 5x5 system with a 5x2 right-hand side."""
    n, k = 5, 2
    M = rng.standard_normal((n, n)) + n * np.eye(n)
    B = rng.standard_normal((n, k))
    return M, B


@pytest.fixture
def quadratic_points():
    """Samples of y = 1 + x^2, fitted exactly by the basis {1, x, x^2}."""
    return [(0.0, 1.0), (1.0, 2.0), (2.0, 5.0), (3.0, 10.0)]


@pytest.fixture
def small_matrix():
    """2x3 matrix with cell (y, x) = 10*y + x."""
    return Matrix.by_pos(2, 3, lambda y, x: 10 * y + x)
