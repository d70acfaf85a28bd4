"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix.matrix import matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m31():
    return matrix(3, 1)(1,
                        2,
                        3)


@pytest.fixture
def m32():
    return matrix(3, 2)(1, 2,
                        3, 4,
                        5, 6)


@pytest.fixture
def m33():
    return matrix(3, 3)(1, 2, 3,
                        4, 5, 6,
                        7, 8, 9)


@pytest.fixture
def invertible33():
    """Integer matrix with determinant 1, so its inverse is exact."""
    return matrix(3, 3)(1, 2, 3,
                        0, 1, 4,
                        5, 6, 0)


@pytest.fixture
def linear_pairs():
    """(x, y) pairs lying exactly on y = x."""
    return [[1, 1],
            [2, 2],
            [3, 3],
            [4, 4]]
