"""
Regression test fixtures.
"""

import numpy as np
import pytest


@pytest.fixture
def line_data():
    """Noise-free y = 1 + 2x at x = 0..3, without intercept column."""
    x = np.array([0.0, 1.0, 2.0, 3.0])
    y = 1.0 + 2.0 * x
    return x, y


@pytest.fixture
def line_design_arrays(line_data):
    """Same data with an explicit intercept column."""
    x, y = line_data
    X = np.column_stack([np.ones_like(x), x])
    return X, y


@pytest.fixture
def collinear_arrays():
    """Second column is exactly twice the first, so X'X is singular."""
    x = np.array([1.0, 2.0, 3.0, 4.0])
    X = np.column_stack([x, 2.0 * x])
    y = np.array([1.0, 0.0, 2.0, 5.0])
    return X, y
