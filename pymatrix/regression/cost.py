"""
Hypotheses and squared-error cost functions.

Both cost functions compute J = 1/(2m) * sum((h(x) - y)^2) over m
observations, using only Matrix.map / subtract / reduce.
"""

from __future__ import annotations

import operator
from typing import Callable, Sequence

from pymatrix.core.validation import check_same_shape
from pymatrix.core.exceptions import DimensionError
from pymatrix.matrix import Matrix

Hypothesis = Callable[[float], float]


def linear_hypothesis(theta0: float, theta1: float) -> Hypothesis:
    """Return h(x) = theta0 + theta1 * x."""
    return lambda x: theta0 + theta1 * x


def sum_of_squares(residuals: Matrix) -> float:
    """Sum of squared values, folded in storage order."""
    return residuals.map(lambda e: e * e).reduce(operator.add, 0.0)


def mean_error_cost(data: Sequence[Sequence[float]], hypothesis: Hypothesis) -> float:
    """
    Mean squared error cost of a univariate hypothesis.

    Args:
        data: (x, y) pairs
        hypothesis: Function mapping x to a prediction

    Returns:
        1/(2m) * sum((hypothesis(x) - y)^2), or NaN for empty data

    Raises:
        DimensionError: If the pairs do not have exactly two entries
    """
    m = len(data)
    if m == 0:
        return float('nan')
    pairs = Matrix.from_array(data)
    if pairs.cols != 2:
        raise DimensionError(f"data: expected (x, y) pairs, got {pairs.cols} columns")
    errors = pairs.col(0).map(hypothesis).subtract(pairs.col(1))
    return (1 / (2 * m)) * sum_of_squares(errors)


def matrix_cost(X: Matrix, y: Matrix, theta: Matrix) -> float:
    """
    Squared error cost of a linear model in matrix form.

    Args:
        X: Design matrix (m x n)
        y: Response column (m x 1)
        theta: Parameter column (n x 1)

    Returns:
        1/(2m) * sum((X theta - y)^2), or NaN when m == 0

    Raises:
        DimensionError: If the shapes are inconsistent
    """
    predictions = X.multiply(theta)
    check_same_shape(predictions.shape, y.shape, 'matrix_cost')
    if X.rows == 0:
        return float('nan')
    return (1 / (2 * X.rows)) * sum_of_squares(predictions.subtract(y))
