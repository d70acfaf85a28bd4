"""
Linear regression on top of the Matrix type.

Public API:
    fit(X, y, ...) -> RegressionSolution
    linear_hypothesis, mean_error_cost, matrix_cost
    gradient_descent, linear_regression_gradient_descent, normal_equation

Example:
    >>> from pymatrix.regression import mean_error_cost, linear_hypothesis
    >>> mean_error_cost([[3, 4], [2, 1], [4, 3], [0, 1]], linear_hypothesis(0, 1))
    0.5
"""

from pymatrix.regression.cost import linear_hypothesis, mean_error_cost, matrix_cost
from pymatrix.regression.descent import DescentPath, gradient_descent
from pymatrix.regression.design import RegressionDesign
from pymatrix.regression.solution import RegressionSolution, RegressionParams
from pymatrix.regression.solvers import (
    fit,
    linear_regression_gradient_descent,
    normal_equation,
)

__all__ = [
    "fit",
    "RegressionDesign",
    "RegressionSolution",
    "RegressionParams",
    "linear_hypothesis",
    "mean_error_cost",
    "matrix_cost",
    "gradient_descent",
    "DescentPath",
    "linear_regression_gradient_descent",
    "normal_equation",
]
