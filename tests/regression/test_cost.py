"""
Tests for hypotheses and squared-error cost functions.
"""

import math

import pytest

from pymatrix.core.exceptions import DimensionError
from pymatrix.matrix import matrix, vector
from pymatrix.regression import linear_hypothesis, matrix_cost, mean_error_cost


class TestLinearHypothesis:

    def test_evaluates_line(self):
        h = linear_hypothesis(2, 3)
        assert h(0) == 2
        assert h(4) == 14


class TestMeanErrorCost:

    def test_empty_data_is_nan(self):
        assert math.isnan(mean_error_cost([], lambda x: x))

    def test_perfect_fit(self):
        assert mean_error_cost([[1, 1]], lambda x: x) == 0

    def test_single_error(self):
        assert mean_error_cost([[1, 1]], lambda x: x * 2) == 0.5

    def test_reference_set(self):
        data = [[3, 4],
                [2, 1],
                [4, 3],
                [0, 1]]
        assert mean_error_cost(data, linear_hypothesis(0, 1)) == 0.5

    def test_rejects_non_pairs(self):
        with pytest.raises(DimensionError, match="pairs"):
            mean_error_cost([[1, 2, 3]], lambda x: x)


class TestMatrixCost:

    def test_zero_at_exact_parameters(self):
        X = matrix(3, 2)(1, 0,
                         1, 1,
                         1, 2)
        y = vector([1, 3, 5])
        assert matrix_cost(X, y, vector([1, 2])) == 0

    def test_matches_univariate_cost(self):
        data = [[3, 4], [2, 1], [4, 3], [0, 1]]
        X = matrix(4, 2)(1, 3,
                         1, 2,
                         1, 4,
                         1, 0)
        y = vector([4, 1, 3, 1])
        assert matrix_cost(X, y, vector([0, 1])) == mean_error_cost(data, linear_hypothesis(0, 1))

    def test_shape_mismatch(self):
        X = matrix(2, 2)(1, 0, 1, 1)
        with pytest.raises(DimensionError):
            matrix_cost(X, vector([1, 2, 3]), vector([0, 1]))
