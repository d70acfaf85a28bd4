"""
Tests for regression fit().

Tests the complete pipeline: design construction, backend selection,
and solution properties.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.matrix import Matrix, vector
from pymatrix.regression import (
    RegressionDesign,
    RegressionSolution,
    fit,
    normal_equation,
)


class TestDesign:

    def test_from_arrays_intercept(self, line_data, line_design_arrays):
        x, y = line_data
        X, _ = line_design_arrays
        design = RegressionDesign.from_arrays(x, y, intercept=True)
        assert design.X == Matrix.from_array(X)
        assert design.y == vector(y)
        assert design.n == 4
        assert design.p == 2

    def test_from_pairs(self):
        design = RegressionDesign.from_pairs([[1, 2], [3, 4]])
        assert design.X == Matrix.from_array([[1, 1], [1, 3]])
        assert design.y == vector([2, 4])

    def test_column_y_accepted(self, line_design_arrays):
        X, y = line_design_arrays
        design = RegressionDesign.from_arrays(X, y.reshape(-1, 1))
        assert design.y.shape == (4, 1)

    def test_inconsistent_lengths(self, line_design_arrays):
        X, y = line_design_arrays
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            RegressionDesign.from_arrays(X, y[:3])

    def test_non_finite_rejected(self, line_design_arrays):
        X, y = line_design_arrays
        y = y.copy()
        y[0] = np.nan
        with pytest.raises(ValidationError, match="1 NaN"):
            RegressionDesign.from_arrays(X, y)

    def test_normal_matrices(self, line_design_arrays):
        X, y = line_design_arrays
        design = RegressionDesign.from_arrays(X, y)
        np.testing.assert_array_equal(design.XtX().to_array(), X.T @ X)
        np.testing.assert_array_equal(design.Xty().to_array().ravel(), X.T @ y)


class TestFitNormal:

    def test_recovers_line(self, line_design_arrays):
        X, y = line_design_arrays
        result = fit(X, y)
        assert isinstance(result, RegressionSolution)
        assert result.coefficients.shape == (2, 1)
        np.testing.assert_allclose(result.coefficients.values, [1.0, 2.0], atol=1e-12)
        assert result.method == 'normal'
        assert result.iterations == 0
        assert result.converged

    def test_intercept_flag(self, line_data):
        x, y = line_data
        result = fit(x, y, intercept=True)
        np.testing.assert_allclose(result.coefficients.values, [1.0, 2.0], atol=1e-12)

    def test_from_design(self, line_design_arrays):
        X, y = line_design_arrays
        result = fit(RegressionDesign.from_arrays(X, y))
        np.testing.assert_allclose(result.coefficients.values, [1.0, 2.0], atol=1e-12)

    def test_collinear_is_singular(self, collinear_arrays):
        X, y = collinear_arrays
        with pytest.raises(SingularMatrixError):
            fit(X, y)

    def test_normal_equation_function(self, line_design_arrays):
        X, y = line_design_arrays
        theta = normal_equation(Matrix.from_array(X), vector(y))
        np.testing.assert_allclose(theta.values, [1.0, 2.0], atol=1e-12)

    def test_matches_numpy_lstsq(self, rng):
        X = np.column_stack([np.ones(30), rng.standard_normal((30, 3))])
        y = X @ [0.5, 1.0, -2.0, 3.0] + rng.standard_normal(30) * 0.1
        expected, *_ = np.linalg.lstsq(X, y, rcond=None)
        result = fit(X, y)
        np.testing.assert_allclose(result.coefficients.values, expected, rtol=1e-8)


class TestFitGradientDescent:

    def test_agrees_with_normal(self, line_design_arrays):
        X, y = line_design_arrays
        result = fit(X, y, method='gradient_descent', learning_rate=0.1)
        np.testing.assert_allclose(result.coefficients.values, [1.0, 2.0], atol=1e-6)
        assert result.method == 'gradient_descent'
        assert result.iterations > 0
        assert result.converged

    def test_initial_parameters(self, line_design_arrays):
        X, y = line_design_arrays
        result = fit(X, y, method='gradient_descent', learning_rate=0.1, initial=[1.0, 2.0])
        assert result.coefficients == vector([1.0, 2.0])
        assert result.iterations == 1

    def test_initial_wrong_length(self, line_design_arrays):
        X, y = line_design_arrays
        with pytest.raises(DimensionError, match="initial: expected 2 parameters"):
            fit(X, y, method='gradient_descent', initial=[0.0])


class TestFitErrors:

    def test_requires_y_with_arrays(self, line_design_arrays):
        X, _ = line_design_arrays
        with pytest.raises(ValueError, match="y required"):
            fit(X)

    def test_unknown_method(self, line_design_arrays):
        X, y = line_design_arrays
        with pytest.raises(ValueError, match="Unknown method"):
            fit(X, y, method='qr')


class TestSolution:

    @pytest.fixture
    def result(self, line_design_arrays):
        X, y = line_design_arrays
        return fit(X, y)

    def test_fitted_plus_residuals_equals_y(self, result, line_data):
        _, y = line_data
        total = result.fitted_values().add(result.residuals())
        np.testing.assert_allclose(total.values, y, atol=1e-12)

    def test_predict(self, result):
        prediction = result.predict([[1.0, 10.0]])
        np.testing.assert_allclose(prediction.values, [21.0], atol=1e-10)

    def test_cost_near_zero(self, result):
        assert result.cost < 1e-20

    def test_timing(self, result):
        assert 'total_seconds' in result.timing
        assert 'inverse' in result.timing

    def test_summary(self, result):
        s = result.summary()
        assert "Coefficients" in s
        assert "Method: normal" in s
        assert "Observations: 4" in s

    def test_repr(self, result):
        assert "n=4, p=2" in repr(result)
