"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - IndexOutOfRangeError is also a builtin IndexError
    - Diagnostic attributes on SingularMatrixError, IndexOutOfRangeError,
      ConvergenceError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    ConvergenceError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    PyMatrixError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_index_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("row 5")

    def test_index_error_is_builtin_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("row 5")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_dimension_error(self):
        """Callers can branch on 'no inverse' versus 'malformed input'."""
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_convergence_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ConvergenceError("did not converge", iterations=100)

    def test_convergence_error_is_not_numerical_error(self):
        err = ConvergenceError("did not converge", iterations=100)
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:

    def test_all_attributes(self):
        err = SingularMatrixError(
            "X'X is singular",
            matrix_name="X'X",
            determinant=0.0,
            size=3,
        )
        assert str(err) == "X'X is singular"
        assert err.matrix_name == "X'X"
        assert err.determinant == 0.0
        assert err.size == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.size is None


class TestIndexOutOfRangeError:

    def test_attributes(self):
        err = IndexOutOfRangeError("col 7", index=(None, 7), shape=(3, 2))
        assert err.index == (None, 7)
        assert err.shape == (3, 2)

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("oops")
        assert err.index is None
        assert err.shape is None


class TestConvergenceError:

    def test_all_attributes(self):
        err = ConvergenceError(
            "diverging",
            iterations=3,
            final_change=12.5,
            reason="diverging",
            threshold=1e-10,
        )
        assert err.iterations == 3
        assert err.final_change == 12.5
        assert err.reason == "diverging"
        assert err.threshold == 1e-10

    def test_iterations_required(self):
        with pytest.raises(TypeError):
            ConvergenceError("missing iterations")

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
