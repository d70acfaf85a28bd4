"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Consumers (regression, benchmark) raise the
classes defined here rather than defining their own.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix shapes are incorrect or inconsistent.

    Raised when a value count does not match the declared shape, when
    operands of a binary operation have incompatible shapes, or when an
    operation that requires a square matrix receives a rectangular one.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    A row or column index lies outside the matrix.

    Also an IndexError, so callers using plain Python idioms can catch it.

    Attributes:
        index: The offending (y, x) pair; either entry may be None when
            only one axis was addressed
        shape: The (rows, cols) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int | None, int | None] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an inverse is requested but the determinant is exactly zero.
    Kept distinct from DimensionError so callers can tell "no inverse
    exists" apart from "malformed input".

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
        size: Order of the square matrix, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        size: int | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.size = size


class ConvergenceError(PyMatrixError):
    """
    Iterative algorithm failed to converge.

    Raised when gradient descent fails to meet its convergence criterion
    within the maximum number of iterations, or starts diverging.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final parameter or objective change
        reason: Why convergence failed ('max_iterations' or 'diverging')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
