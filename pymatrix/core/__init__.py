"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the matrix
type and by its consumers (regression, benchmark).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]
