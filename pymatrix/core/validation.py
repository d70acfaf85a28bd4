"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No truncation or padding of value sequences
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    IndexOutOfRangeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result never aliases the input, so callers may freeze it.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    # Booleans are accepted as 0/1.
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_shape_args(rows: int, cols: int) -> None:
    """
    Verify a (rows, cols) pair describes a valid matrix shape.

    Args:
        rows: Declared number of rows
        cols: Declared number of columns

    Raises:
        ValidationError: If either value is not a non-negative integer
    """
    for label, value in (('rows', rows), ('cols', cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"{label}: expected a non-negative integer, got {type(value).__name__}"
            )
        if value < 0:
            raise ValidationError(f"{label}: must be non-negative, got {value}")


def check_length(
    array: NDArray[np.floating[Any]],
    expected: int,
    name: str,
) -> None:
    """
    Verify a flat array holds exactly the expected number of values.

    Args:
        array: 1D array to check
        expected: Required number of values
        name: Parameter name for error messages

    Raises:
        DimensionError: If the length differs from expected
    """
    if array.shape[0] != expected:
        raise DimensionError(
            f"{name}: expected {expected} values, got {array.shape[0]}"
        )


def check_index(index: int, size: int, axis: str, shape: tuple[int, int]) -> None:
    """
    Verify an index addresses an existing row or column.

    Negative indices are rejected; there is no wrap-around.

    Args:
        index: Index to check
        size: Extent of the addressed axis
        axis: 'row' or 'col', used in the message and the error's index pair
        shape: Shape of the matrix being indexed

    Raises:
        IndexOutOfRangeError: If index is outside [0, size)
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{axis} index: expected an integer, got {type(index).__name__}"
        )
    if not 0 <= index < size:
        pair = (int(index), None) if axis == 'row' else (None, int(index))
        raise IndexOutOfRangeError(
            f"{axis} index {index} out of range for {shape[0]}x{shape[1]} matrix",
            index=pair,
            shape=shape,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Args:
        shape: (rows, cols) to check
        operation: Name of the operation requiring a square matrix

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{operation}: requires a square matrix, got {rows}x{cols}"
        )


def check_same_shape(
    a: tuple[int, int],
    b: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical (for elementwise operations).

    Args:
        a: Shape of the left operand
        b: Shape of the right operand
        operation: Name of the operation for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if a != b:
        raise DimensionError(
            f"{operation}: shape mismatch, {a[0]}x{a[1]} vs {b[0]}x{b[1]}"
        )


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar parameter is strictly positive and finite.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If value <= 0 or not finite
    """
    if not np.isfinite(value) or value <= 0:
        raise ValidationError(f"{name}: must be positive and finite, got {value}")
