"""
Dense, immutable, row-major matrix.

Matrix is a shape-tagged rectangular grid of float64 values. Every
operation reads its receiver (and optional operand) and returns a freshly
constructed Matrix; nothing mutates in place. Each instance owns a
read-only numpy buffer, so instances can be shared across threads
without locking.

Determinant, adjugate and inverse are built from minor extraction and
recursive cofactor expansion along row 0. That is O(n!) and meant for
small matrices; there is no LU decomposition or pivoting.

Construction:
    matrix(3, 2)(1, 2,
                 3, 4,
                 5, 6)                      # two-step builder
    Matrix.from_values(3, 2, [1, 2, 3, 4, 5, 6])
    Matrix.from_array([[1, 2], [3, 4], [5, 6]])
    identity(3), scalar(2, 2, 0.5), vector([1, 2, 3])
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from functools import reduce as _fold
from typing import Any, Callable, Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import (
    COFACTOR_WARN_ORDER,
    ToleranceTier,
    select_tolerance,
)
from pymatrix.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_array,
    check_index,
    check_length,
    check_ndim,
    check_same_shape,
    check_shape_args,
    check_square,
)


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """
    Immutable rows x cols matrix of float64 values in row-major order.

    The value at (y, x) is ``values[y * cols + x]``. The constructor
    validates that exactly ``rows * cols`` values are given and copies
    them into a read-only buffer owned by this instance.

    Equality is structural and exact: same rows, same cols, and
    elementwise-equal values with no tolerance. Use ``isclose`` for an
    approximate comparison.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        values: Read-only flat float64 array of length rows * cols

    Raises:
        ValidationError: If the shape is not a pair of non-negative
            integers or the values are not numeric
        DimensionError: If the number of values is not rows * cols
    """
    rows: int
    cols: int
    values: NDArray[np.floating[Any]]

    def __post_init__(self) -> None:
        check_shape_args(self.rows, self.cols)
        arr = check_array(self.values, 'values')
        check_ndim(arr, 1, 'values')
        check_length(arr, self.rows * self.cols, 'values')
        arr.flags.writeable = False
        object.__setattr__(self, 'rows', int(self.rows))
        object.__setattr__(self, 'cols', int(self.cols))
        object.__setattr__(self, 'values', arr)

    # === Construction ===

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Iterable[float]) -> Matrix:
        """Build a rows x cols matrix from a flat row-major sequence."""
        return cls(rows, cols, list(values))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like.

        A 1D input is treated as a column vector, matching ``vector``.

        Raises:
            DimensionError: If the input has more than 2 dimensions
        """
        arr = check_array(array, 'array')
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
        check_ndim(arr, 2, 'array')
        rows, cols = arr.shape
        return cls(rows, cols, arr.ravel())

    def to_array(self) -> NDArray[np.floating[Any]]:
        """Return an independent, writable rows x cols copy of the values."""
        return self.values.reshape(self.rows, self.cols).copy()

    # === Accessors ===

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def get(self, y: int, x: int) -> float:
        """
        Return the value at row y, column x.

        Raises:
            IndexOutOfRangeError: Unless 0 <= y < rows and 0 <= x < cols.
                Negative indices do not wrap around.
        """
        check_index(y, self.rows, 'row', self.shape)
        check_index(x, self.cols, 'col', self.shape)
        return float(self.values[y * self.cols + x])

    def row(self, y: int) -> Matrix:
        """Return row y as a 1 x cols matrix."""
        check_index(y, self.rows, 'row', self.shape)
        start = y * self.cols
        return Matrix(1, self.cols, self.values[start:start + self.cols])

    def col(self, x: int) -> Matrix:
        """Return column x as a rows x 1 matrix."""
        check_index(x, self.cols, 'col', self.shape)
        return Matrix(self.rows, 1, self.values[x::self.cols])

    # === Equality ===

    def eq(self, other: Matrix) -> bool:
        """Exact structural equality: shape and every value."""
        if self.rows != other.rows or self.cols != other.cols:
            return False
        return bool(np.array_equal(self.values, other.values))

    def isclose(self, other: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate equality within a tolerance tier.

        Shapes must still match exactly. Defaults to the CPU float64 tier.
        """
        if tolerance is None:
            tolerance = select_tolerance()
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self.values, other.values, rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.eq(other)

    def __hash__(self) -> int:
        # hash(-0.0) == hash(0.0), consistent with eq
        return hash((self.rows, self.cols, tuple(self.values.tolist())))

    def __repr__(self) -> str:
        body = ', '.join(repr(v) for v in self.values.tolist())
        return f"matrix({self.rows}, {self.cols})({body})"

    # === Shape transforms ===

    def transpose(self) -> Matrix:
        """Swap rows and columns: ``result.get(x, y) == self.get(y, x)``."""
        src = self.values.tolist()
        out = [0.0] * len(src)
        for y in range(self.rows):
            for x in range(self.cols):
                out[y + x * self.rows] = src[y * self.cols + x]
        return Matrix(self.cols, self.rows, out)

    def rotate(self) -> Matrix:
        """
        Rotate 90 degrees clockwise.

        The result has shape (cols, rows). Its values are produced column
        by column, reading each source column from the bottom up:

            matrix(3, 2)(1, 2,        matrix(2, 3)(5, 3, 1,
                         3, 4,   ->                6, 4, 2)
                         5, 6)
        """
        src = self.values.tolist()
        out = []
        for x in range(self.cols):
            for y in range(self.rows - 1, -1, -1):
                out.append(src[y * self.cols + x])
        return Matrix(self.cols, self.rows, out)

    def mirror(self) -> Matrix:
        """Flip horizontally by reversing every row."""
        src = self.values.tolist()
        out: list[float] = []
        for y in range(self.rows):
            out.extend(reversed(src[y * self.cols:(y + 1) * self.cols]))
        return Matrix(self.rows, self.cols, out)

    # === Minors ===

    def minor(self, y: int, x: int) -> Matrix:
        """
        Submatrix formed by deleting row y and column x.

        The result is (rows - 1) x (cols - 1) and keeps the relative order
        of the remaining cells.

        Raises:
            IndexOutOfRangeError: If y or x is outside the matrix
        """
        check_index(y, self.rows, 'row', self.shape)
        check_index(x, self.cols, 'col', self.shape)
        src = self.values.tolist()
        out = [
            src[iy * self.cols + ix]
            for iy in range(self.rows) if iy != y
            for ix in range(self.cols) if ix != x
        ]
        return Matrix(self.rows - 1, self.cols - 1, out)

    def minors(self) -> list[Matrix]:
        """All minors, row-major: minor(0, 0), minor(0, 1), ..., minor(rows-1, cols-1)."""
        return [
            self.minor(y, x)
            for y in range(self.rows)
            for x in range(self.cols)
        ]

    # === Determinant, adjugate, inverse ===

    def determinant(self) -> float:
        """
        Determinant by recursive cofactor expansion along row 0.

        For n > 2 this sums ``values[x] * minor(0, x).determinant() * (-1)**x``
        over the columns of row 0, left to right. The 2x2 base case is
        ``a*d - b*c``. A 1x1 matrix returns its value and a 0x0 matrix
        returns 1.0 (the empty product).

        Cost grows as n!, and a RuntimeWarning is issued above
        COFACTOR_WARN_ORDER.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, 'determinant')
        if self.rows > COFACTOR_WARN_ORDER:
            warnings.warn(
                f"determinant of a {self.rows}x{self.cols} matrix by cofactor "
                f"expansion evaluates {self.rows}! terms",
                RuntimeWarning,
                stacklevel=2,
            )
        return _cofactor_expansion(self)

    def adjugate(self) -> Matrix:
        """
        Transpose of the cofactor matrix.

        Computed as the determinants of ``transpose().minors()`` in
        row-major order, the minor at (y, x) signed by ``(-1)**(y + x)``,
        reassembled into a matrix of the original shape. For odd orders
        that sign equals ``(-1)**index`` of the minor's position in the
        flattened sequence.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, 'adjugate')
        n = self.cols
        out = [
            _cofactor_expansion(m) * (-1) ** (ix // n + ix % n)
            for ix, m in enumerate(self.transpose().minors())
        ]
        return Matrix(self.rows, self.cols, out)

    def inverse(self) -> Matrix:
        """
        Inverse as ``adjugate() / determinant()``.

        The determinant is computed first; an exactly-zero determinant
        raises rather than producing inf/NaN cells.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly 0
        """
        det = self.determinant()
        if det == 0:
            raise SingularMatrixError(
                f"{self.rows}x{self.cols} matrix is singular (determinant 0) "
                f"and has no inverse",
                matrix_name=repr(self),
                determinant=det,
                size=self.rows,
            )
        return self.adjugate().map(lambda v: v / det)

    # === Arithmetic ===

    def scale(self, factor: float) -> Matrix:
        """Multiply every element by a scalar."""
        if isinstance(factor, Matrix):
            raise ValidationError("scale: factor must be a scalar, use multiply() for matrices")
        factor = float(factor)
        return self.map(lambda v: v * factor)

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product ``self @ other``.

        Each cell (y, x) accumulates ``self.get(y, z) * other.get(z, x)``
        for z in 0..self.cols, y over self.rows, x over other.cols.

        Raises:
            ValidationError: If other is not a Matrix (use scale())
            DimensionError: If self.cols != other.rows
        """
        _check_operand(other, 'multiply')
        if self.cols != other.rows:
            raise DimensionError(
                f"multiply: inner dimensions differ, "
                f"{self.rows}x{self.cols} times {other.rows}x{other.cols}"
            )
        a = self.values.tolist()
        b = other.values.tolist()
        out = [0.0] * (self.rows * other.cols)
        for y in range(self.rows):
            for x in range(other.cols):
                for z in range(self.cols):
                    out[x + y * other.cols] += a[y * self.cols + z] * b[z * other.cols + x]
        return Matrix(self.rows, other.cols, out)

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum of two matrices of the same shape."""
        _check_operand(other, 'add')
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix(self.rows, self.cols, self.values + other.values)

    def subtract(self, other: Matrix) -> Matrix:
        """Elementwise difference of two matrices of the same shape."""
        _check_operand(other, 'subtract')
        check_same_shape(self.shape, other.shape, 'subtract')
        return Matrix(self.rows, self.cols, self.values - other.values)

    # === Map / reduce ===

    def map(self, fn: Callable[[float], float]) -> Matrix:
        """Apply fn to every value; same shape, new matrix."""
        return Matrix(self.rows, self.cols, [fn(v) for v in self.values.tolist()])

    def reduce(self, fn: Callable[[float, float], float], initial: float) -> float:
        """Left fold over the values in storage order, starting at initial."""
        return _fold(fn, self.values.tolist(), initial)


def _cofactor_expansion(m: Matrix) -> float:
    """Determinant of a square matrix, no shape check or size warning."""
    n = m.rows
    if n == 0:
        return 1.0
    if n == 1:
        return float(m.values[0])
    if n == 2:
        a, b, c, d = m.values.tolist()
        return a * d - b * c
    first_row = m.values[:n].tolist()
    total = 0.0
    for x in range(n):
        total += first_row[x] * _cofactor_expansion(m.minor(0, x)) * (-1) ** x
    return total


def _check_operand(other: Any, operation: str) -> None:
    if not isinstance(other, Matrix):
        raise ValidationError(
            f"{operation}: expected a Matrix operand, got {type(other).__name__}"
        )


# === Builders ===


@dataclass(frozen=True)
class MatrixBuilder:
    """
    First step of two-step construction: the shape is fixed here.

    Calling the builder with exactly rows * cols values in row-major order
    produces the Matrix; any other count raises DimensionError.

        m32 = matrix(3, 2)
        m32(1, 2, 3, 4, 5, 6)
    """
    rows: int
    cols: int

    def __post_init__(self) -> None:
        check_shape_args(self.rows, self.cols)

    def __call__(self, *values: float) -> Matrix:
        return Matrix.from_values(self.rows, self.cols, values)


def matrix(rows: int, cols: int) -> MatrixBuilder:
    """Return a builder for rows x cols matrices."""
    return MatrixBuilder(rows, cols)


def identity(size: int) -> Matrix:
    """size x size matrix with 1 on the diagonal and 0 elsewhere."""
    check_shape_args(size, size)
    values = [0.0] * (size * size)
    for i in range(size):
        values[i * size + i] = 1.0
    return Matrix(size, size, values)


def scalar(rows: int, cols: int, value: float) -> Matrix:
    """rows x cols matrix with every cell set to value."""
    check_shape_args(rows, cols)
    return Matrix(rows, cols, [value] * (rows * cols))


def vector(values: ArrayLike) -> Matrix:
    """Column matrix (len(values) x 1)."""
    arr = check_array(values, 'values')
    check_ndim(arr, 1, 'values')
    return Matrix(arr.shape[0], 1, arr)
