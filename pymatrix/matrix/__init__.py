"""
Dense immutable matrices.

Public API:
    Matrix                    the matrix type
    matrix(rows, cols)(...)   two-step builder
    identity, scalar, vector  constructors for common shapes

Example:
    >>> from pymatrix.matrix import matrix, identity
    >>> m = matrix(3, 3)(1, 2, 3,
    ...                  0, 1, 4,
    ...                  5, 6, 0)
    >>> m.inverse().multiply(m) == identity(3)
    True
"""

from pymatrix.matrix.dense import (
    Matrix,
    MatrixBuilder,
    identity,
    matrix,
    scalar,
    vector,
)

__all__ = [
    "Matrix",
    "MatrixBuilder",
    "matrix",
    "identity",
    "scalar",
    "vector",
]
