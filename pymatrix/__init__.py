"""
PyMatrix: small dense matrices with exact cofactor algorithms.

An immutable matrix type with transpose, minors, recursive cofactor
determinant, adjugate, inverse and multiplication, plus the toy
consumers built on it.

Submodules:
    matrix: The Matrix type and its builders
    regression: Cost functions, gradient descent and normal equation
    benchmark: Micro-benchmark harness for the matrix operations
"""

__version__ = "0.1.0"

from pymatrix import matrix
from pymatrix import regression
from pymatrix.matrix import Matrix, identity, scalar, vector

__all__ = [
    "__version__",
    "matrix",
    "regression",
    "Matrix",
    "identity",
    "scalar",
    "vector",
]
