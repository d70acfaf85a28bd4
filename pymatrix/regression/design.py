"""
Regression Design.

Design holds the design matrix X and the response column y as Matrix
values, validated once at construction so solvers can trust them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import check_array, check_finite, check_ndim
from pymatrix.matrix import Matrix


@dataclass(frozen=True)
class RegressionDesign:
    """
    Regression design matrix specification.

    Immutable after construction.

    Construction:
        RegressionDesign.from_arrays(X, y)                    # X used as given
        RegressionDesign.from_arrays(X, y, intercept=True)    # prepend a ones column
        RegressionDesign.from_pairs([(x0, y0), (x1, y1)])     # univariate, with intercept
    """
    X: Matrix
    y: Matrix

    def __post_init__(self) -> None:
        if self.y.cols != 1:
            raise DimensionError(f"y: expected a column (n x 1), got {self.y.rows}x{self.y.cols}")
        if self.X.rows != self.y.rows:
            raise DimensionError(f"Inconsistent lengths: X={self.X.rows}, y={self.y.rows}")

    @classmethod
    def from_arrays(
        cls,
        X: ArrayLike,
        y: ArrayLike,
        *,
        intercept: bool = False,
    ) -> RegressionDesign:
        """
        Build a design from array-likes.

        Args:
            X: Predictors (n x p); a 1D input is one predictor
            y: Response (n,) or (n x 1)
            intercept: If True, prepend a column of ones to X

        Raises:
            ValidationError: If inputs are non-numeric or non-finite
            DimensionError: If shapes are inconsistent
        """
        X_arr = check_array(X, 'X')
        y_arr = check_array(y, 'y')
        if X_arr.ndim == 1:
            X_arr = X_arr.reshape(-1, 1)
        if y_arr.ndim == 2 and y_arr.shape[1] == 1:
            y_arr = y_arr.ravel()
        check_ndim(X_arr, 2, 'X')
        check_ndim(y_arr, 1, 'y')
        check_finite(X_arr, 'X')
        check_finite(y_arr, 'y')

        if intercept:
            X_arr = np.column_stack([np.ones(X_arr.shape[0]), X_arr])

        return cls(X=Matrix.from_array(X_arr), y=Matrix.from_array(y_arr))

    @classmethod
    def from_pairs(cls, data: Sequence[Sequence[float]]) -> RegressionDesign:
        """Univariate design with intercept from (x, y) pairs."""
        arr = check_array(data, 'data')
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(f"data: expected (x, y) pairs, got shape {arr.shape}")
        return cls.from_arrays(arr[:, 0], arr[:, 1], intercept=True)

    # === Properties ===

    @property
    def n(self) -> int:
        """Number of observations."""
        return self.X.rows

    @property
    def p(self) -> int:
        """Number of parameters (columns of X)."""
        return self.X.cols

    def XtX(self) -> Matrix:
        """Compute X'X."""
        return self.X.transpose().multiply(self.X)

    def Xty(self) -> Matrix:
        """Compute X'y."""
        return self.X.transpose().multiply(self.y)
