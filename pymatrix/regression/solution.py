"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from numpy.typing import ArrayLike

from pymatrix.core.result import Result
from pymatrix.matrix import Matrix

if TYPE_CHECKING:
    from pymatrix.regression.design import RegressionDesign


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends.
    """
    coefficients: Matrix
    cost: float


@dataclass
class RegressionSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides convenient accessors.
    """
    _result: Result[RegressionParams]
    _design: 'RegressionDesign'

    @property
    def coefficients(self) -> Matrix:
        """Parameter column (p x 1)."""
        return self._result.params.coefficients

    @property
    def cost(self) -> float:
        return self._result.params.cost

    @property
    def method(self) -> str:
        return self._result.method

    @property
    def iterations(self) -> int:
        return self._result.info.get('iterations', 0)

    @property
    def converged(self) -> bool:
        return self._result.info.get('converged', True)

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def fitted_values(self) -> Matrix:
        """X theta for the training design."""
        return self._design.X.multiply(self.coefficients)

    def residuals(self) -> Matrix:
        """y - X theta for the training design."""
        return self._design.y.subtract(self.fitted_values())

    def predict(self, X: Matrix | ArrayLike) -> Matrix:
        """
        Predict responses for new rows.

        X must have the same columns as the training design, including
        the intercept column if the design had one.
        """
        if not isinstance(X, Matrix):
            X = Matrix.from_array(X)
        return X.multiply(self.coefficients)

    def summary(self) -> str:
        """Generate a short text summary."""
        lines = [
            "Linear regression",
            "=" * 40,
            f"Observations: {self._design.n}",
            f"Parameters:   {self._design.p}",
            "",
            "Coefficients:",
        ]
        for i, value in enumerate(self.coefficients.values.tolist()):
            lines.append(f"  theta[{i}] {value:>14.6g}")
        lines.extend([
            "",
            f"Cost (1/2m RSS): {self.cost:.6g}",
            f"Method: {self.method}",
        ])
        if self.method == 'gradient_descent':
            lines.append(f"Iterations: {self.iterations}")
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds']:.4f}s")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(n={self._design.n}, p={self._design.p}, "
            f"cost={self.cost:.4g}, method={self.method!r})"
        )
