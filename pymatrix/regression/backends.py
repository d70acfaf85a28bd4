"""
Regression backends.

Each backend takes a validated RegressionDesign and returns a
Result[RegressionParams]. Backends are stateless apart from their
construction-time settings.
"""

from typing import Any

from pymatrix.core.compute.timing import Timer
from pymatrix.core.result import Result
from pymatrix.matrix import Matrix, scalar
from pymatrix.regression.cost import matrix_cost
from pymatrix.regression.descent import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOL,
    gradient_descent,
)
from pymatrix.regression.design import RegressionDesign
from pymatrix.regression.solution import RegressionParams


class NormalEquationBackend:
    """
    Closed-form least squares: theta = (X'X)^-1 X'y.

    The inverse is the cofactor adjugate divided by the determinant, so
    this is only practical for a handful of parameters.

    Raises (from solve):
        SingularMatrixError: If X'X has determinant 0 (collinear columns)
    """

    @property
    def name(self) -> str:
        return 'normal'

    def solve(self, design: RegressionDesign) -> Result[RegressionParams]:
        timer = Timer()
        timer.start()

        with timer.section('normal_matrix'):
            xtx = design.XtX()
            xty = design.Xty()

        with timer.section('inverse'):
            xtx_inv = xtx.inverse()

        with timer.section('solve'):
            coefficients = xtx_inv.multiply(xty)

        with timer.section('cost'):
            cost = matrix_cost(design.X, design.y, coefficients)

        timer.stop()

        info: dict[str, Any] = {
            'method': self.name,
            'converged': True,
            'iterations': 0,
        }

        return Result(
            params=RegressionParams(coefficients=coefficients, cost=cost),
            info=info,
            timing=timer.result(),
            method=self.name,
        )


class GradientDescentBackend:
    """
    Iterative least squares by batch gradient descent.

    Args:
        learning_rate: Step size (alpha)
        tol: Convergence threshold on the largest parameter change
        max_iterations: Upper bound on update steps
        initial: Starting parameter column; zeros if None

    Raises (from solve):
        ConvergenceError: If descent diverges or runs out of iterations
    """

    def __init__(
        self,
        learning_rate: float,
        tol: float = DEFAULT_TOL,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        initial: Matrix | None = None,
    ):
        self._learning_rate = learning_rate
        self._tol = tol
        self._max_iterations = max_iterations
        self._initial = initial

    @property
    def name(self) -> str:
        return 'gradient_descent'

    def solve(self, design: RegressionDesign) -> Result[RegressionParams]:
        timer = Timer()
        timer.start()

        theta = self._initial
        if theta is None:
            theta = scalar(design.p, 1, 0.0)

        with timer.section('descent'):
            path = gradient_descent(
                design.X,
                design.y,
                theta,
                self._learning_rate,
                tol=self._tol,
                max_iterations=self._max_iterations,
            )

        timer.stop()

        info: dict[str, Any] = {
            'method': self.name,
            'converged': True,
            'iterations': path.iterations,
            'final_change': path.final_change,
            'learning_rate': self._learning_rate,
            'tol': self._tol,
        }

        return Result(
            params=RegressionParams(coefficients=path.theta, cost=path.cost),
            info=info,
            timing=timer.result(),
            method=self.name,
        )
