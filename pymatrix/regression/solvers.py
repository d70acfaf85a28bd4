"""
Solver dispatch for regression.

This module provides the fit() function (public API), backend selection,
and thin functional wrappers over the backends.
"""

from typing import Literal, Sequence

from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import check_array, check_ndim
from pymatrix.matrix import Matrix, vector
from pymatrix.regression.backends import GradientDescentBackend, NormalEquationBackend
from pymatrix.regression.descent import DEFAULT_MAX_ITERATIONS, DEFAULT_TOL
from pymatrix.regression.design import RegressionDesign
from pymatrix.regression.solution import RegressionSolution


# Type alias for method selection
MethodChoice = Literal['normal', 'gradient_descent']


def fit(
    X: ArrayLike | RegressionDesign,
    y: ArrayLike | None = None,
    *,
    method: MethodChoice = 'normal',
    intercept: bool = False,
    learning_rate: float = 0.01,
    tol: float = DEFAULT_TOL,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    initial: ArrayLike | None = None,
) -> RegressionSolution:
    """
    Fit a linear regression model by least squares.

    Minimises J(theta) = 1/(2m) * ||X theta - y||^2.

    Args:
        X: Design matrix (n x p) as any array-like, or a RegressionDesign
        y: Response (n,). Required unless X is a RegressionDesign.
        method: Solver to use:
            - 'normal': closed form (X'X)^-1 X'y via the cofactor inverse
            - 'gradient_descent': batch gradient descent
        intercept: Prepend a column of ones to X (array input only)
        learning_rate: Gradient descent step size
        tol: Gradient descent convergence threshold
        max_iterations: Gradient descent iteration cap
        initial: Gradient descent starting parameters (p,); zeros if None

    Returns:
        RegressionSolution with coefficients, cost and timing

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If X and y have inconsistent dimensions
        SingularMatrixError: If X'X is singular ('normal')
        ConvergenceError: If gradient descent fails ('gradient_descent')

    Example:
        >>> from pymatrix.regression import fit
        >>> result = fit([[1.0], [2.0], [3.0]], [2.0, 4.0, 6.0])
        >>> print(result.summary())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(X, RegressionDesign):
        design = X
    else:
        if y is None:
            raise ValueError("y required when X is not a RegressionDesign")
        design = RegressionDesign.from_arrays(X, y, intercept=intercept)

    # === Select Backend ===
    backend = _get_backend(method, learning_rate, tol, max_iterations, initial, design)

    # === Solve ===
    result = backend.solve(design)

    # === Wrap and Return ===
    return RegressionSolution(_result=result, _design=design)


def _get_backend(
    choice: MethodChoice,
    learning_rate: float,
    tol: float,
    max_iterations: int,
    initial: ArrayLike | None,
    design: RegressionDesign,
):
    """
    Select and instantiate the requested backend.

    Raises:
        ValueError: If an unknown method is specified
    """
    if choice == 'normal':
        return NormalEquationBackend()

    elif choice == 'gradient_descent':
        theta = None
        if initial is not None:
            arr = check_array(initial, 'initial')
            check_ndim(arr, 1, 'initial')
            theta = vector(arr)
            if theta.rows != design.p:
                raise DimensionError(
                    f"initial: expected {design.p} parameters, got {theta.rows}"
                )
        return GradientDescentBackend(
            learning_rate=learning_rate,
            tol=tol,
            max_iterations=max_iterations,
            initial=theta,
        )

    else:
        raise ValueError(f"Unknown method: {choice!r}")


def normal_equation(X: Matrix, y: Matrix) -> Matrix:
    """
    Least-squares parameters (X'X)^-1 X'y as a column.

    Raises:
        SingularMatrixError: If X'X is singular
    """
    design = RegressionDesign(X=X, y=y)
    return NormalEquationBackend().solve(design).params.coefficients


def linear_regression_gradient_descent(
    theta0: float,
    theta1: float,
    data: Sequence[Sequence[float]],
    learning_rate: float,
    *,
    tol: float = DEFAULT_TOL,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> tuple[float, float]:
    """
    Univariate gradient descent for h(x) = theta0 + theta1 * x.

    Args:
        theta0: Starting intercept
        theta1: Starting slope
        data: (x, y) pairs
        learning_rate: Step size

    Returns:
        (theta0, theta1) at convergence

    Raises:
        ConvergenceError: If descent diverges or runs out of iterations
    """
    design = RegressionDesign.from_pairs(data)
    backend = GradientDescentBackend(
        learning_rate=learning_rate,
        tol=tol,
        max_iterations=max_iterations,
        initial=vector([theta0, theta1]),
    )
    theta = backend.solve(design).params.coefficients
    return (theta.get(0, 0), theta.get(1, 0))
