"""
Batch gradient descent for the squared-error cost.

Update rule, applied to every parameter simultaneously:

    theta := theta - (learning_rate / m) * X'(X theta - y)

Iteration stops when the largest absolute parameter change is within
``tol``. A step that increases the cost (beyond float64 round-off) means
the learning rate is too large and raises ConvergenceError immediately
instead of recursing or looping towards infinity.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import ConvergenceError, DimensionError
from pymatrix.core.validation import check_positive
from pymatrix.matrix import Matrix
from pymatrix.regression.cost import matrix_cost

DEFAULT_TOL = 1e-10
DEFAULT_MAX_ITERATIONS = 100_000


@dataclass(frozen=True)
class DescentPath:
    """Outcome of a converged gradient descent run."""
    theta: Matrix
    cost: float
    iterations: int
    final_change: float


def gradient_descent(
    X: Matrix,
    y: Matrix,
    theta: Matrix,
    learning_rate: float,
    *,
    tol: float = DEFAULT_TOL,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> DescentPath:
    """
    Minimise the squared-error cost of X theta against y.

    Args:
        X: Design matrix (m x n)
        y: Response column (m x 1)
        theta: Starting parameter column (n x 1)
        learning_rate: Step size (alpha), must be positive
        tol: Stop once max |theta_new - theta| <= tol
        max_iterations: Upper bound on update steps

    Returns:
        DescentPath with the final theta, its cost and the step count

    Raises:
        DimensionError: If the shapes are inconsistent or X has no rows
        ConvergenceError: reason='diverging' if a step increases the cost,
            reason='max_iterations' if tol is never reached
    """
    check_positive(learning_rate, 'learning_rate')
    if tol < 0:
        raise ValueError(f"tol must be non-negative, got {tol}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")
    if X.rows == 0:
        raise DimensionError("X: gradient descent requires at least one observation")

    step = learning_rate / X.rows
    Xt = X.transpose()
    cost = matrix_cost(X, y, theta)
    change = float('inf')

    for iteration in range(1, max_iterations + 1):
        gradient = Xt.multiply(X.multiply(theta).subtract(y))
        updated = theta.subtract(gradient.scale(step))
        change = updated.subtract(theta).map(abs).reduce(max, 0.0)
        updated_cost = matrix_cost(X, y, updated)

        if not np.isfinite(updated_cost) or (
            updated_cost > cost
            and not np.isclose(updated_cost, cost, rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)
        ):
            raise ConvergenceError(
                f"Gradient descent diverging at iteration {iteration}: cost rose "
                f"from {cost:.6g} to {updated_cost:.6g} (learning_rate={learning_rate})",
                iterations=iteration,
                final_change=change,
                reason='diverging',
                threshold=tol,
            )

        theta, cost = updated, updated_cost
        if change <= tol:
            return DescentPath(theta=theta, cost=cost, iterations=iteration, final_change=change)

    raise ConvergenceError(
        f"Gradient descent did not converge after {max_iterations} iterations "
        f"(last change {change:.3g}, tol {tol:.3g})",
        iterations=max_iterations,
        final_change=change,
        reason='max_iterations',
        threshold=tol,
    )
