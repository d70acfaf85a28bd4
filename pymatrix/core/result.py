"""
Generic result container for PyMatrix solvers.

Solvers that sit on top of the Matrix type (normal equation, gradient
descent) return their payload inside this envelope so that timing,
iteration counts and non-fatal warnings travel with the numbers.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (converged, iterations, method)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True), like the matrices it carries
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The solver-specific parameter payload type

    Attributes:
        params: Solver-specific parameters (coefficients, cost, etc.)
        info: Structured metadata (method, convergence, iterations)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method (no convergence notion)
        >>> Result(
        ...     params=RegressionParams(coefficients=theta, cost=0.0),
        ...     info={'method': 'normal'},
        ...     timing={'total_seconds': 0.01},
        ...     method='normal'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=RegressionParams(coefficients=theta, cost=0.02),
        ...     info={'converged': True, 'iterations': 1523},
        ...     timing={'total_seconds': 0.5},
        ...     method='gradient_descent'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
