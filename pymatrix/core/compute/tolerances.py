"""
Tolerance tiers and cost limits for numerical comparison.

Matrix equality (``==`` / ``Matrix.eq``) is always exact. These tiers
back the approximate comparison ``Matrix.isclose`` and the test suite:
- EXACT: bitwise-equal values, same as ``eq``
- CPU_FP64: float64 round-off from cofactor expansion and division
- CPU_FP64_ILL_CONDITIONED: relaxed for near-singular inputs
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise-equal values',
)

# Round-off of a handful of float64 multiply/add steps
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Near-singular matrices (tiny determinant) amplify round-off in inverse()
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned',
)

# Cofactor expansion of an n x n matrix evaluates n! 2x2 determinants.
# Above this order determinant() warns; 10! is already 3.6 million.
COFACTOR_WARN_ORDER = 9


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for an approximate comparison."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
