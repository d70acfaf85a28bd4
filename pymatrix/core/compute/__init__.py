"""
Shared compute infrastructure for PyMatrix.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison and cost limits
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    COFACTOR_WARN_ORDER,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "COFACTOR_WARN_ORDER",
    "select_tolerance",
]
