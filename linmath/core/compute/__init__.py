"""
Shared compute infrastructure for linmath.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical comparison tiers per element type
"""

from linmath.core.compute.timing import Timer, timed
from linmath.core.compute.tolerances import (
    ToleranceTier,
    FP64,
    FP32,
    EXACT,
    select_tolerance,
    is_close,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP32",
    "EXACT",
    "select_tolerance",
    "is_close",
]
