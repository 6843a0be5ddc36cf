"""
Shared compute infrastructure for pricefit.

This module provides timing utilities and numerical tolerance tiers that
are shared across domain-specific backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical comparison tiers
"""

from pricefit.core.compute.timing import Timer
from pricefit.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    "Timer",
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]
