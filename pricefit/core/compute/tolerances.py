"""
Tolerance tiers for numerical comparison.

The closed-form fit runs in double precision on the CPU. Well-conditioned
inputs reproduce exact answers to near machine precision; inputs with large
magnitudes or tightly clustered x values lose digits in n·Σx² − (Σx)².

Used by the test suite to compare fitted values against known answers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Exact-line inputs with modest magnitudes
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-9,
    name='cpu_fp64',
    description='CPU double precision, well-conditioned sums',
)

# Large magnitudes (prices in the millions) or clustered x values
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, cancellation in the denominator',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a comparison."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
