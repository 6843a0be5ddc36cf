"""
Regression backends.

Available backends:
    CPUClosedFormBackend: CPU reference implementation from running sums
"""

from pricefit.regression.backends.cpu import CPUClosedFormBackend

__all__ = [
    "CPUClosedFormBackend",
]
