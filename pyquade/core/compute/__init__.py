"""
Shared compute infrastructure for PyQuade.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers
"""

from pyquade.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
