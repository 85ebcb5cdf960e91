"""
PyQuade: the Quade test for unreplicated complete block designs.

Ranks treatments within each block, weights blocks by the rank of their
range, and tests for identical treatment effects with an F approximation.
Significant results can be followed by Quade-Conover LSD comparisons.

Submodules:
    quade: Quade test and post-hoc comparisons
    core: Result envelope, exceptions, validation, timing
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pyquade import quade
from pyquade.quade import quade_test, quade_posthoc

__all__ = [
    "__version__",
    "quade",
    "quade_test",
    "quade_posthoc",
]
