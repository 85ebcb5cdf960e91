"""
Quade test for unreplicated complete block designs.

Public API:
    quade_test(x, ...) -> (QuadeSolution, QuadePostHocSolution | None)
    quade_posthoc(result, ...) -> QuadePostHocSolution    # Quade-Conover LSD
    quade_statistic(x) -> (QuadeStatistic, warnings)      # low-level engine
    quade_lsd(Ti, t4, r, dfd, alpha) -> QuadePostHocParams # low-level comparator
"""

from pyquade.quade.solvers import quade_test, quade_posthoc
from pyquade.quade.solution import QuadeSolution, QuadePostHocSolution
from pyquade.quade.design import QuadeDesign
from pyquade.quade._statistic import quade_statistic
from pyquade.quade._posthoc import quade_lsd
from pyquade.quade._common import (
    QuadeComparison,
    QuadeParams,
    QuadePostHocParams,
    QuadeStatistic,
)

__all__ = [
    "quade_test",
    "quade_posthoc",
    "quade_statistic",
    "quade_lsd",
    "QuadeDesign",
    "QuadeSolution",
    "QuadePostHocSolution",
    "QuadeComparison",
    "QuadeParams",
    "QuadePostHocParams",
    "QuadeStatistic",
]
