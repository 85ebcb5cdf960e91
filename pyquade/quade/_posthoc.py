"""
Post-hoc pairwise comparisons following a significant Quade test.

Quade-Conover LSD:
    Two treatments a, b differ when |Ti[a] - Ti[b]| exceeds

        t_{1 - alpha/2, dfd} * sqrt(2 * r * T4 / dfd)

    with dfd = (r - 1)(c - 1). No per-pair p-values are produced.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats as sp_stats

from pyquade.core.exceptions import ComparatorPreconditionError
from pyquade.quade._common import (
    QUADE_LSD_METHOD,
    QuadeComparison,
    QuadePostHocParams,
)


def score_differences(treatment_scores: ArrayLike) -> NDArray[np.floating[Any]]:
    """Matrix of absolute differences |Ti[a] - Ti[b]| (symmetric, zero diagonal)."""
    Ti = np.asarray(treatment_scores, dtype=np.float64)
    return np.abs(Ti[:, np.newaxis] - Ti[np.newaxis, :])


def lsd_critical_value(t4: float, blocks: int, df_denom: int, alpha: float) -> float:
    """Least significant difference for treatment score differences."""
    t_crit = float(sp_stats.t.ppf(1.0 - alpha / 2.0, df_denom))
    return t_crit * float(np.sqrt(2.0 * blocks * t4 / df_denom))


def quade_lsd(
    treatment_scores: ArrayLike,
    t4: float,
    blocks: int,
    df_denom: int,
    alpha: float,
) -> QuadePostHocParams:
    """
    Quade-Conover-type LSD multiple comparisons.

    Args:
        treatment_scores: Ti, one score per treatment (length c >= 2)
        t4: Denominator term T4 from the Quade statistic (> 0)
        blocks: Number of blocks r (>= 2)
        df_denom: Denominator degrees of freedom (r - 1)(c - 1) (> 0)
        alpha: Significance level in (0, 1)

    Returns:
        QuadePostHocParams with the full difference matrix and the
        strictly lower-triangular significance matrix

    Raises:
        ComparatorPreconditionError: if a critical value cannot be computed
    """
    Ti = np.asarray(treatment_scores, dtype=np.float64)
    _check_preconditions(Ti, t4, blocks, df_denom, alpha)

    c = len(Ti)
    rdiff = score_differences(Ti)
    cv = lsd_critical_value(t4, blocks, df_denom, alpha)
    significant = np.tril(rdiff > cv, k=-1)

    comparisons: list[QuadeComparison] = []
    for a in range(1, c):
        for b in range(a):
            comparisons.append(QuadeComparison(
                treatment1=a + 1,
                treatment2=b + 1,
                diff=float(rdiff[a, b]),
                significant=bool(significant[a, b]),
            ))

    rdiff.setflags(write=False)
    significant.setflags(write=False)

    return QuadePostHocParams(
        method=QUADE_LSD_METHOD,
        rdiff=rdiff,
        critical_value=cv,
        p_values=None,
        significant=significant,
        comparisons=tuple(comparisons),
        alpha=alpha,
        df_denom=df_denom,
    )


def _check_preconditions(
    Ti: NDArray[np.floating[Any]],
    t4: float,
    blocks: int,
    df_denom: int,
    alpha: float,
) -> None:
    if Ti.ndim != 1 or len(Ti) < 2:
        raise ComparatorPreconditionError(
            f"treatment_scores: expected 1D with at least 2 entries, "
            f"got shape {Ti.shape}"
        )
    if not np.all(np.isfinite(Ti)):
        raise ComparatorPreconditionError(
            "treatment_scores: contains non-finite values"
        )
    if not df_denom > 0:
        raise ComparatorPreconditionError(
            f"df_denom must be positive, got {df_denom!r}",
            df_denom=df_denom,
            t4=t4,
        )
    if not (np.isfinite(t4) and t4 > 0):
        raise ComparatorPreconditionError(
            f"t4 must be positive and finite, got {t4!r}",
            df_denom=df_denom,
            t4=t4,
        )
    if blocks < 2:
        raise ComparatorPreconditionError(
            f"blocks must be at least 2, got {blocks!r}",
            df_denom=df_denom,
            t4=t4,
        )
    if not 0.0 < alpha < 1.0:
        raise ComparatorPreconditionError(
            f"alpha must be strictly between 0 and 1, got {alpha!r}",
            df_denom=df_denom,
            t4=t4,
        )
