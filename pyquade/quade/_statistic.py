"""
Quade statistic for unreplicated complete block designs.

Quade (1979) ranks the treatments within each block, then weights each
block by the rank of its range so that blocks showing larger treatment
differences count for more. With c treatments and r blocks:

    R[i, j]   within-block ranks (ties averaged)
    Q[i]      rank of range(x[i, :]) among the r blocks (ties averaged)
    rij       (R[i, j] - (c + 1)/2) * Q[i]
    Ti        sum_i rij[i, j]
    T3        sum_j Ti^2 / r
    T4        sum_ij rij^2 - T3
    W         (r - 1) * T3 / T4  ~  F(c - 1, (c - 1)(r - 1))

Matches Conover (1999), Practical Nonparametric Statistics, section 5.8.
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy import stats as sp_stats

from pyquade.core.compute.tolerances import DEGENERATE_T4_RTOL
from pyquade.core.exceptions import DimensionError, UndefinedStatisticError
from pyquade.quade._common import QuadeStatistic


def rank_within_blocks(x: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Tied ranks 1..c of each row of x, independently per block."""
    return sp_stats.rankdata(x, method='average', axis=1).astype(np.float64)


def block_weights(
    x: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """
    Block ranges and their tied ranks 1..r.

    A range wider than the float64 maximum (e.g. a row holding both
    1e308 and -1e308) becomes inf and ranks as the largest.

    Returns:
        (ranges, Q): both length r
    """
    with np.errstate(over='ignore'):
        ranges = np.ptp(x, axis=1)
    q = sp_stats.rankdata(ranges, method='average').astype(np.float64)
    return ranges, q


def quade_statistic(
    x: NDArray[np.floating[Any]],
    ranks: NDArray[np.floating[Any]] | None = None,
    weights: tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]] | None = None,
) -> tuple[QuadeStatistic, list[str]]:
    """
    Compute the Quade statistic and its F-approximation p-value.

    Args:
        x: Validated r x c observation matrix (blocks x treatments),
            r >= 2 and c >= 2. Not modified.
        ranks: Output of rank_within_blocks(x), if already computed
        weights: Output of block_weights(x), if already computed

    Returns:
        (QuadeStatistic, warnings_list)

    Raises:
        UndefinedStatisticError: if T4 is zero, i.e. the weighted ranks
            have no residual variability and W is undefined
        DimensionError: if precomputed ranks or weights have the wrong shape
    """
    warnings_list: list[str] = []
    r, c = x.shape

    if ranks is None:
        ranks = rank_within_blocks(x)
    if weights is None:
        weights = block_weights(x)
    R = np.array(ranks, dtype=np.float64)
    ranges = np.array(weights[0], dtype=np.float64)
    Q = np.array(weights[1], dtype=np.float64)
    if R.shape != (r, c) or ranges.shape != (r,) or Q.shape != (r,):
        raise DimensionError(
            f"precomputed ranks/weights do not match a {r} x {c} design: "
            f"ranks {R.shape}, ranges {ranges.shape}, weights {Q.shape}"
        )

    sorted_rows = np.sort(x, axis=1)
    with np.errstate(over='ignore'):
        gaps = np.diff(sorted_rows, axis=1)
    n_tied_blocks = int(np.sum(np.any(gaps == 0.0, axis=1)))
    if n_tied_blocks > 0:
        warnings_list.append(
            f"ties within {n_tied_blocks} block(s); ranks averaged"
        )
    n_zero_range = int(np.sum(ranges == 0.0))
    if n_zero_range > 0:
        warnings_list.append(
            f"{n_zero_range} block(s) with zero range contribute nothing to "
            f"treatment scores"
        )
    n_inf_range = int(np.sum(~np.isfinite(ranges)))
    if n_inf_range > 0:
        warnings_list.append(
            f"{n_inf_range} block range(s) overflow float64; weighted as the "
            f"largest"
        )
    if len(np.unique(ranges)) < r:
        warnings_list.append("ties among block ranges; block weights averaged")

    rij = (R - (c + 1) / 2.0) * Q[:, np.newaxis]
    Ti = rij.sum(axis=0)

    T2 = float(np.sum(Ti ** 2))
    rij2 = float(np.sum(rij ** 2))
    T3 = T2 / r
    T4 = rij2 - T3

    if not T4 > DEGENERATE_T4_RTOL * rij2:
        raise UndefinedStatisticError(
            "Quade statistic is undefined: T4 = sum(rij^2) - T3 is "
            f"{T4!r} (T3 = {T3!r}). Every block has the same within-block "
            "rank pattern, or no block has any spread.",
            t3=T3,
            t4=T4,
        )

    k = r - 1
    W = k * T3 / T4
    dfn = c - 1
    dfd = dfn * k
    p_value = 1.0 - float(sp_stats.f.cdf(W, dfn, dfd))

    for arr in (R, ranges, Q, rij, Ti):
        arr.setflags(write=False)

    return QuadeStatistic(
        ranks=R,
        block_ranges=ranges,
        block_weights=Q,
        weighted_ranks=rij,
        treatment_scores=Ti,
        t3=T3,
        t4=T4,
        statistic=float(W),
        df_num=dfn,
        df_denom=dfd,
        p_value=p_value,
    ), warnings_list
