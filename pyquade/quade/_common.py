"""
Common data types for the Quade test.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container with no methods and no computation.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


QUADE_LSD_METHOD = 'Quade-Conover-type LSD'


@dataclass(frozen=True)
class QuadeStatistic:
    """
    Intermediate quantities of the Quade statistic for one data matrix.

    Produced by quade_statistic(). Arrays are read-only.
    """
    ranks: NDArray[np.floating[Any]]             # r x c, within-block tied ranks
    block_ranges: NDArray[np.floating[Any]]      # r, max - min per block
    block_weights: NDArray[np.floating[Any]]     # r, tied ranks of block ranges
    weighted_ranks: NDArray[np.floating[Any]]    # r x c, (R - (c+1)/2) * Q
    treatment_scores: NDArray[np.floating[Any]]  # c, column sums of weighted ranks
    t3: float
    t4: float
    statistic: float                             # W
    df_num: int
    df_denom: int
    p_value: float


@dataclass(frozen=True)
class QuadeParams:
    """Parameter payload for the global Quade test."""
    n_obs: int
    blocks: int
    treatments: int
    statistic: float                             # W
    df_num: int
    df_denom: int
    p_value: float                               # 1 - F_cdf(W; df_num, df_denom)
    alpha: float
    reject_null: bool
    treatment_scores: NDArray[np.floating[Any]]
    t4: float


@dataclass(frozen=True)
class QuadeComparison:
    """One unordered treatment pair (1-based indices, treatment1 > treatment2)."""
    treatment1: int
    treatment2: int
    diff: float
    significant: bool


@dataclass(frozen=True)
class QuadePostHocParams:
    """Parameter payload for Quade post-hoc multiple comparisons."""
    method: str
    rdiff: NDArray[np.floating[Any]]             # c x c, |Ti[a] - Ti[b]|
    critical_value: float
    p_values: NDArray[np.floating[Any]] | None   # always None: LSD gives no p-values
    significant: NDArray[np.bool_]               # c x c, strictly lower triangle only
    comparisons: tuple[QuadeComparison, ...]
    alpha: float
    df_denom: int
