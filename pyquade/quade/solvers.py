"""
Quade test solver dispatch.

Public API:
    quade_test(x, ...) -> (QuadeSolution, QuadePostHocSolution | None)
    quade_posthoc(result, ...) -> QuadePostHocSolution
"""

from typing import Any

from pyquade.core.compute.timing import Timer
from pyquade.core.result import Result
from pyquade.core.validation import check_alpha, check_logical_like
from pyquade.quade._common import QuadeParams, QuadePostHocParams
from pyquade.quade._posthoc import quade_lsd
from pyquade.quade._statistic import (
    block_weights,
    quade_statistic,
    rank_within_blocks,
)
from pyquade.quade.design import QuadeDesign
from pyquade.quade.solution import QuadeSolution, QuadePostHocSolution


def quade_test(
    x: Any,
    *,
    alpha: float = 0.05,
    posthoc: Any = True,
    display: Any = False,
) -> tuple[QuadeSolution, QuadePostHocSolution | None]:
    """
    Quade test for identical treatment effects in a complete block design.

    A nonparametric two-way analysis for unreplicated designs (one
    observation per block x treatment). Often more powerful than the
    Friedman test when blocks differ in how strongly they separate the
    treatments; equivalent to the Wilcoxon signed-rank test for c = 2.

    Args:
        x: Data matrix (blocks x treatments), real and finite, at least 2 x 2
        alpha: Significance level in (0, 1). Default 0.05.
        posthoc: Run Quade-Conover LSD multiple comparisons when the
            global null is rejected. Logical-like: bool, a number (nonzero
            is True), or 'true'/'false', 'on'/'off', 'yes'/'no'. Default True.
        display: Print the summary reports after computing. Logical-like.
            Default False.

    Returns:
        (QuadeSolution, QuadePostHocSolution or None). The second element
        is None when posthoc is off or the null is not rejected.

    Raises:
        ValidationError: invalid x, alpha, or flag values
        UndefinedStatisticError: T4 = 0, the statistic is undefined

    Examples:
        >>> x = [[115, 142, 36, 91, 28],
        ...      [28, 31, 7, 21, 6],
        ...      [220, 311, 108, 51, 117],
        ...      [82, 56, 24, 46, 33],
        ...      [256, 298, 124, 46, 84],
        ...      [294, 322, 176, 54, 86],
        ...      [98, 87, 55, 84, 25]]
        >>> stats, mc = quade_test(x)
        >>> stats.statistic, stats.p_value
        >>> mc.significant_pairs()
    """
    timer = Timer()
    timer.start()

    design = QuadeDesign.from_matrix(x)
    alpha = check_alpha(alpha, "alpha")
    posthoc_flag = check_logical_like(posthoc, "posthoc")
    display_flag = check_logical_like(display, "display")

    with timer.section('ranking'):
        ranks = rank_within_blocks(design.x)
        weights = block_weights(design.x)

    with timer.section('statistic'):
        stat, warnings_list = quade_statistic(design.x, ranks, weights)

    params = QuadeParams(
        n_obs=design.n_obs,
        blocks=design.blocks,
        treatments=design.treatments,
        statistic=stat.statistic,
        df_num=stat.df_num,
        df_denom=stat.df_denom,
        p_value=stat.p_value,
        alpha=alpha,
        reject_null=bool(stat.p_value < alpha),
        treatment_scores=stat.treatment_scores,
        t4=stat.t4,
    )

    posthoc_params: QuadePostHocParams | None = None
    if params.reject_null and posthoc_flag:
        with timer.section('posthoc'):
            posthoc_params = quade_lsd(
                params.treatment_scores,
                params.t4,
                params.blocks,
                params.df_denom,
                alpha,
            )

    timer.stop()
    timing = timer.result()

    result = Result(
        params=params,
        info={
            'method': 'quade',
            'posthoc': posthoc_flag,
            'block_weights': stat.block_weights,
            't3': stat.t3,
        },
        timing=timing,
        backend_name='cpu',
        warnings=tuple(warnings_list),
    )
    solution = QuadeSolution(_result=result)

    mc_solution: QuadePostHocSolution | None = None
    if posthoc_params is not None:
        mc_solution = QuadePostHocSolution(_result=Result(
            params=posthoc_params,
            info={'method': posthoc_params.method, 'alpha': alpha},
            timing={'total_seconds': timing.get('posthoc', 0.0)},
            backend_name='cpu',
        ))

    if display_flag:
        print(solution.summary())
        if mc_solution is not None:
            print()
            print(mc_solution.summary())

    return solution, mc_solution


def quade_posthoc(
    quade_result: QuadeSolution,
    *,
    alpha: float | None = None,
) -> QuadePostHocSolution:
    """
    Quade-Conover LSD multiple comparisons from an existing Quade test.

    Runs regardless of whether the global null was rejected; callers that
    want the gated behaviour should use quade_test(..., posthoc=True).

    Args:
        quade_result: Result from quade_test()
        alpha: Significance level; defaults to the alpha of quade_result

    Returns:
        QuadePostHocSolution

    Examples:
        >>> stats, _ = quade_test(x, posthoc=False)
        >>> mc = quade_posthoc(stats, alpha=0.01)
        >>> print(mc.summary())
    """
    timer = Timer()
    timer.start()

    if alpha is None:
        alpha = quade_result.alpha
    alpha = check_alpha(alpha, "alpha")

    with timer.section('posthoc'):
        posthoc_params = quade_lsd(
            quade_result.treatment_scores,
            quade_result.t4,
            quade_result.blocks,
            quade_result.df_denom,
            alpha,
        )

    timer.stop()

    result = Result(
        params=posthoc_params,
        info={'method': posthoc_params.method, 'alpha': alpha},
        timing=timer.result(),
        backend_name='cpu',
    )
    return QuadePostHocSolution(_result=result)
