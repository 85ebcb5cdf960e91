"""
User-facing Quade test solution types.

Each solution wraps a Result[Params] and provides convenient accessors
and a formatted summary() report. Formatting is optional; every number
is reachable through the properties.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyquade.core.result import Result
from pyquade.quade._common import (
    QuadeComparison,
    QuadeParams,
    QuadePostHocParams,
)


_RULE = "-" * 80


# =====================================================================
# QuadeSolution  (global test)
# =====================================================================


@dataclass
class QuadeSolution:
    """
    User-facing result for the Quade test.

    Produced by quade_test().
    """
    _result: Result[QuadeParams]

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def blocks(self) -> int:
        return self._result.params.blocks

    @property
    def treatments(self) -> int:
        return self._result.params.treatments

    @property
    def statistic(self) -> float:
        """Quade statistic W."""
        return self._result.params.statistic

    @property
    def df_num(self) -> int:
        return self._result.params.df_num

    @property
    def df_denom(self) -> int:
        return self._result.params.df_denom

    @property
    def p_value(self) -> float:
        """Upper-tail F-approximation p-value, 1 - F_cdf(W)."""
        return self._result.params.p_value

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def reject_null(self) -> bool:
        """True if the treatments do not have identical effects at alpha."""
        return self._result.params.reject_null

    @property
    def treatment_scores(self) -> NDArray[np.floating[Any]]:
        return self._result.params.treatment_scores

    @property
    def t4(self) -> float:
        return self._result.params.t4

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate the Quade test report."""
        sig = _significance_stars(self.p_value)
        lines = [
            "QUADE TEST FOR IDENTICAL TREATMENT EFFECTS: "
            "TWO-WAY BALANCED, COMPLETE BLOCK DESIGNS",
            _RULE,
            f"{'Observations':>12} {'Blocks':>8} {'Treatments':>11}",
            f"{self.n_obs:>12} {self.blocks:>8} {self.treatments:>11}",
            "",
            "QUADE'S STATISTICS: F-statistic approximation",
            _RULE,
            f"{'W':>12} {'DF_numerator':>13} {'DF_denominator':>15} {'p_value':>12}",
            f"{self.statistic:>12.4f} {self.df_num:>13} {self.df_denom:>15} "
            f"{_format_pvalue(self.p_value):>12} {sig}".rstrip(),
            _RULE,
            "Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1",
            "",
        ]
        if self.reject_null:
            lines.append(
                f"Treatments do not have identical effects (p < alpha = {self.alpha:g})"
            )
        else:
            lines.append(
                f"No evidence against identical treatment effects "
                f"(p >= alpha = {self.alpha:g})"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"QuadeSolution(W={self.statistic:.4f}, "
            f"df=({self.df_num}, {self.df_denom}), "
            f"p_value={self.p_value:.4g}, reject_null={self.reject_null})"
        )


# =====================================================================
# QuadePostHocSolution
# =====================================================================


@dataclass
class QuadePostHocSolution:
    """
    User-facing result for Quade post-hoc comparisons.

    Produced by quade_test() (when the global null is rejected) and
    quade_posthoc().
    """
    _result: Result[QuadePostHocParams]

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def rdiff(self) -> NDArray[np.floating[Any]]:
        """Full matrix of absolute treatment score differences."""
        return self._result.params.rdiff

    @property
    def critical_value(self) -> float:
        return self._result.params.critical_value

    @property
    def p_values(self) -> NDArray[np.floating[Any]] | None:
        """Always None; the LSD procedure does not produce p-values."""
        return self._result.params.p_values

    @property
    def significant(self) -> NDArray[np.bool_]:
        """Significance flags, strictly lower triangle."""
        return self._result.params.significant

    @property
    def comparisons(self) -> tuple[QuadeComparison, ...]:
        return self._result.params.comparisons

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def significant_pairs(self) -> list[tuple[int, int]]:
        """1-based (treatment1, treatment2) pairs flagged significant."""
        return [
            (cmp.treatment1, cmp.treatment2)
            for cmp in self.comparisons if cmp.significant
        ]

    def summary(self) -> str:
        """Generate the post-hoc report with lower-triangular matrices."""
        c = self.rdiff.shape[0]
        labels = [f"T{j + 1}" for j in range(c)]
        header = " " * 6 + "".join(f"{lab:>12}" for lab in labels)

        lines = [
            f"POST-HOC MULTIPLE COMPARISONS ({self.method})",
            _RULE,
            f"Critical value: {self.critical_value:0.4f}",
            "",
            "Absolute difference among treatment scores",
            header,
        ]
        for a in range(c):
            cells = "".join(f"{self.rdiff[a, b]:>12.4f}" for b in range(a + 1))
            lines.append(f"{labels[a]:<6}{cells}")

        lines.append("")
        lines.append("Absolute difference > Critical value")
        lines.append(header)
        for a in range(1, c):
            cells = "".join(
                f"{'*' if self.significant[a, b] else '.':>12}" for b in range(a)
            )
            lines.append(f"{labels[a]:<6}{cells}")

        lines.append(_RULE)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"QuadePostHocSolution(method={self.method!r}, "
            f"critical_value={self.critical_value:.4f}, "
            f"n_significant={len(self.significant_pairs())})"
        )


# =====================================================================
# Helpers
# =====================================================================


def _significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None or np.isnan(p):
        return ""
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""


def _format_pvalue(p: float) -> str:
    """Format p-value like R does."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"
