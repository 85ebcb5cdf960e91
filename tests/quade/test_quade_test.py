"""
End-to-end tests for quade_test() and quade_posthoc().

Validates:
    - Conover (1999) reference example: W, df, p, cv, significant pairs
    - Post-hoc gating on reject_null and the posthoc flag
    - Logical-like flag handling at the API boundary
    - Eager validation of x and alpha
    - display=True prints only after successful computation
    - Timing, warnings and info metadata
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from pyquade import quade_test, quade_posthoc
from pyquade.core.exceptions import (
    DimensionError,
    UndefinedStatisticError,
    ValidationError,
)
from pyquade.quade import QuadePostHocSolution, QuadeSolution


# ═══════════════════════════════════════════════════════════════════════
# Reference example
# ═══════════════════════════════════════════════════════════════════════


class TestConoverExample:
    """7 blocks x 5 treatments, alpha = 0.05, post-hoc on."""

    def test_dimensions(self, conover_data):
        stats, _ = quade_test(conover_data)
        assert stats.blocks == 7
        assert stats.treatments == 5
        assert stats.n_obs == 35

    def test_statistic(self, conover_data):
        stats, _ = quade_test(conover_data)
        assert stats.statistic == pytest.approx(10.3788, abs=5e-5)
        assert stats.df_num == 4
        assert stats.df_denom == 24

    def test_p_value(self, conover_data):
        stats, _ = quade_test(conover_data)
        assert stats.p_value == pytest.approx(0.0001, abs=1e-4)
        assert stats.p_value < 0.001

    def test_rejects(self, conover_data):
        stats, _ = quade_test(conover_data)
        assert stats.alpha == 0.05
        assert stats.reject_null is True

    def test_posthoc_present(self, conover_data):
        _, mc = quade_test(conover_data)
        assert isinstance(mc, QuadePostHocSolution)
        assert mc.method == 'Quade-Conover-type LSD'
        assert mc.p_values is None

    def test_critical_value(self, conover_data):
        _, mc = quade_test(conover_data)
        assert mc.critical_value == pytest.approx(35.6981, abs=5e-5)

    def test_significant_pairs(self, conover_data):
        _, mc = quade_test(conover_data)
        assert mc.significant_pairs() == [
            (3, 1), (3, 2), (4, 1), (4, 2), (5, 1), (5, 2),
        ]

    def test_treatment_scores(self, conover_data, conover_scores):
        stats, mc = quade_test(conover_data)
        assert_allclose(stats.treatment_scores, conover_scores)
        assert_allclose(mc.rdiff[3, 1], 87.0)

    def test_list_input(self, conover_data):
        stats, _ = quade_test(conover_data.tolist())
        assert stats.statistic == pytest.approx(10.3788, abs=5e-5)

    def test_input_not_modified(self, conover_data):
        x = conover_data.astype(float)
        before = x.copy()
        quade_test(x)
        assert_array_equal(x, before)
        assert x.flags.writeable

    def test_scale_invariance(self, conover_data):
        stats, mc = quade_test(conover_data)
        stats2, mc2 = quade_test(conover_data * 0.25)
        assert stats2.statistic == pytest.approx(stats.statistic, rel=1e-12)
        assert stats2.p_value == pytest.approx(stats.p_value, rel=1e-10)
        assert mc2.critical_value == pytest.approx(mc.critical_value, rel=1e-12)
        assert_allclose(mc2.rdiff, mc.rdiff)


# ═══════════════════════════════════════════════════════════════════════
# Post-hoc gating
# ═══════════════════════════════════════════════════════════════════════


class TestPostHocGating:
    """Comparisons run only when requested and the null is rejected."""

    def test_posthoc_disabled(self, conover_data):
        stats, mc = quade_test(conover_data, posthoc=False)
        assert stats.reject_null
        assert mc is None

    def test_not_rejected(self, balanced_no_effect):
        stats, mc = quade_test(balanced_no_effect)
        assert stats.statistic == 0.0
        assert stats.reject_null is False
        assert mc is None

    def test_tiny_alpha_not_rejected(self, conover_data):
        stats, mc = quade_test(conover_data, alpha=1e-8)
        assert stats.reject_null is False
        assert mc is None

    def test_reject_is_p_below_alpha(self, rng):
        x = rng.standard_normal((8, 4))
        for alpha in (0.01, 0.05, 0.5, 0.99):
            stats, _ = quade_test(x, alpha=alpha, posthoc=False)
            assert stats.reject_null == (stats.p_value < alpha)

    def test_timing_has_posthoc_section(self, conover_data):
        stats, mc = quade_test(conover_data)
        assert 'posthoc' in stats.timing
        assert 'statistic' in stats.timing
        assert 'ranking' in stats.timing
        assert mc.timing['total_seconds'] >= 0.0

    def test_timing_without_posthoc(self, conover_data):
        stats, _ = quade_test(conover_data, posthoc=False)
        assert 'posthoc' not in stats.timing
        assert {'ranking', 'statistic'} <= set(stats.timing)


# ═══════════════════════════════════════════════════════════════════════
# quade_posthoc
# ═══════════════════════════════════════════════════════════════════════


class TestQuadePosthoc:
    """Comparator run from an existing QuadeSolution."""

    def test_matches_gated_result(self, conover_data):
        stats, mc = quade_test(conover_data)
        mc2 = quade_posthoc(stats)
        assert mc2.critical_value == mc.critical_value
        assert_array_equal(mc2.significant, mc.significant)

    def test_runs_without_rejection(self, balanced_no_effect):
        stats, _ = quade_test(balanced_no_effect)
        mc = quade_posthoc(stats)
        assert_array_equal(mc.rdiff, 0.0)
        assert mc.significant_pairs() == []

    def test_alpha_override(self, conover_data):
        stats, mc = quade_test(conover_data)
        mc_strict = quade_posthoc(stats, alpha=0.001)
        assert mc_strict.alpha == 0.001
        assert mc_strict.critical_value > mc.critical_value

    def test_alpha_override_validated(self, conover_data):
        stats, _ = quade_test(conover_data)
        with pytest.raises(ValidationError):
            quade_posthoc(stats, alpha=2.0)


# ═══════════════════════════════════════════════════════════════════════
# Logical-like flags
# ═══════════════════════════════════════════════════════════════════════


class TestFlags:
    """posthoc/display accept bool, numeric scalars and on/off-style strings."""

    @pytest.mark.parametrize("flag", [True, 1, 1.0, "true", "ON", "Yes", np.bool_(True)])
    def test_truthy(self, conover_data, flag):
        _, mc = quade_test(conover_data, posthoc=flag)
        assert mc is not None

    @pytest.mark.parametrize("flag", [False, 0, 0.0, "false", "off", "NO"])
    def test_falsy(self, conover_data, flag):
        _, mc = quade_test(conover_data, posthoc=flag)
        assert mc is None

    @pytest.mark.parametrize("flag", ["maybe", None, float("nan"), [True]])
    def test_invalid(self, conover_data, flag):
        with pytest.raises(ValidationError, match="posthoc"):
            quade_test(conover_data, posthoc=flag)

    def test_invalid_display(self, conover_data):
        with pytest.raises(ValidationError, match="display"):
            quade_test(conover_data, display="loud")

    def test_info_records_flag(self, conover_data):
        stats, _ = quade_test(conover_data, posthoc="off")
        assert stats.info['posthoc'] is False


# ═══════════════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:
    """Invalid arguments fail before any computation."""

    def test_one_dimensional(self):
        with pytest.raises(DimensionError):
            quade_test([1.0, 2.0, 3.0])

    def test_three_dimensional(self):
        with pytest.raises(DimensionError):
            quade_test(np.ones((2, 3, 4)))

    def test_single_block(self):
        with pytest.raises(DimensionError, match="rows"):
            quade_test([[1.0, 2.0, 3.0]])

    def test_single_treatment(self):
        with pytest.raises(DimensionError, match="columns"):
            quade_test([[1.0], [2.0], [3.0]])

    def test_empty(self):
        with pytest.raises(ValidationError):
            quade_test([])

    @pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
    def test_non_finite(self, conover_data, bad):
        x = conover_data.astype(float)
        x[2, 3] = bad
        with pytest.raises(ValidationError, match="non-finite"):
            quade_test(x)

    def test_strings(self):
        with pytest.raises(ValidationError):
            quade_test([["a", "b"], ["c", "d"]])

    def test_complex(self):
        with pytest.raises(ValidationError, match="complex"):
            quade_test(np.array([[1 + 1j, 2], [3, 4]]))

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1, 1.5, np.nan])
    def test_alpha_out_of_range(self, conover_data, alpha):
        with pytest.raises(ValidationError, match="alpha"):
            quade_test(conover_data, alpha=alpha)

    @pytest.mark.parametrize("alpha", ["0.05", True, None, [0.05]])
    def test_alpha_wrong_type(self, conover_data, alpha):
        with pytest.raises(ValidationError, match="alpha"):
            quade_test(conover_data, alpha=alpha)

    def test_undefined_statistic(self, shifted_rows):
        with pytest.raises(UndefinedStatisticError):
            quade_test(shifted_rows)

    def test_non_integer_data_accepted(self, random_blocks):
        stats, _ = quade_test(random_blocks)
        assert stats.df_denom == 11 * 3


# ═══════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════


class TestDisplay:
    """display=True prints reports after computation succeeds."""

    def test_silent_by_default(self, conover_data, capsys):
        quade_test(conover_data)
        assert capsys.readouterr().out == ""

    def test_prints_reports(self, conover_data, capsys):
        quade_test(conover_data, display=True)
        out = capsys.readouterr().out
        assert "QUADE TEST FOR IDENTICAL TREATMENT EFFECTS" in out
        assert "POST-HOC MULTIPLE COMPARISONS" in out
        assert "Critical value: 35.6981" in out

    def test_prints_without_posthoc(self, conover_data, capsys):
        quade_test(conover_data, posthoc=False, display="on")
        out = capsys.readouterr().out
        assert "QUADE'S STATISTICS" in out
        assert "POST-HOC" not in out

    def test_error_prints_nothing(self, shifted_rows, capsys):
        with pytest.raises(UndefinedStatisticError):
            quade_test(shifted_rows, display=True)
        assert capsys.readouterr().out == ""


# ═══════════════════════════════════════════════════════════════════════
# Result metadata
# ═══════════════════════════════════════════════════════════════════════


class TestMetadata:
    """Envelope fields carried through the solution."""

    def test_types(self, conover_data):
        stats, _ = quade_test(conover_data)
        assert isinstance(stats, QuadeSolution)
        assert stats.backend_name == 'cpu'
        assert stats.info['method'] == 'quade'

    def test_block_weights_in_info(self, conover_data):
        stats, _ = quade_test(conover_data)
        assert_array_equal(stats.info['block_weights'], [4, 1, 6, 2, 5, 7, 3])

    def test_tie_warnings(self, tied_blocks):
        stats, _ = quade_test(tied_blocks, posthoc=False)
        assert stats._result.has_warning("ties within")

    def test_no_warnings(self, conover_data):
        stats, _ = quade_test(conover_data)
        assert stats.warnings == ()

    def test_overflowing_range_warning(self):
        x = [
            [1e308, -1e308, 0.0],
            [1.0, 3.0, 2.0],
            [5.0, 4.0, 9.0],
            [2.0, 8.0, 1.0],
        ]
        stats, _ = quade_test(x, posthoc=False)
        assert stats._result.has_warning("overflow float64")
        assert_array_equal(stats.info['block_weights'], [4, 1, 2, 3])
