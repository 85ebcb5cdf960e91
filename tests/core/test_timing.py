"""
Tests for the section Timer.
"""

import pytest

from pyquade.core.compute.timing import Timer, timed


class TestTimer:
    """Timer accumulates named sections and a total."""

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('statistic'):
            sum(range(100))
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'statistic'}
        assert result['total_seconds'] >= 0.0

    def test_section_accumulates(self):
        timer = Timer()
        timer.start()
        with timer.section('posthoc'):
            pass
        first = timer._sections['posthoc']
        with timer.section('posthoc'):
            pass
        timer.stop()
        assert timer.result()['posthoc'] >= first

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert timer.result()['total_seconds'] >= 0.0
