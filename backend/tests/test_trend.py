"""
Tests for bank_health/analysis/trend.py.

What we test
------------
fit_trend():
  - Exact slope/intercept on a perfect line.
  - None ("no trend data") for fewer than 3 points.
  - OLS slope on noisy data matches numpy.polyfit.

classify_trend():
  - improving / declining flip with direction.
  - Dead-zone: |slope| <= 0.01 is neutral regardless of sign.
  - Short histories are neutral.
"""

from __future__ import annotations

import numpy as np
import pytest

from bank_health.analysis import trend
from bank_health.analysis.trend import classify_trend, fit_trend
from bank_health.schemas.bank import TrendFit


class TestFitTrend:
    def test_perfect_line(self, make_history):
        fit = fit_trend(make_history([1.0, 2.0, 3.0, 4.0]))
        assert fit.slope == pytest.approx(1.0)
        assert fit.intercept == pytest.approx(1.0)

    def test_flat_line(self, make_history):
        fit = fit_trend(make_history([5.0, 5.0, 5.0]))
        assert fit.slope == pytest.approx(0.0)
        assert fit.intercept == pytest.approx(5.0)

    @pytest.mark.parametrize("values", [[], [1.0], [1.0, 2.0]])
    def test_too_short(self, make_history, values):
        assert fit_trend(make_history(values)) is None

    def test_matches_polyfit(self, make_history):
        values = [1.02, 0.97, 1.10, 1.25, 1.18, 1.31]
        fit = fit_trend(make_history(values))
        slope, intercept = np.polyfit(np.arange(len(values)), values, 1)
        assert fit.slope == pytest.approx(slope)
        assert fit.intercept == pytest.approx(intercept)


class TestClassifyTrend:
    def test_rising_higher_is_better_improves(self, make_history):
        assert classify_trend(make_history([1.0, 1.2, 1.4]), "higher-is-better") == "improving"

    def test_rising_lower_is_better_declines(self, make_history):
        assert classify_trend(make_history([1.0, 1.2, 1.4]), "lower-is-better") == "declining"

    def test_falling_higher_is_better_declines(self, make_history):
        assert classify_trend(make_history([1.4, 1.2, 1.0]), "higher-is-better") == "declining"

    def test_falling_lower_is_better_improves(self, make_history):
        assert classify_trend(make_history([60.0, 58.0, 55.0]), "lower-is-better") == "improving"

    @pytest.mark.parametrize("values", [
        [0.0, 0.0078125, 0.015625],     # slope +2**-7
        [0.015625, 0.0078125, 0.0],     # slope -2**-7
    ])
    @pytest.mark.parametrize("direction", ["higher-is-better", "lower-is-better"])
    def test_dead_zone_is_neutral(self, make_history, values, direction):
        assert classify_trend(make_history(values), direction) == "neutral"

    def test_just_outside_dead_zone(self, make_history):
        # slope +2**-6 > 0.01
        assert classify_trend(make_history([0.0, 0.015625, 0.03125]), "higher-is-better") == "improving"

    @pytest.mark.parametrize("slope", [0.01, -0.01])
    def test_dead_zone_boundary_is_inclusive(self, monkeypatch, make_history, slope):
        monkeypatch.setattr(trend, "fit_trend", lambda history: TrendFit(slope=slope, intercept=0.0))
        assert classify_trend(make_history([1.0, 2.0, 3.0]), "higher-is-better") == "neutral"

    @pytest.mark.parametrize("values", [
        [0.0, 0.01, 0.02],
        [0.02, 0.01, 0.0],
        [1.0, 1.01, 1.02, 1.03],
    ])
    @pytest.mark.parametrize("direction", ["higher-is-better", "lower-is-better"])
    def test_slope_of_exactly_one_hundredth_is_neutral(self, make_history, values, direction):
        assert classify_trend(make_history(values), direction) == "neutral"

    def test_slope_just_above_one_hundredth(self, make_history):
        assert classify_trend(make_history([0.0, 0.0101, 0.0202]), "higher-is-better") == "improving"
        assert classify_trend(make_history([0.0202, 0.0101, 0.0]), "higher-is-better") == "declining"

    def test_short_history_is_neutral(self, make_history):
        assert classify_trend(make_history([1.0, 5.0]), "higher-is-better") == "neutral"
