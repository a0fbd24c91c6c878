# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the closed-form series statistics."""

from __future__ import annotations

import math

import pytest

from omnilearning.enums import EnumTrendType
from omnilearning.predictive import (
    autocorrelation,
    classify_trend,
    detect_seasonality,
    forecast_metrics,
    linear_trend,
    median_step,
    r_squared,
    rolling_anomalies,
    trend_strength,
)
from omnilearning.predictive.series_stats import is_random_walk

pytestmark = pytest.mark.unit

PERIOD_FOUR = [0.0, 1.0, 0.0, -1.0] * 5


# =============================================================================
# Trend Fit
# =============================================================================


class TestLinearTrend:
    def test_exact_line(self) -> None:
        slope, intercept = linear_trend([1.0, 3.0, 5.0, 7.0])

        assert slope == pytest.approx(2.0)
        assert intercept == pytest.approx(1.0)

    def test_single_point_has_zero_slope(self) -> None:
        assert linear_trend([4.0]) == (0.0, 4.0)

    def test_empty_input(self) -> None:
        assert linear_trend([]) == (0.0, 0.0)


class TestRSquared:
    def test_perfect_fit(self) -> None:
        values = [10 + 2 * i for i in range(10)]
        slope, intercept = linear_trend(values)

        assert r_squared(values, slope, intercept) == pytest.approx(1.0)

    def test_flat_series_conventions(self) -> None:
        flat = [5.0] * 10

        assert r_squared(flat, 0.0, 5.0) == 1.0
        assert r_squared(flat, 0.0, 4.0) == 0.0


class TestTrendStrength:
    def test_capped_at_one(self) -> None:
        assert trend_strength([1.0, 2.0, 3.0], 1.0) == 1.0

    def test_flat_series_has_no_strength(self) -> None:
        assert trend_strength([3.0, 3.0, 3.0], 0.0) == 0.0

    def test_partial_strength(self) -> None:
        values = [0.0, 10.0, 0.0, 10.0]

        assert trend_strength(values, 0.5) == pytest.approx(0.2)


# =============================================================================
# Seasonality and Classification
# =============================================================================


class TestSeasonality:
    def test_periodic_series(self) -> None:
        period, strength = detect_seasonality(PERIOD_FOUR)

        assert period == 4
        assert strength == pytest.approx(1.0)

    def test_constant_series_has_no_seasonality(self) -> None:
        assert detect_seasonality([2.0] * 12) == (1, 0.0)

    def test_autocorrelation_out_of_range_lag(self) -> None:
        assert autocorrelation([1.0, 2.0, 3.0], 0) == 0.0
        assert autocorrelation([1.0, 2.0, 3.0], 3) == 0.0


class TestClassifyTrend:
    @pytest.mark.parametrize(
        ("slope", "seasonality", "expected"),
        [
            (0.5, 0.9, EnumTrendType.INCREASING),
            (-0.5, 0.0, EnumTrendType.DECREASING),
            (0.01, 0.5, EnumTrendType.CYCLICAL),
        ],
    )
    def test_rule_order(self, slope: float, seasonality: float, expected: EnumTrendType) -> None:
        assert classify_trend([1.0, 2.0, 3.0], slope, seasonality) is expected

    def test_random_walk(self) -> None:
        values = [0.0, 1.0, 0.0, 1.0, 0.0]

        assert is_random_walk(values) is True
        assert classify_trend(values, 0.0, 0.0) is EnumTrendType.RANDOM

    def test_stable(self) -> None:
        assert classify_trend([3.0] * 10, 0.0, 0.0) is EnumTrendType.STABLE


# =============================================================================
# Forecast Metrics
# =============================================================================


class TestForecastMetrics:
    def test_mape_skips_zero_actuals(self) -> None:
        metrics = forecast_metrics([0.0, 2.0], [1.0, 1.0])

        assert metrics.mse == pytest.approx(1.0)
        assert metrics.mae == pytest.approx(1.0)
        assert metrics.mape == pytest.approx(50.0)
        assert metrics.r2 == pytest.approx(0.0)

    def test_perfect_prediction(self) -> None:
        metrics = forecast_metrics([1.0, 2.0, 3.0], [1.0, 2.0, 3.0])

        assert metrics.mse == 0.0
        assert metrics.r2 == 1.0

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError):
            forecast_metrics([1.0, 2.0], [1.0])

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            forecast_metrics([], [])


# =============================================================================
# Steps and Anomalies
# =============================================================================


class TestMedianStep:
    def test_irregular_spacing(self) -> None:
        assert median_step([0.0, 10.0, 20.0, 70.0, 80.0]) == 10.0

    def test_too_few_timestamps(self) -> None:
        assert median_step([5.0]) == 0.0


class TestRollingAnomalies:
    def test_spike_is_flagged(self) -> None:
        values = [20.0 + (i % 6) for i in range(40)]
        values[15] = 50.0

        flagged = rolling_anomalies(values, 10, 2.0)

        assert [i for i, _ in flagged] == [15]
        assert flagged[0][1] > 10.0

    def test_zero_variance_window(self) -> None:
        values = [5.0] * 10 + [5.0, 9.0]

        flagged = rolling_anomalies(values, 10, 2.0)

        assert flagged == [(11, math.inf)]

    def test_non_positive_window(self) -> None:
        assert rolling_anomalies([1.0, 2.0, 3.0], 0, 2.0) == []
