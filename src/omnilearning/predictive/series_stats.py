# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Closed-form time series statistics.

All functions are pure (no I/O, no service state) and operate on plain
sequences of floats ordered by time. Variances are population variances.

Public API:
    linear_trend          - least-squares slope and intercept over indices
    autocorrelation       - lag-k autocorrelation, 0.0 for a flat series
    detect_seasonality    - best autocorrelation lag in [2, min(20, n // 2)]
    trend_strength        - min(1, |slope| * n / range)
    r_squared             - goodness of fit of a line
    is_random_walk        - near-zero mean step with non-trivial step variance
    classify_trend        - increasing / decreasing / cyclical / random / stable
    forecast_metrics      - mse, mae, mape (%), r2 of predicted vs actual
    median_step           - median spacing of timestamps
    rolling_anomalies     - trailing-window z-score outliers
"""

from __future__ import annotations

import math
import statistics
from collections.abc import Sequence

from omnilearning.enums import EnumTrendType
from omnilearning.models import ModelForecastMetrics
from omnilearning.predictive.presets import (
    CYCLICAL_STRENGTH_THRESHOLD,
    MAX_SEASONALITY_LAG,
    RANDOM_WALK_MEAN_DIFF,
    RANDOM_WALK_MIN_DIFF_VARIANCE,
    SLOPE_THRESHOLD,
)


def linear_trend(values: Sequence[float]) -> tuple[float, float]:
    """Least-squares fit of ``values`` against their indices 0..n-1.

    Returns:
        (slope, intercept). A single point (or empty input) has slope 0.0.
    """
    n = len(values)
    if n == 0:
        return 0.0, 0.0
    sum_x = n * (n - 1) / 2
    sum_xx = (n - 1) * n * (2 * n - 1) / 6
    sum_y = math.fsum(values)
    sum_xy = math.fsum(i * v for i, v in enumerate(values))
    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return 0.0, sum_y / n
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return slope, intercept


def autocorrelation(values: Sequence[float], lag: int) -> float:
    """Lag-``lag`` autocorrelation normalised by the population variance.

    Returns 0.0 for a zero-variance series or a lag that leaves no pairs.
    """
    n = len(values)
    if lag < 1 or lag >= n:
        return 0.0
    mean = statistics.fmean(values)
    variance = statistics.pvariance(values, mu=mean)
    if variance == 0:
        return 0.0
    numerator = math.fsum(
        (values[i] - mean) * (values[i + lag] - mean) for i in range(n - lag)
    )
    return numerator / ((n - lag) * variance)


def detect_seasonality(values: Sequence[float]) -> tuple[int, float]:
    """Lag with the strongest positive autocorrelation.

    Lags 2..min(20, n // 2) are scanned. With no positive correlation the
    result is period 1, strength 0.0.

    Returns:
        (period, strength)
    """
    best_period, best_strength = 1, 0.0
    for lag in range(2, min(MAX_SEASONALITY_LAG, len(values) // 2) + 1):
        correlation = autocorrelation(values, lag)
        if correlation > best_strength:
            best_period, best_strength = lag, correlation
    return best_period, best_strength


def trend_strength(values: Sequence[float], slope: float) -> float:
    """Total fitted change relative to the observed range, capped at 1.0.

    A flat series (zero range) has strength 0.0.
    """
    value_range = max(values) - min(values)
    if value_range == 0:
        return 0.0
    return min(1.0, abs(slope) * len(values) / value_range)


def r_squared(values: Sequence[float], slope: float, intercept: float) -> float:
    """Coefficient of determination of ``intercept + slope * i``.

    A flat series is explained perfectly (1.0) when the line reproduces it
    exactly, and not at all (0.0) otherwise.
    """
    mean = statistics.fmean(values)
    ss_res = math.fsum((v - (intercept + slope * i)) ** 2 for i, v in enumerate(values))
    ss_tot = math.fsum((v - mean) ** 2 for v in values)
    if ss_tot == 0:
        return 1.0 if ss_res == 0 else 0.0
    return 1.0 - ss_res / ss_tot


def is_random_walk(values: Sequence[float]) -> bool:
    """Steps average near zero yet vary (|mean step| < 0.1, step variance > 0.01)."""
    if len(values) < 2:
        return False
    steps = [b - a for a, b in zip(values, values[1:])]
    mean_step = statistics.fmean(steps)
    return (
        abs(mean_step) < RANDOM_WALK_MEAN_DIFF
        and statistics.pvariance(steps, mu=mean_step) > RANDOM_WALK_MIN_DIFF_VARIANCE
    )


def classify_trend(
    values: Sequence[float], slope: float, seasonality_strength: float
) -> EnumTrendType:
    """Classify a series; the first matching rule wins.

    1. |slope| > 0.1              -> increasing / decreasing
    2. seasonality strength > 0.3 -> cyclical
    3. random walk                -> random
    4. otherwise                  -> stable
    """
    if abs(slope) > SLOPE_THRESHOLD:
        return EnumTrendType.INCREASING if slope > 0 else EnumTrendType.DECREASING
    if seasonality_strength > CYCLICAL_STRENGTH_THRESHOLD:
        return EnumTrendType.CYCLICAL
    if is_random_walk(values):
        return EnumTrendType.RANDOM
    return EnumTrendType.STABLE


def forecast_metrics(
    actual: Sequence[float], predicted: Sequence[float]
) -> ModelForecastMetrics:
    """Error metrics of ``predicted`` against ``actual``.

    ``mape`` is a percentage over the non-zero actuals (0.0 when all
    actuals are zero). ``r2`` follows ``r_squared`` conventions for a flat
    actual series.

    Raises:
        ValueError: If the sequences are empty or of different lengths.
    """
    if len(actual) != len(predicted):
        raise ValueError(
            f"actual and predicted differ in length: {len(actual)} != {len(predicted)}"
        )
    if not actual:
        raise ValueError("forecast_metrics requires at least one point")
    n = len(actual)
    errors = [a - p for a, p in zip(actual, predicted)]
    mse = math.fsum(e * e for e in errors) / n
    mae = math.fsum(abs(e) for e in errors) / n
    relative = [abs(e / a) for e, a in zip(errors, actual) if a != 0]
    mape = (math.fsum(relative) / len(relative) * 100.0) if relative else 0.0

    mean = statistics.fmean(actual)
    ss_res = mse * n
    ss_tot = math.fsum((a - mean) ** 2 for a in actual)
    if ss_tot == 0:
        r2 = 1.0 if ss_res == 0 else 0.0
    else:
        r2 = 1.0 - ss_res / ss_tot
    return ModelForecastMetrics(mse=mse, mae=mae, mape=mape, r2=r2)


def median_step(timestamps: Sequence[float]) -> float:
    """Median difference between consecutive timestamps, 0.0 for fewer than two."""
    if len(timestamps) < 2:
        return 0.0
    return statistics.median(b - a for a, b in zip(timestamps, timestamps[1:]))


def rolling_anomalies(
    values: Sequence[float], window: int, z_threshold: float
) -> list[tuple[int, float]]:
    """Indices whose value deviates from the trailing window by more than ``z_threshold``.

    Point ``i`` is scored against ``values[i - window:i]``. A zero-variance
    window scores a deviating point as ``inf`` and an equal point as 0.

    Returns:
        (index, z-score) pairs in index order.
    """
    flagged: list[tuple[int, float]] = []
    if window < 1:
        return flagged
    for i in range(window, len(values)):
        trailing = values[i - window : i]
        mean = statistics.fmean(trailing)
        std = math.sqrt(statistics.pvariance(trailing, mu=mean))
        deviation = abs(values[i] - mean)
        if std == 0:
            score = math.inf if deviation > 0 else 0.0
        else:
            score = deviation / std
        if score > z_threshold:
            flagged.append((i, score))
    return flagged


__all__ = [
    "autocorrelation",
    "classify_trend",
    "detect_seasonality",
    "forecast_metrics",
    "is_random_walk",
    "linear_trend",
    "median_step",
    "r_squared",
    "rolling_anomalies",
    "trend_strength",
]
