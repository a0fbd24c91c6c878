# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Predictive Analytics.

Modules:
    analytics: PredictiveAnalytics, the bus-facing service
    series_stats: closed-form series statistics (pure)
    model_registry: forecast model descriptors and accuracy refresh
    presets: thresholds, constants and the seeded models
"""

from omnilearning.predictive.analytics import PredictiveAnalytics
from omnilearning.predictive.model_registry import ModelRegistry
from omnilearning.predictive.series_stats import (
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

__all__ = [
    "ModelRegistry",
    "PredictiveAnalytics",
    "autocorrelation",
    "classify_trend",
    "detect_seasonality",
    "forecast_metrics",
    "linear_trend",
    "median_step",
    "r_squared",
    "rolling_anomalies",
    "trend_strength",
]
