# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default configuration presets for predictive analytics.

Thresholds and seeded model descriptors. The "models" are labels on
closed-form statistics; the hyperparameters are descriptive only.
"""

from __future__ import annotations

from typing import Final

from omnilearning.enums import EnumModelType
from omnilearning.models import ModelModelPerformance, ModelPredictiveModel

ANALYTICS_SOURCE: Final[str] = "PredictiveLearningSystem"
"""``source`` on every event the analytics service publishes."""

# =============================================================================
# Sample size minimums
# =============================================================================

MIN_ANALYSIS_POINTS: Final[int] = 10
MIN_FORECAST_POINTS: Final[int] = 20
MIN_ANOMALY_POINTS: Final[int] = 10

# =============================================================================
# Trend classification
# =============================================================================

SLOPE_THRESHOLD: Final[float] = 0.1
"""|slope| above this classifies the series as increasing or decreasing."""

CYCLICAL_STRENGTH_THRESHOLD: Final[float] = 0.3
"""Autocorrelation strength above this classifies the series as cyclical."""

SEASONALITY_REPORT_THRESHOLD: Final[float] = 0.1
"""Seasonality is attached to the analysis when its strength exceeds this."""

MAX_SEASONALITY_LAG: Final[int] = 20

RANDOM_WALK_MEAN_DIFF: Final[float] = 0.1
RANDOM_WALK_MIN_DIFF_VARIANCE: Final[float] = 0.01

# =============================================================================
# Forecasting and anomalies
# =============================================================================

DEFAULT_HORIZON: Final[int] = 10
DEFAULT_MODEL_TYPE: Final[EnumModelType] = EnumModelType.ARIMA

CONFIDENCE_DECAY_PER_STEP: Final[float] = 0.02
MIN_FORECAST_CONFIDENCE: Final[float] = 0.1

DEFAULT_TIME_STEP_MS: Final[float] = 86_400_000.0
"""Forecast spacing when the series has no positive median step (one day)."""

DEFAULT_Z_THRESHOLD: Final[float] = 2.0
MAX_ANOMALY_WINDOW: Final[int] = 10

# =============================================================================
# Model refresh
# =============================================================================

REFRESH_RETAIN_WEIGHT: Final[float] = 0.8
"""Share of a model's current accuracy kept on refresh; the rest comes from
the mean backtest accuracy recorded since the previous refresh."""

TREND_PREDICTION_FACTORS: Final[tuple[str, ...]] = (
    "trend_strength",
    "seasonality",
    "data_quality",
)


def default_models() -> list[ModelPredictiveModel]:
    """Fresh copies of the seeded model descriptors."""
    return [
        ModelPredictiveModel(
            id="arima_default",
            name="ARIMA Model",
            type=EnumModelType.ARIMA,
            accuracy=0.85,
            hyperparameters={"p": 1, "d": 1, "q": 1},
            performance=ModelModelPerformance(mse=0.1, mae=0.2, mape=0.15, r2=0.85),
        ),
        ModelPredictiveModel(
            id="lstm_default",
            name="LSTM Neural Network",
            type=EnumModelType.LSTM,
            accuracy=0.88,
            hyperparameters={"layers": 2, "units": 50, "dropout": 0.2},
            performance=ModelModelPerformance(mse=0.08, mae=0.15, mape=0.12, r2=0.88),
        ),
        ModelPredictiveModel(
            id="random_forest_default",
            name="Random Forest",
            type=EnumModelType.RANDOM_FOREST,
            accuracy=0.82,
            hyperparameters={"n_estimators": 100, "max_depth": 10},
            performance=ModelModelPerformance(mse=0.12, mae=0.25, mape=0.18, r2=0.82),
        ),
    ]


__all__ = [
    "ANALYTICS_SOURCE",
    "CONFIDENCE_DECAY_PER_STEP",
    "CYCLICAL_STRENGTH_THRESHOLD",
    "DEFAULT_HORIZON",
    "DEFAULT_MODEL_TYPE",
    "DEFAULT_TIME_STEP_MS",
    "DEFAULT_Z_THRESHOLD",
    "MAX_ANOMALY_WINDOW",
    "MAX_SEASONALITY_LAG",
    "MIN_ANALYSIS_POINTS",
    "MIN_ANOMALY_POINTS",
    "MIN_FORECAST_CONFIDENCE",
    "MIN_FORECAST_POINTS",
    "RANDOM_WALK_MEAN_DIFF",
    "RANDOM_WALK_MIN_DIFF_VARIANCE",
    "REFRESH_RETAIN_WEIGHT",
    "SEASONALITY_REPORT_THRESHOLD",
    "SLOPE_THRESHOLD",
    "TREND_PREDICTION_FACTORS",
    "default_models",
]
