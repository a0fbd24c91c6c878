# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Time series, trend, forecast and predictive model descriptors.

Timestamps on series points are epoch milliseconds (floats) because forecast
timestamps are computed arithmetically from the series' median step.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omnilearning.enums import (
    EnumModelStatus,
    EnumModelType,
    EnumPredictivePatternType,
    EnumTrendType,
)
from omnilearning.models.model_pattern import (
    ModelPatternFeature,
    ModelPatternPrediction,
)
from omnilearning.utils.ids import utc_now


class ModelTimeSeriesPoint(BaseModel):
    """A single observation in a series."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    timestamp: float
    value: float
    metadata: dict[str, Any] | None = None


class ModelSeasonality(BaseModel):
    """Detected period (in samples) and its autocorrelation strength."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    period: int = Field(ge=1)
    strength: float


class ModelTrendAnalysis(BaseModel):
    """Result of a trend analysis run.

    Attributes:
        trend: Classification of the series.
        strength: min(1, |slope| * n / range), 0.0 for a flat series.
        confidence: R² of the least-squares fit, clamped to [0.0, 1.0].
        slope: Least-squares slope per sample.
        intercept: Least-squares intercept.
        seasonality: Present when the best autocorrelation exceeds 0.1.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    trend: EnumTrendType
    strength: float = Field(ge=0.0, le=1.0)
    confidence: float = Field(ge=0.0, le=1.0)
    slope: float
    intercept: float
    seasonality: ModelSeasonality | None = None


class ModelForecastPoint(BaseModel):
    """One forecast step."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    timestamp: float
    value: float
    confidence: float = Field(gt=0.0, le=1.0)
    uncertainty: float = Field(ge=0.0, lt=1.0)


class ModelForecastMetrics(BaseModel):
    """Backtest error metrics. ``mape`` is a percentage."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mse: float
    mae: float
    mape: float
    r2: float


class ModelForecastResult(BaseModel):
    """A bounded-horizon forecast."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    series_id: str
    predictions: list[ModelForecastPoint]
    model: str
    model_id: str
    accuracy: float = Field(ge=0.0, le=1.0)
    horizon: int = Field(ge=1)
    metrics: ModelForecastMetrics


class ModelAnomaly(BaseModel):
    """A point flagged by rolling z-score.

    ``score`` is infinite when the window had zero variance and the point
    deviates from it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", ser_json_inf_nan="constants")

    timestamp: float
    value: float
    score: float = Field(ge=0.0)


class ModelPredictivePatternMetadata(BaseModel):
    detection_method: str = "autocorrelation_analysis"
    model_used: str = "linear_regression"
    last_updated: datetime = Field(default_factory=utc_now)
    reliability: float = Field(default=0.0, ge=0.0, le=1.0)


class ModelPredictivePattern(BaseModel):
    """Pattern produced by one analysis run over a series."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str
    type: EnumPredictivePatternType
    series_id: str
    data: dict[str, Any] = Field(default_factory=dict)
    confidence: float = Field(ge=0.0, le=1.0)
    prediction: ModelPatternPrediction
    trend_analysis: ModelTrendAnalysis | None = None
    forecast: ModelForecastResult | None = None
    features: list[ModelPatternFeature] = Field(default_factory=list)
    metadata: ModelPredictivePatternMetadata = Field(
        default_factory=ModelPredictivePatternMetadata
    )


class ModelModelPerformance(BaseModel):
    mse: float = 0.0
    mae: float = 0.0
    mape: float = 0.0
    r2: float = 0.0


class ModelPredictiveModel(BaseModel):
    """A registry entry describing a forecast model."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str
    name: str
    type: EnumModelType
    status: EnumModelStatus = EnumModelStatus.ACTIVE
    accuracy: float = Field(ge=0.0, le=1.0)
    last_trained: datetime = Field(default_factory=utc_now)
    hyperparameters: dict[str, Any] = Field(default_factory=dict)
    performance: ModelModelPerformance = Field(default_factory=ModelModelPerformance)


__all__ = [
    "ModelAnomaly",
    "ModelForecastMetrics",
    "ModelForecastPoint",
    "ModelForecastResult",
    "ModelModelPerformance",
    "ModelPredictiveModel",
    "ModelPredictivePattern",
    "ModelPredictivePatternMetadata",
    "ModelSeasonality",
    "ModelTimeSeriesPoint",
    "ModelTrendAnalysis",
]
