# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Payloads for time series ingestion, trend analysis, forecasts and anomalies."""

from __future__ import annotations

from pydantic import Field

from omnilearning.enums import EnumTrendType
from omnilearning.models.events.model_payload_base import (
    ModelInboundPayload,
    ModelOutboundPayload,
)
from omnilearning.models.model_time_series import ModelTimeSeriesPoint


class ModelTimeSeriesDataPayload(ModelInboundPayload):
    """``time_series_data``: points to append to a series."""

    series_id: str = Field(min_length=1)
    data: list[ModelTimeSeriesPoint] = Field(min_length=1)


class ModelPredictionRequestPayload(ModelInboundPayload):
    """``prediction_request``: ask for a forecast.

    ``model_type`` stays a plain string so an unknown type surfaces as
    UnknownModelError from the analytics service rather than as a payload
    validation error.
    """

    series_id: str = Field(min_length=1)
    horizon: int = Field(default=10, ge=1)
    model_type: str = "arima"


class ModelTimeSeriesDataAddedPayload(ModelOutboundPayload):
    """``time_series_data_added``."""

    series_id: str
    data_points: int = Field(ge=0)
    total_points: int = Field(ge=0)


class ModelTrendAnalysisCompletedPayload(ModelOutboundPayload):
    """``trend_analysis_completed``."""

    series_id: str
    trend: EnumTrendType
    strength: float
    confidence: float


class ModelForecastGeneratedPayload(ModelOutboundPayload):
    """``forecast_generated``. ``model`` is the model's display name."""

    series_id: str
    horizon: int
    accuracy: float
    model: str


class ModelAnomaliesDetectedPayload(ModelOutboundPayload):
    """``anomalies_detected``."""

    series_id: str
    count: int = Field(ge=1)
    threshold: float


__all__ = [
    "ModelAnomaliesDetectedPayload",
    "ModelForecastGeneratedPayload",
    "ModelPredictionRequestPayload",
    "ModelTimeSeriesDataAddedPayload",
    "ModelTimeSeriesDataPayload",
    "ModelTrendAnalysisCompletedPayload",
]
