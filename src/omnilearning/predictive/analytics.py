# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Predictive analytics over timestamped numeric series.

Series are append-only per series id and sorted by timestamp before every
computation. All statistics are closed-form (see ``series_stats``); the
registered "models" only select an accuracy figure that drives forecast
confidence.

Operations:
    add_time_series_data  append points; analyze once 10+ points are stored
    analyze_time_series   trend, strength, confidence, seasonality (10+ points)
    generate_forecast     linear extrapolation with decaying confidence (20+ points)
    detect_anomalies      trailing-window z-score outliers
    refresh_models        blend recorded backtest accuracy into model accuracy

Subscriptions (installed by ``initialize``):
    time_series_data    -> add_time_series_data
    prediction_request  -> generate_forecast

Analytics errors raised while handling an event are logged, not raised, so a
bad request does not cost the service its subscription.

Error Codes:
    - LEARN_001: InsufficientDataError (too few points)
    - LEARN_002: UnknownModelError (no active model of the requested type)
"""

from __future__ import annotations

import logging
import statistics
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from omnilearning.enums import (
    EnumFeatureKind,
    EnumLearningEventType,
    EnumModelType,
    EnumPredictivePatternType,
    EnumTrendType,
)
from omnilearning.exceptions import AnalyticsError, InsufficientDataError
from omnilearning.models import (
    ModelAnomaly,
    ModelEvent,
    ModelForecastPoint,
    ModelForecastResult,
    ModelPatternFeature,
    ModelPatternPrediction,
    ModelPredictiveModel,
    ModelPredictivePattern,
    ModelPredictivePatternMetadata,
    ModelSeasonality,
    ModelSubscription,
    ModelTimeSeriesPoint,
    ModelTrendAnalysis,
)
from omnilearning.models.events import (
    ModelAnomaliesDetectedPayload,
    ModelForecastGeneratedPayload,
    ModelPredictionRequestPayload,
    ModelPredictiveLearningInitializedPayload,
    ModelTimeSeriesDataAddedPayload,
    ModelTimeSeriesDataPayload,
    ModelTrendAnalysisCompletedPayload,
)
from omnilearning.predictive.model_registry import ModelRegistry
from omnilearning.predictive.presets import (
    ANALYTICS_SOURCE,
    CONFIDENCE_DECAY_PER_STEP,
    DEFAULT_HORIZON,
    DEFAULT_MODEL_TYPE,
    DEFAULT_TIME_STEP_MS,
    DEFAULT_Z_THRESHOLD,
    MAX_ANOMALY_WINDOW,
    MIN_ANALYSIS_POINTS,
    MIN_ANOMALY_POINTS,
    MIN_FORECAST_CONFIDENCE,
    MIN_FORECAST_POINTS,
    SEASONALITY_REPORT_THRESHOLD,
    TREND_PREDICTION_FACTORS,
)
from omnilearning.predictive.series_stats import (
    classify_trend,
    detect_seasonality,
    forecast_metrics,
    linear_trend,
    median_step,
    r_squared,
    rolling_anomalies,
    trend_strength,
)
from omnilearning.utils.ids import epoch_ms, generate_id

if TYPE_CHECKING:
    from omnilearning.event_bus import EventBus

logger = logging.getLogger(__name__)


class PredictiveAnalytics:
    """Time series store, trend analysis, forecasting and anomaly detection.

    Attributes:
        models: Forecast model registry.
        patterns: Predictive patterns, one per analysis run, oldest first.
    """

    def __init__(self, bus: EventBus, *, models: ModelRegistry | None = None) -> None:
        self._bus = bus
        self.models = models or ModelRegistry()
        self.patterns: list[ModelPredictivePattern] = []
        self._series: dict[str, list[ModelTimeSeriesPoint]] = {}
        self._subscriptions: list[ModelSubscription] = []
        self._initialized = False

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Subscribe to series and prediction requests and announce readiness."""
        if self._initialized:
            return
        self._subscriptions = [
            self._bus.subscribe(
                EnumLearningEventType.TIME_SERIES_DATA.value, self._on_time_series_data
            ),
            self._bus.subscribe(
                EnumLearningEventType.PREDICTION_REQUEST.value, self._on_prediction_request
            ),
        ]
        self._initialized = True
        logger.info(f"Predictive analytics initialized | models={len(self.models)}")
        await self._publish(
            EnumLearningEventType.PREDICTIVE_LEARNING_INITIALIZED,
            ModelPredictiveLearningInitializedPayload(
                timestamp=epoch_ms(), models=len(self.models)
            ),
        )

    async def shutdown(self) -> None:
        for subscription in self._subscriptions:
            self._bus.unsubscribe(subscription.id)
        self._subscriptions.clear()
        self._initialized = False
        logger.info("Predictive analytics shut down")

    # =========================================================================
    # Series
    # =========================================================================

    async def add_time_series_data(
        self, series_id: str, points: Iterable[ModelTimeSeriesPoint]
    ) -> int:
        """Append points to a series.

        Once the series holds at least 10 points it is (re)analyzed, which
        publishes ``trend_analysis_completed``. ``time_series_data_added`` is
        published afterwards.

        Returns:
            Total number of points stored for the series.
        """
        new_points = list(points)
        series = self._series.setdefault(series_id, [])
        series.extend(new_points)
        total = len(series)

        if total >= MIN_ANALYSIS_POINTS:
            await self.analyze_time_series(series_id)

        await self._publish(
            EnumLearningEventType.TIME_SERIES_DATA_ADDED,
            ModelTimeSeriesDataAddedPayload(
                series_id=series_id, data_points=len(new_points), total_points=total
            ),
        )
        return total

    def get_series(self, series_id: str) -> list[ModelTimeSeriesPoint]:
        """Stored points of a series, sorted by timestamp."""
        return self._sorted(series_id)

    def series_ids(self) -> list[str]:
        return list(self._series)

    def _sorted(self, series_id: str) -> list[ModelTimeSeriesPoint]:
        series = self._series.get(series_id, [])
        series.sort(key=lambda p: p.timestamp)
        return list(series)

    # =========================================================================
    # Trend analysis
    # =========================================================================

    async def analyze_time_series(self, series_id: str) -> ModelTrendAnalysis:
        """Detect trend, strength, confidence and seasonality of a series.

        Stores a predictive pattern (``seasonal`` for cyclical series,
        ``trend`` otherwise) and publishes ``trend_analysis_completed``.

        Raises:
            InsufficientDataError: If the series has fewer than 10 points.
        """
        points = self._sorted(series_id)
        if len(points) < MIN_ANALYSIS_POINTS:
            raise InsufficientDataError(
                series_id, required=MIN_ANALYSIS_POINTS, available=len(points)
            )
        values = [p.value for p in points]

        slope, intercept = linear_trend(values)
        period, seasonal_strength = detect_seasonality(values)
        analysis = ModelTrendAnalysis(
            trend=classify_trend(values, slope, seasonal_strength),
            strength=trend_strength(values, slope),
            confidence=max(0.0, min(1.0, r_squared(values, slope, intercept))),
            slope=slope,
            intercept=intercept,
            seasonality=(
                ModelSeasonality(period=period, strength=seasonal_strength)
                if seasonal_strength > SEASONALITY_REPORT_THRESHOLD
                else None
            ),
        )

        self.patterns.append(self._build_pattern(series_id, analysis, points))
        logger.debug(
            f"Series analyzed | series_id={series_id} | points={len(points)} | "
            f"trend={analysis.trend.value} | slope={slope:.4f} | "
            f"confidence={analysis.confidence:.3f}"
        )
        await self._publish(
            EnumLearningEventType.TREND_ANALYSIS_COMPLETED,
            ModelTrendAnalysisCompletedPayload(
                series_id=series_id,
                trend=analysis.trend,
                strength=analysis.strength,
                confidence=analysis.confidence,
            ),
        )
        return analysis

    def _build_pattern(
        self,
        series_id: str,
        analysis: ModelTrendAnalysis,
        points: list[ModelTimeSeriesPoint],
    ) -> ModelPredictivePattern:
        values = [p.value for p in points]
        return ModelPredictivePattern(
            id=generate_id("predictive"),
            type=(
                EnumPredictivePatternType.SEASONAL
                if analysis.trend is EnumTrendType.CYCLICAL
                else EnumPredictivePatternType.TREND
            ),
            series_id=series_id,
            data={"series_id": series_id, "values": values},
            confidence=analysis.confidence,
            prediction=ModelPatternPrediction(
                confidence=analysis.confidence,
                factors=list(TREND_PREDICTION_FACTORS),
            ),
            trend_analysis=analysis,
            features=_series_features(points),
            metadata=ModelPredictivePatternMetadata(reliability=analysis.confidence),
        )

    def get_predictive_patterns(
        self, pattern_type: EnumPredictivePatternType | None = None
    ) -> list[ModelPredictivePattern]:
        if pattern_type is None:
            return list(self.patterns)
        return [p for p in self.patterns if p.type == pattern_type]

    def latest_pattern(self, series_id: str) -> ModelPredictivePattern | None:
        for pattern in reversed(self.patterns):
            if pattern.series_id == series_id:
                return pattern
        return None

    # =========================================================================
    # Forecasting
    # =========================================================================

    async def generate_forecast(
        self,
        series_id: str,
        horizon: int = DEFAULT_HORIZON,
        model_type: EnumModelType | str = DEFAULT_MODEL_TYPE,
    ) -> ModelForecastResult:
        """Forecast ``horizon`` steps past the last observation.

        value_i = last + slope * i, confidence_i = max(0.1, accuracy - 0.02 * i)
        and uncertainty_i = 1 - confidence_i, where ``accuracy`` is the
        selected model's. Forecast timestamps continue at the series' median
        step. The reported accuracy and metrics come from an in-sample
        backtest of the fitted line; the backtest accuracy is recorded for
        the next model refresh.

        Raises:
            ValueError: If ``horizon`` is less than 1.
            InsufficientDataError: If the series has fewer than 20 points.
            UnknownModelError: If no active model of ``model_type`` exists.
        """
        if horizon < 1:
            raise ValueError(f"horizon must be >= 1, got {horizon}")
        points = self._sorted(series_id)
        if len(points) < MIN_FORECAST_POINTS:
            raise InsufficientDataError(
                series_id, required=MIN_FORECAST_POINTS, available=len(points)
            )
        model = self.models.select(model_type)

        values = [p.value for p in points]
        slope, intercept = linear_trend(values)
        step = median_step([p.timestamp for p in points])
        if step <= 0:
            step = DEFAULT_TIME_STEP_MS
        last = points[-1]

        predictions: list[ModelForecastPoint] = []
        for i in range(1, horizon + 1):
            confidence = max(MIN_FORECAST_CONFIDENCE, model.accuracy - CONFIDENCE_DECAY_PER_STEP * i)
            predictions.append(
                ModelForecastPoint(
                    timestamp=last.timestamp + i * step,
                    value=last.value + slope * i,
                    confidence=confidence,
                    uncertainty=1.0 - confidence,
                )
            )

        fitted = [intercept + slope * i for i in range(len(values))]
        metrics = forecast_metrics(values, fitted)
        accuracy = max(0.0, min(1.0, metrics.r2))
        self.models.record_accuracy(model.id, accuracy)

        result = ModelForecastResult(
            series_id=series_id,
            predictions=predictions,
            model=model.name,
            model_id=model.id,
            accuracy=accuracy,
            horizon=horizon,
            metrics=metrics,
        )
        pattern = self.latest_pattern(series_id)
        if pattern is not None:
            pattern.forecast = result

        logger.debug(
            f"Forecast generated | series_id={series_id} | model_id={model.id} | "
            f"horizon={horizon} | accuracy={accuracy:.3f}"
        )
        await self._publish(
            EnumLearningEventType.FORECAST_GENERATED,
            ModelForecastGeneratedPayload(
                series_id=series_id, horizon=horizon, accuracy=accuracy, model=model.name
            ),
        )
        return result

    def get_models(self) -> list[ModelPredictiveModel]:
        return self.models.list_models()

    def refresh_models(self) -> int:
        """Blend recorded backtest accuracy into model accuracy (periodic task)."""
        refreshed = self.models.refresh()
        if refreshed:
            logger.info(f"Forecast models refreshed | models={refreshed}")
        return refreshed

    # =========================================================================
    # Anomalies
    # =========================================================================

    async def detect_anomalies(
        self, series_id: str, z_threshold: float = DEFAULT_Z_THRESHOLD
    ) -> list[ModelAnomaly]:
        """Points more than ``z_threshold`` standard deviations from their trailing window.

        The window is min(10, n // 2) points. Series with fewer than 10
        points yield no anomalies. Publishes ``anomalies_detected`` when any
        are found.
        """
        points = self._sorted(series_id)
        if len(points) < MIN_ANOMALY_POINTS:
            return []
        window = min(MAX_ANOMALY_WINDOW, len(points) // 2)
        anomalies = [
            ModelAnomaly(timestamp=points[i].timestamp, value=points[i].value, score=score)
            for i, score in rolling_anomalies([p.value for p in points], window, z_threshold)
        ]
        if anomalies:
            logger.info(
                f"Anomalies detected | series_id={series_id} | count={len(anomalies)} | "
                f"threshold={z_threshold}"
            )
            await self._publish(
                EnumLearningEventType.ANOMALIES_DETECTED,
                ModelAnomaliesDetectedPayload(
                    series_id=series_id, count=len(anomalies), threshold=z_threshold
                ),
            )
        return anomalies

    def get_stats(self) -> dict[str, Any]:
        return {
            "series": len(self._series),
            "points": sum(len(s) for s in self._series.values()),
            "patterns": len(self.patterns),
            "models": len(self.models),
            "initialized": self._initialized,
        }

    # =========================================================================
    # Bus handlers
    # =========================================================================

    async def _on_time_series_data(self, event: ModelEvent) -> None:
        payload: ModelTimeSeriesDataPayload = event.payload
        try:
            await self.add_time_series_data(payload.series_id, payload.data)
        except AnalyticsError as e:
            logger.warning(
                f"Time series event rejected | series_id={payload.series_id} | "
                f"event_id={event.id} | error={e}"
            )

    async def _on_prediction_request(self, event: ModelEvent) -> None:
        payload: ModelPredictionRequestPayload = event.payload
        try:
            await self.generate_forecast(payload.series_id, payload.horizon, payload.model_type)
        except AnalyticsError as e:
            logger.warning(
                f"Prediction request rejected | series_id={payload.series_id} | "
                f"model_type={payload.model_type} | event_id={event.id} | error={e}"
            )

    async def _publish(self, event_type: EnumLearningEventType, payload: BaseModel) -> None:
        await self._bus.publish_simple(
            event_type.value,
            ANALYTICS_SOURCE,
            payload,
            context={"component": ANALYTICS_SOURCE},
        )


def _series_features(points: list[ModelTimeSeriesPoint]) -> list[ModelPatternFeature]:
    values = [p.value for p in points]
    numeric = EnumFeatureKind.NUMERIC
    return [
        ModelPatternFeature(name="mean", value=statistics.fmean(values), weight=0.3, kind=numeric),
        ModelPatternFeature(
            name="std_dev", value=statistics.pstdev(values), weight=0.25, kind=numeric
        ),
        ModelPatternFeature(name="min", value=min(values), weight=0.15, kind=numeric),
        ModelPatternFeature(name="max", value=max(values), weight=0.15, kind=numeric),
        ModelPatternFeature(
            name="duration",
            value=points[-1].timestamp - points[0].timestamp,
            weight=0.1,
            kind=EnumFeatureKind.TEMPORAL,
        ),
        ModelPatternFeature(
            name="data_points", value=float(len(points)), weight=0.05, kind=numeric
        ),
    ]


__all__ = ["PredictiveAnalytics"]
