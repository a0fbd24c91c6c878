# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Event type to payload model registry.

Every event type in EnumLearningEventType has exactly one payload model.
``coerce_event_payload`` is called by the EventBus at publish time, so a
malformed payload for a known event type is rejected before it is queued.
Unknown event types pass through untouched.

Usage:
    >>> payload = coerce_event_payload(
    ...     "pattern_updated", {"patternId": "p1", "confidence": 0.6, "occurrences": 2}
    ... )
    >>> payload.pattern_id
    'p1'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ValidationError

from omnilearning.enums import EnumLearningEventType
from omnilearning.exceptions import EventPayloadValidationError
from omnilearning.models.events.model_feedback_events import (
    ModelFeedbackReceivedPayload,
    ModelFeedbackRequestPayload,
)
from omnilearning.models.events.model_inbound_events import (
    ModelAlgorithmTrainingPayload,
    ModelLearningPatternPayload,
    ModelPerformanceUpdatePayload,
    ModelUiEventPayload,
)
from omnilearning.models.events.model_knowledge_events import (
    ModelKnowledgeCreatedPayload,
    ModelKnowledgeSharedPayload,
    ModelKnowledgeSharingPayload,
    ModelKnowledgeUpdatePayload,
)
from omnilearning.models.events.model_lifecycle_events import (
    ModelAlgorithmRegisteredPayload,
    ModelLearningInitializedPayload,
    ModelPredictiveLearningInitializedPayload,
)
from omnilearning.models.events.model_pattern_events import (
    ModelPatternLearnedPayload,
    ModelPatternUpdatedPayload,
)
from omnilearning.models.events.model_predictive_events import (
    ModelAnomaliesDetectedPayload,
    ModelForecastGeneratedPayload,
    ModelPredictionRequestPayload,
    ModelTimeSeriesDataAddedPayload,
    ModelTimeSeriesDataPayload,
    ModelTrendAnalysisCompletedPayload,
)

_T = EnumLearningEventType

EVENT_PAYLOAD_MODELS: Final[Mapping[str, type[BaseModel]]] = {
    # Consumed
    _T.USER_INTERACTION.value: ModelUiEventPayload,
    _T.UI_STATE_CHANGE.value: ModelUiEventPayload,
    _T.ACCESSIBILITY_REQUEST.value: ModelUiEventPayload,
    _T.FEEDBACK_REQUEST.value: ModelFeedbackRequestPayload,
    _T.PERFORMANCE_METRIC.value: ModelPerformanceUpdatePayload,
    _T.PERFORMANCE_UPDATE.value: ModelPerformanceUpdatePayload,
    _T.PREDICTION_REQUEST.value: ModelPredictionRequestPayload,
    _T.TIME_SERIES_DATA.value: ModelTimeSeriesDataPayload,
    _T.LEARNING_PATTERN.value: ModelLearningPatternPayload,
    _T.PATTERN_RECOGNITION.value: ModelLearningPatternPayload,
    _T.KNOWLEDGE_UPDATE.value: ModelKnowledgeUpdatePayload,
    _T.KNOWLEDGE_SHARING.value: ModelKnowledgeSharingPayload,
    _T.ALGORITHM_TRAINING.value: ModelAlgorithmTrainingPayload,
    # Produced
    _T.PATTERN_LEARNED.value: ModelPatternLearnedPayload,
    _T.PATTERN_UPDATED.value: ModelPatternUpdatedPayload,
    _T.FEEDBACK_RECEIVED.value: ModelFeedbackReceivedPayload,
    _T.KNOWLEDGE_CREATED.value: ModelKnowledgeCreatedPayload,
    _T.KNOWLEDGE_SHARED.value: ModelKnowledgeSharedPayload,
    _T.TREND_ANALYSIS_COMPLETED.value: ModelTrendAnalysisCompletedPayload,
    _T.FORECAST_GENERATED.value: ModelForecastGeneratedPayload,
    _T.ANOMALIES_DETECTED.value: ModelAnomaliesDetectedPayload,
    _T.TIME_SERIES_DATA_ADDED.value: ModelTimeSeriesDataAddedPayload,
    _T.LEARNING_INITIALIZED.value: ModelLearningInitializedPayload,
    _T.PREDICTIVE_LEARNING_INITIALIZED.value: ModelPredictiveLearningInitializedPayload,
    _T.ALGORITHM_REGISTERED.value: ModelAlgorithmRegisteredPayload,
}


def get_payload_model(event_type: str) -> type[BaseModel] | None:
    """Payload model registered for ``event_type``, or None for unknown types."""
    return EVENT_PAYLOAD_MODELS.get(event_type)


def coerce_event_payload(event_type: str, payload: Any) -> Any:
    """Validate ``payload`` against the model registered for ``event_type``.

    Args:
        event_type: Wire name of the event.
        payload: A payload model instance, a mapping (camelCase or snake_case
            keys), or None.

    Returns:
        The validated payload model for known event types. For unknown types
        the payload is returned as-is (None becomes an empty dict).

    Raises:
        EventPayloadValidationError: If the payload does not match the
            registered model.
    """
    model = EVENT_PAYLOAD_MODELS.get(event_type)
    if model is None:
        return {} if payload is None else payload
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(by_alias=True)
    elif payload is None:
        payload = {}
    elif not isinstance(payload, Mapping):
        raise EventPayloadValidationError(
            event_type, f"expected a mapping, got {type(payload).__name__}"
        )
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise EventPayloadValidationError(event_type, str(e)) from e


__all__ = ["EVENT_PAYLOAD_MODELS", "coerce_event_payload", "get_payload_model"]
