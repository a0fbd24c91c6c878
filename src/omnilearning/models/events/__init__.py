# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Typed payloads for the learning event vocabulary.

One payload model per event type, keyed by the event's wire name in
EVENT_PAYLOAD_MODELS. Outbound payloads (published by the learning services)
have closed schemas; inbound payloads from UI panels allow extra keys.
"""

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
from omnilearning.models.events.model_payload_base import (
    ModelInboundPayload,
    ModelOutboundPayload,
)
from omnilearning.models.events.model_predictive_events import (
    ModelAnomaliesDetectedPayload,
    ModelForecastGeneratedPayload,
    ModelPredictionRequestPayload,
    ModelTimeSeriesDataAddedPayload,
    ModelTimeSeriesDataPayload,
    ModelTrendAnalysisCompletedPayload,
)
from omnilearning.models.events.registry import (
    EVENT_PAYLOAD_MODELS,
    coerce_event_payload,
    get_payload_model,
)

__all__ = [
    "EVENT_PAYLOAD_MODELS",
    "ModelAlgorithmRegisteredPayload",
    "ModelAlgorithmTrainingPayload",
    "ModelAnomaliesDetectedPayload",
    "ModelFeedbackReceivedPayload",
    "ModelFeedbackRequestPayload",
    "ModelForecastGeneratedPayload",
    "ModelInboundPayload",
    "ModelKnowledgeCreatedPayload",
    "ModelKnowledgeSharedPayload",
    "ModelKnowledgeSharingPayload",
    "ModelKnowledgeUpdatePayload",
    "ModelLearningInitializedPayload",
    "ModelLearningPatternPayload",
    "ModelOutboundPayload",
    "ModelPatternLearnedPayload",
    "ModelPatternUpdatedPayload",
    "ModelPerformanceUpdatePayload",
    "ModelPredictionRequestPayload",
    "ModelPredictiveLearningInitializedPayload",
    "ModelTimeSeriesDataAddedPayload",
    "ModelTimeSeriesDataPayload",
    "ModelTrendAnalysisCompletedPayload",
    "ModelUiEventPayload",
    "coerce_event_payload",
    "get_payload_model",
]
