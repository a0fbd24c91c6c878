# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pydantic models for the adaptive learning core.

Entity models (patterns, feedback, knowledge, time series) are imported
before the event payload package, which builds on them.
"""

from omnilearning.models.model_event import EventHandler, ModelEvent, ModelSubscription
from omnilearning.models.model_feedback import (
    DEFAULT_LEARNING_RATE,
    ModelFeedbackAction,
    ModelFeedbackImpact,
    ModelFeedbackItem,
    ModelFeedbackRule,
)
from omnilearning.models.model_knowledge import (
    ModelAlgorithmTraining,
    ModelKnowledgeNode,
    ModelKnowledgeSharing,
    ModelKnowledgeUsage,
    ModelKnowledgeValidation,
    ModelLearningAlgorithm,
    ModelSharingProtocol,
)
from omnilearning.models.model_learning_stats import (
    ModelAlgorithmMetrics,
    ModelFeedbackMetrics,
    ModelFeedbackProcessingStats,
    ModelKnowledgeMetrics,
    ModelLearningMetrics,
    ModelOverallMetrics,
    ModelPatternMetrics,
    ModelPerformanceSnapshot,
    ModelRecognitionStatistics,
    ModelRecognitionThresholds,
    ModelSharingStatistics,
)
from omnilearning.models.model_pattern import (
    DEFAULT_PREDICTION_TIMEFRAME_MS,
    ModelPattern,
    ModelPatternFeature,
    ModelPatternPrediction,
    ModelPatternSimilarity,
    ModelPatternValidation,
)
from omnilearning.models.model_time_series import (
    ModelAnomaly,
    ModelForecastMetrics,
    ModelForecastPoint,
    ModelForecastResult,
    ModelModelPerformance,
    ModelPredictiveModel,
    ModelPredictivePattern,
    ModelPredictivePatternMetadata,
    ModelSeasonality,
    ModelTimeSeriesPoint,
    ModelTrendAnalysis,
)
from omnilearning.models.events import (
    EVENT_PAYLOAD_MODELS,
    coerce_event_payload,
)

__all__ = [
    "DEFAULT_LEARNING_RATE",
    "DEFAULT_PREDICTION_TIMEFRAME_MS",
    "EVENT_PAYLOAD_MODELS",
    "EventHandler",
    "ModelAlgorithmMetrics",
    "ModelAnomaly",
    "ModelEvent",
    "ModelFeedbackAction",
    "ModelFeedbackImpact",
    "ModelFeedbackItem",
    "ModelFeedbackMetrics",
    "ModelFeedbackProcessingStats",
    "ModelFeedbackRule",
    "ModelForecastMetrics",
    "ModelForecastPoint",
    "ModelForecastResult",
    "ModelKnowledgeMetrics",
    "ModelKnowledgeNode",
    "ModelKnowledgeSharing",
    "ModelKnowledgeUsage",
    "ModelKnowledgeValidation",
    "ModelLearningAlgorithm",
    "ModelLearningMetrics",
    "ModelModelPerformance",
    "ModelOverallMetrics",
    "ModelPattern",
    "ModelPatternFeature",
    "ModelPatternMetrics",
    "ModelPatternPrediction",
    "ModelPatternSimilarity",
    "ModelPatternValidation",
    "ModelPerformanceSnapshot",
    "ModelPredictiveModel",
    "ModelPredictivePattern",
    "ModelPredictivePatternMetadata",
    "ModelRecognitionStatistics",
    "ModelRecognitionThresholds",
    "ModelSeasonality",
    "ModelSharingProtocol",
    "ModelSharingStatistics",
    "ModelSubscription",
    "ModelTimeSeriesPoint",
    "ModelTrendAnalysis",
    "coerce_event_payload",
]
