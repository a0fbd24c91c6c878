# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Statistics and metrics models maintained by the pattern engine.

Raw counters (recognition, feedback processing, sharing) are updated by the
operations that own them. ``ModelLearningMetrics`` is derived from those
counters by the periodic rollup and is never written anywhere else.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ModelRecognitionThresholds(BaseModel):
    """Thresholds used by pattern recognition."""

    confidence: float = Field(default=0.7, ge=0.0, le=1.0)
    similarity: float = Field(default=0.8, ge=0.0, le=1.0)
    frequency: int = Field(default=3, ge=1)
    support: float = Field(default=0.1, ge=0.0, le=1.0)


class ModelRecognitionStatistics(BaseModel):
    """Raw pattern recognition counters."""

    patterns_detected: int = 0
    false_positives: int = 0
    false_negatives: int = 0
    average_confidence: float = 0.0
    processing_time_ms: float = 0.0


class ModelFeedbackProcessingStats(BaseModel):
    """Raw feedback processor counters."""

    is_processing: bool = False
    current_batch: int = 0
    total_processed: int = 0
    completed: int = 0
    failed: int = 0
    average_processing_time_ms: float = 0.0


class ModelSharingStatistics(BaseModel):
    """Raw knowledge sharing counters."""

    shared_items: int = 0
    received_items: int = 0
    success_rate: float = 0.0
    average_latency_ms: float = 0.0


class ModelOverallMetrics(BaseModel):
    total_patterns: int = 0
    total_knowledge: int = 0
    total_feedback: int = 0


class ModelPatternMetrics(BaseModel):
    recognition_rate: float = 0.0
    accuracy: float = 0.0
    false_positive_rate: float = 0.0


class ModelAlgorithmMetrics(BaseModel):
    active_algorithms: int = 0
    average_performance: float = 0.0


class ModelKnowledgeMetrics(BaseModel):
    total_nodes: int = 0
    average_confidence: float = 0.0
    sharing_rate: float = 0.0


class ModelFeedbackMetrics(BaseModel):
    total_feedback: int = 0
    processing_rate: float = 0.0
    average_impact: float = 0.0


class ModelLearningMetrics(BaseModel):
    """Aggregate learning metrics produced by the rollup."""

    overall: ModelOverallMetrics = Field(default_factory=ModelOverallMetrics)
    patterns: ModelPatternMetrics = Field(default_factory=ModelPatternMetrics)
    algorithms: ModelAlgorithmMetrics = Field(default_factory=ModelAlgorithmMetrics)
    knowledge: ModelKnowledgeMetrics = Field(default_factory=ModelKnowledgeMetrics)
    feedback: ModelFeedbackMetrics = Field(default_factory=ModelFeedbackMetrics)


class ModelPerformanceSnapshot(BaseModel):
    """Latest performance figures reported through performance events."""

    accuracy: float = 0.0
    response_time: float = 0.0
    learning_rate: float = 0.0
    pattern_recognition_rate: float = 0.0
    overall: dict[str, float] = Field(default_factory=dict)
    by_algorithm: dict[str, Any] = Field(default_factory=dict)
    by_pattern_type: dict[str, Any] = Field(default_factory=dict)
    trends: list[Any] = Field(default_factory=list)


__all__ = [
    "ModelAlgorithmMetrics",
    "ModelFeedbackMetrics",
    "ModelFeedbackProcessingStats",
    "ModelKnowledgeMetrics",
    "ModelLearningMetrics",
    "ModelOverallMetrics",
    "ModelPatternMetrics",
    "ModelPerformanceSnapshot",
    "ModelRecognitionStatistics",
    "ModelRecognitionThresholds",
    "ModelSharingStatistics",
]
