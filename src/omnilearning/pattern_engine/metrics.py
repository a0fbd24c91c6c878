# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Learning metrics rollup.

``compute_learning_metrics`` is a pure derivation from the engine's raw
counters and stores; the periodic metrics task writes its result and nothing
else writes ModelLearningMetrics.
"""

from __future__ import annotations

from collections.abc import Sequence

from omnilearning.enums import EnumModelStatus
from omnilearning.models import (
    ModelAlgorithmMetrics,
    ModelFeedbackItem,
    ModelFeedbackMetrics,
    ModelFeedbackProcessingStats,
    ModelKnowledgeMetrics,
    ModelKnowledgeNode,
    ModelLearningAlgorithm,
    ModelLearningMetrics,
    ModelOverallMetrics,
    ModelPatternMetrics,
    ModelRecognitionStatistics,
    ModelSharingStatistics,
)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def compute_learning_metrics(
    *,
    pattern_count: int,
    recognition: ModelRecognitionStatistics,
    algorithms: Sequence[ModelLearningAlgorithm],
    knowledge: Sequence[ModelKnowledgeNode],
    sharing: ModelSharingStatistics,
    feedback: Sequence[ModelFeedbackItem],
    feedback_stats: ModelFeedbackProcessingStats,
) -> ModelLearningMetrics:
    """Derive aggregate metrics.

    Ratios divide by max(1, denominator) so empty stores yield 0.0.

    Returns:
        recognition_rate     patterns detected / stored patterns
        accuracy             running average pattern confidence
        false_positive_rate  corrections that adjusted a pattern / patterns
                             detected
        active_algorithms    algorithms with status ``active``
        average_performance  mean performance of the active algorithms
        knowledge confidence mean confidence of all knowledge nodes
        sharing_rate         sharing success rate
        processing_rate      feedback processed / feedback stored
        average_impact       mean impact learning rate over all feedback
    """
    active = [a for a in algorithms if a.status is EnumModelStatus.ACTIVE]
    return ModelLearningMetrics(
        overall=ModelOverallMetrics(
            total_patterns=pattern_count,
            total_knowledge=len(knowledge),
            total_feedback=len(feedback),
        ),
        patterns=ModelPatternMetrics(
            recognition_rate=recognition.patterns_detected / max(1, pattern_count),
            accuracy=recognition.average_confidence,
            false_positive_rate=recognition.false_positives
            / max(1, recognition.patterns_detected),
        ),
        algorithms=ModelAlgorithmMetrics(
            active_algorithms=len(active),
            average_performance=_mean([a.performance for a in active]),
        ),
        knowledge=ModelKnowledgeMetrics(
            total_nodes=len(knowledge),
            average_confidence=_mean([k.confidence for k in knowledge]),
            sharing_rate=sharing.success_rate,
        ),
        feedback=ModelFeedbackMetrics(
            total_feedback=len(feedback),
            processing_rate=feedback_stats.total_processed / max(1, len(feedback)),
            average_impact=_mean([f.impact.learning_rate for f in feedback]),
        ),
    )


__all__ = ["compute_learning_metrics"]
