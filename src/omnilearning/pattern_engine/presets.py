# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Default configuration presets for the pattern engine.

These are INPUTS (configurable defaults), not canonical policy. The engine
accepts overrides for thresholds, rules and protocols at construction.

Usage:
    from omnilearning.pattern_engine.presets import DEFAULT_FEEDBACK_RULES

    rules = [*DEFAULT_FEEDBACK_RULES, my_rule]
    engine = PatternEngine(bus, rules=rules)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from omnilearning.enums import (
    EnumFeedbackRuleAction,
    EnumFeedbackType,
    EnumSharingProtocolType,
)
from omnilearning.models import (
    DEFAULT_LEARNING_RATE,
    ModelFeedbackRule,
    ModelSharingProtocol,
)

# =============================================================================
# Event source
# =============================================================================

ENGINE_SOURCE: Final[str] = "LearningSystem"
"""``source`` on every event the engine publishes. Consumers filter on it."""

ENGINE_FEATURES: Final[tuple[str, ...]] = (
    "pattern_recognition",
    "feedback_processing",
    "knowledge_sharing",
)
"""Reported in the ``learning_initialized`` payload."""

# =============================================================================
# Pattern recognition
# =============================================================================

MAX_SIMILAR_PATTERNS: Final[int] = 5
"""Similar same-type patterns kept on a newly learned pattern."""

NUMERIC_FEATURE_WEIGHT: Final[float] = 1.0
CATEGORICAL_FEATURE_WEIGHT: Final[float] = 0.8
TEMPORAL_FEATURE_WEIGHT: Final[float] = 0.9
TEMPORAL_FEATURE_NAME: Final[str] = "timestamp"

PREDICTION_BASE_CONFIDENCE: Final[float] = 0.5
PREDICTION_SIMILARITY_BONUS: Final[float] = 0.3
"""Prediction stub confidence: base + bonus * min(1, similar / MAX_SIMILAR_PATTERNS).

Ranges over [0.5, 0.8] and grows with the amount of corroborating same-type
history.
"""

PREDICTION_FACTORS: Final[tuple[str, ...]] = (
    "pattern_type",
    "data_complexity",
    "historical_accuracy",
)

# =============================================================================
# Feedback processing
# =============================================================================

DEFAULT_FEEDBACK_RULES: Final[tuple[ModelFeedbackRule, ...]] = (
    ModelFeedbackRule(
        id="rule_1",
        condition="confidence < 0.5",
        action=EnumFeedbackRuleAction.REQUEST_FEEDBACK,
        priority=1,
    ),
    ModelFeedbackRule(
        id="rule_2",
        condition="occurrences > 10",
        action=EnumFeedbackRuleAction.INCREASE_CONFIDENCE,
        priority=2,
    ),
)

RULE_ACTION_CONFIDENCE_DELTAS: Final[MappingProxyType[EnumFeedbackRuleAction, float]] = (
    MappingProxyType(
        {
            EnumFeedbackRuleAction.REQUEST_FEEDBACK: 0.1,
            EnumFeedbackRuleAction.INCREASE_CONFIDENCE: 0.2,
        }
    )
)
"""Confidence delta applied to the target pattern per winning rule action."""

FEEDBACK_LEARNING_RATES: Final[MappingProxyType[EnumFeedbackType, float]] = (
    MappingProxyType(
        {
            EnumFeedbackType.CORRECTION: 0.2,
            EnumFeedbackType.REINFORCEMENT: 0.15,
        }
    )
)
"""Impact learning rate per feedback type. Other types use DEFAULT_LEARNING_RATE."""

FEEDBACK_TARGET_PATTERN_KEY: Final[str] = "pattern_id"
"""Payload key naming the pattern a feedback action applies to."""

# =============================================================================
# Knowledge sharing
# =============================================================================

DEFAULT_SHARING_PROTOCOLS: Final[tuple[ModelSharingProtocol, ...]] = (
    ModelSharingProtocol(
        name="Push Protocol",
        type=EnumSharingProtocolType.PUSH,
        reliability=0.9,
    ),
    ModelSharingProtocol(
        name="Request-Response Protocol",
        type=EnumSharingProtocolType.REQUEST_RESPONSE,
        reliability=0.95,
    ),
)

# =============================================================================
# Persistence collections
# =============================================================================

PATTERNS_COLLECTION: Final[str] = "patterns"
FEEDBACK_COLLECTION: Final[str] = "feedback_items"
KNOWLEDGE_COLLECTION: Final[str] = "knowledge_nodes"


def learning_rate_for(feedback_type: EnumFeedbackType) -> float:
    """Impact learning rate for ``feedback_type``."""
    return FEEDBACK_LEARNING_RATES.get(feedback_type, DEFAULT_LEARNING_RATE)


__all__ = [
    "CATEGORICAL_FEATURE_WEIGHT",
    "DEFAULT_FEEDBACK_RULES",
    "DEFAULT_SHARING_PROTOCOLS",
    "ENGINE_FEATURES",
    "ENGINE_SOURCE",
    "FEEDBACK_COLLECTION",
    "FEEDBACK_LEARNING_RATES",
    "FEEDBACK_TARGET_PATTERN_KEY",
    "KNOWLEDGE_COLLECTION",
    "MAX_SIMILAR_PATTERNS",
    "NUMERIC_FEATURE_WEIGHT",
    "PATTERNS_COLLECTION",
    "PREDICTION_BASE_CONFIDENCE",
    "PREDICTION_FACTORS",
    "PREDICTION_SIMILARITY_BONUS",
    "RULE_ACTION_CONFIDENCE_DELTAS",
    "TEMPORAL_FEATURE_NAME",
    "TEMPORAL_FEATURE_WEIGHT",
    "learning_rate_for",
]
