# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniLearning - in-process adaptive learning services.

This package provides an asynchronous event bus, a pattern & feedback
engine and a predictive analytics service that communicate only through
bus events.

Quick Start:
    >>> from omnilearning import LearningContext, LearningRuntimeSettings
    >>> async with LearningContext(LearningRuntimeSettings()) as context:
    ...     pattern = await context.engine.learn_pattern(
    ...         "user_interaction", {"component": "button", "action": "click"}
    ...     )
    ...     pattern.confidence
    0.5
"""

from omnilearning.event_bus import EventBus
from omnilearning.exceptions import (
    AnalyticsError,
    EventPayloadValidationError,
    InsufficientDataError,
    OmniLearningError,
    PersistenceError,
    RuleEvaluationError,
    UnknownModelError,
)
from omnilearning.pattern_engine import PatternEngine
from omnilearning.predictive import PredictiveAnalytics
from omnilearning.runtime import LearningContext, LearningRuntimeSettings, PeriodicTask

__version__ = "0.1.0"

__all__ = [
    # Runtime
    "EventBus",
    "LearningContext",
    "LearningRuntimeSettings",
    "PatternEngine",
    "PeriodicTask",
    "PredictiveAnalytics",
    # Exceptions
    "AnalyticsError",
    "EventPayloadValidationError",
    "InsufficientDataError",
    "OmniLearningError",
    "PersistenceError",
    "RuleEvaluationError",
    "UnknownModelError",
]
