# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Learning Enums Package.

Consolidated enums for the omnilearning system:

    from omnilearning.enums import (
        EnumFeedbackStatus,
        EnumLearningEventType,
        EnumModelType,
        EnumPriority,
    )

Exports:
    Event Enums:
        - EnumLearningEventType: Event type vocabulary (wire names)
        - EnumPriority: Event and feedback priority

    Feedback Enums:
        - EnumFeedbackType, EnumFeedbackStatus
        - EnumFeedbackRuleAction, EnumFeedbackActionType

    Knowledge Enums:
        - EnumSharingProtocolType, EnumAccessLevel
        - EnumFeatureKind, EnumAlgorithmType

    Predictive Enums:
        - EnumTrendType, EnumPredictivePatternType
        - EnumModelType, EnumModelStatus

    Runtime Enums:
        - EnumLogLevel
"""

from omnilearning.enums.enum_event_priority import EnumPriority
from omnilearning.enums.enum_event_type import EnumLearningEventType
from omnilearning.enums.enum_feedback import (
    EnumFeedbackActionType,
    EnumFeedbackRuleAction,
    EnumFeedbackStatus,
    EnumFeedbackType,
)
from omnilearning.enums.enum_knowledge import (
    EnumAccessLevel,
    EnumAlgorithmType,
    EnumFeatureKind,
    EnumSharingProtocolType,
)
from omnilearning.enums.enum_log_level import EnumLogLevel
from omnilearning.enums.enum_predictive import (
    EnumModelStatus,
    EnumModelType,
    EnumPredictivePatternType,
    EnumTrendType,
)

__all__ = [
    "EnumAccessLevel",
    "EnumAlgorithmType",
    "EnumFeatureKind",
    "EnumFeedbackActionType",
    "EnumFeedbackRuleAction",
    "EnumFeedbackStatus",
    "EnumFeedbackType",
    "EnumLearningEventType",
    "EnumLogLevel",
    "EnumModelStatus",
    "EnumModelType",
    "EnumPredictivePatternType",
    "EnumPriority",
    "EnumSharingProtocolType",
    "EnumTrendType",
]
