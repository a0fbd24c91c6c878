# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Event type vocabulary for the adaptive learning core.

The string values are the wire names other subsystems subscribe to and must
not change. Inbound types are published by UI panels and other producers;
outbound types are published by the learning services themselves.
"""

from enum import Enum


class EnumLearningEventType(str, Enum):
    """Known event types carried on the EventBus.

    Inbound (consumed):
        USER_INTERACTION, FEEDBACK_REQUEST, ACCESSIBILITY_REQUEST,
        UI_STATE_CHANGE, PERFORMANCE_METRIC, PREDICTION_REQUEST,
        TIME_SERIES_DATA, LEARNING_PATTERN, PATTERN_RECOGNITION,
        KNOWLEDGE_UPDATE, KNOWLEDGE_SHARING, PERFORMANCE_UPDATE,
        ALGORITHM_TRAINING

    Outbound (produced):
        PATTERN_LEARNED, PATTERN_UPDATED, FEEDBACK_RECEIVED,
        KNOWLEDGE_CREATED, KNOWLEDGE_SHARED, TREND_ANALYSIS_COMPLETED,
        FORECAST_GENERATED, ANOMALIES_DETECTED, TIME_SERIES_DATA_ADDED,
        LEARNING_INITIALIZED, PREDICTIVE_LEARNING_INITIALIZED,
        ALGORITHM_REGISTERED
    """

    # Inbound
    USER_INTERACTION = "user_interaction"
    FEEDBACK_REQUEST = "feedback_request"
    ACCESSIBILITY_REQUEST = "accessibility_request"
    UI_STATE_CHANGE = "ui_state_change"
    PERFORMANCE_METRIC = "performance_metric"
    PREDICTION_REQUEST = "prediction_request"
    TIME_SERIES_DATA = "time_series_data"
    LEARNING_PATTERN = "learning_pattern"
    PATTERN_RECOGNITION = "pattern_recognition"
    KNOWLEDGE_UPDATE = "knowledge_update"
    KNOWLEDGE_SHARING = "knowledge_sharing"
    PERFORMANCE_UPDATE = "performance_update"
    ALGORITHM_TRAINING = "algorithm_training"

    # Outbound
    PATTERN_LEARNED = "pattern_learned"
    PATTERN_UPDATED = "pattern_updated"
    FEEDBACK_RECEIVED = "feedback_received"
    KNOWLEDGE_CREATED = "knowledge_created"
    KNOWLEDGE_SHARED = "knowledge_shared"
    TREND_ANALYSIS_COMPLETED = "trend_analysis_completed"
    FORECAST_GENERATED = "forecast_generated"
    ANOMALIES_DETECTED = "anomalies_detected"
    TIME_SERIES_DATA_ADDED = "time_series_data_added"
    LEARNING_INITIALIZED = "learning_initialized"
    PREDICTIVE_LEARNING_INITIALIZED = "predictive_learning_initialized"
    ALGORITHM_REGISTERED = "algorithm_registered"


__all__ = ["EnumLearningEventType"]
