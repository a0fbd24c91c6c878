# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Predictive analytics enums: trend classes, pattern kinds, model registry."""

from enum import Enum


class EnumTrendType(str, Enum):
    """Classification produced by trend analysis."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
    CYCLICAL = "cyclical"
    RANDOM = "random"


class EnumPredictivePatternType(str, Enum):
    """Kind of predictive pattern stored after an analysis run."""

    TREND = "trend"
    SEASONAL = "seasonal"
    ANOMALY = "anomaly"
    REGIME_CHANGE = "regime_change"
    CORRELATION = "correlation"


class EnumModelType(str, Enum):
    """Forecast model families.

    These are labels over closed-form statistics; no model here is trained.
    PROPHET and NEURAL_NETWORK are valid names without a seeded descriptor,
    so forecasting with them fails with UnknownModelError until one is
    registered.
    """

    ARIMA = "arima"
    PROPHET = "prophet"
    LSTM = "lstm"
    RANDOM_FOREST = "random_forest"
    NEURAL_NETWORK = "neural_network"


class EnumModelStatus(str, Enum):
    """Lifecycle status of a registered predictive model."""

    TRAINING = "training"
    ACTIVE = "active"
    INACTIVE = "inactive"
    ERROR = "error"


__all__ = [
    "EnumModelStatus",
    "EnumModelType",
    "EnumPredictivePatternType",
    "EnumTrendType",
]
