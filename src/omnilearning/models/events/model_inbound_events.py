# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Payloads published by UI panels and other producers."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from omnilearning.models.events.model_payload_base import ModelInboundPayload


class ModelUiEventPayload(ModelInboundPayload):
    """``user_interaction``, ``ui_state_change`` and ``accessibility_request``.

    Panels attach arbitrary fields; all of them become pattern data.
    """

    component: str | None = None
    action: str | None = None


class ModelLearningPatternPayload(ModelInboundPayload):
    """``learning_pattern`` and ``pattern_recognition``: observe a pattern."""

    type: str = Field(min_length=1)
    data: dict[str, Any] | None = None
    sources: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)


class ModelPerformanceUpdatePayload(ModelInboundPayload):
    """``performance_update`` and ``performance_metric``. Every field is optional."""

    accuracy: float | None = None
    response_time: float | None = None
    learning_rate: float | None = None
    pattern_recognition_rate: float | None = None
    overall: dict[str, float] | None = None
    by_algorithm: dict[str, Any] | None = None
    by_pattern_type: dict[str, Any] | None = None
    trends: list[Any] | None = None


class ModelAlgorithmTrainingPayload(ModelInboundPayload):
    """``algorithm_training``: progress report for a registered algorithm."""

    algorithm_id: str = Field(min_length=1)
    status: str | None = None
    progress: float | None = Field(default=None, ge=0.0, le=100.0)
    accuracy: float | None = Field(default=None, ge=0.0, le=1.0)


__all__ = [
    "ModelAlgorithmTrainingPayload",
    "ModelLearningPatternPayload",
    "ModelPerformanceUpdatePayload",
    "ModelUiEventPayload",
]
