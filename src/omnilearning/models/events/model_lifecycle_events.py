# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Payloads for lifecycle events: service initialization and algorithm registration."""

from __future__ import annotations

from pydantic import Field

from omnilearning.enums import EnumAlgorithmType
from omnilearning.models.events.model_payload_base import ModelOutboundPayload


class ModelLearningInitializedPayload(ModelOutboundPayload):
    """``learning_initialized``. ``timestamp`` is epoch milliseconds."""

    timestamp: int
    features: list[str] = Field(default_factory=list)


class ModelPredictiveLearningInitializedPayload(ModelOutboundPayload):
    """``predictive_learning_initialized``. ``models`` is the registry size."""

    timestamp: int
    models: int = Field(ge=0)


class ModelAlgorithmRegisteredPayload(ModelOutboundPayload):
    """``algorithm_registered``: a learning algorithm descriptor was added."""

    algorithm_id: str
    type: EnumAlgorithmType
    name: str
    performance: float = Field(ge=0.0, le=1.0)


__all__ = [
    "ModelAlgorithmRegisteredPayload",
    "ModelLearningInitializedPayload",
    "ModelPredictiveLearningInitializedPayload",
]
