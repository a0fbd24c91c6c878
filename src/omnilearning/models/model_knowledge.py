# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Knowledge node, sharing protocol and learning algorithm models."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omnilearning.enums import (
    EnumAccessLevel,
    EnumAlgorithmType,
    EnumModelStatus,
    EnumSharingProtocolType,
)
from omnilearning.utils.ids import utc_now


class ModelKnowledgeSharing(BaseModel):
    """Sharing state of a knowledge node."""

    is_public: bool = False
    shared_with: list[str] = Field(default_factory=list)
    access_level: EnumAccessLevel = EnumAccessLevel.READ
    last_shared: datetime | None = None


class ModelKnowledgeValidation(BaseModel):
    """Verification state of a knowledge node."""

    verified: bool = False
    verification_method: str = "none"
    verified_by: str = ""
    verified_at: datetime | None = None


class ModelKnowledgeUsage(BaseModel):
    """Usage counters of a knowledge node."""

    access_count: int = 0
    last_accessed: datetime | None = None
    effectiveness: float = 0.0
    user_satisfaction: float = 0.0


class ModelKnowledgeNode(BaseModel):
    """A confidence-scored piece of content that may be shared with other subsystems."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str
    type: str = Field(min_length=1)
    content: Any = None
    relationships: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    last_updated: datetime = Field(default_factory=utc_now)
    sharing: ModelKnowledgeSharing = Field(default_factory=ModelKnowledgeSharing)
    validation: ModelKnowledgeValidation = Field(
        default_factory=ModelKnowledgeValidation
    )
    usage: ModelKnowledgeUsage = Field(default_factory=ModelKnowledgeUsage)


class ModelSharingProtocol(BaseModel):
    """A configured knowledge sharing protocol."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: EnumSharingProtocolType
    active: bool = True
    reliability: float = Field(default=0.9, ge=0.0, le=1.0)


class ModelAlgorithmTraining(BaseModel):
    """Training progress reported for a learning algorithm."""

    is_training: bool = False
    progress: float = Field(default=0.0, ge=0.0, le=100.0)
    accuracy: float = Field(default=0.0, ge=0.0, le=1.0)


class ModelLearningAlgorithm(BaseModel):
    """A registered learning algorithm descriptor.

    Descriptors only carry bookkeeping; nothing here trains. Active
    descriptors feed the algorithm section of the metrics rollup.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str
    name: str = Field(min_length=1)
    type: EnumAlgorithmType
    description: str = ""
    version: str = "1.0.0"
    input_types: list[str] = Field(default_factory=list)
    output_types: list[str] = Field(default_factory=list)
    status: EnumModelStatus = EnumModelStatus.INACTIVE
    performance: float = Field(default=0.0, ge=0.0, le=1.0)
    last_run: datetime = Field(default_factory=utc_now)
    hyperparameters: dict[str, Any] = Field(default_factory=dict)
    training: ModelAlgorithmTraining = Field(default_factory=ModelAlgorithmTraining)


__all__ = [
    "ModelAlgorithmTraining",
    "ModelKnowledgeNode",
    "ModelKnowledgeSharing",
    "ModelKnowledgeUsage",
    "ModelKnowledgeValidation",
    "ModelLearningAlgorithm",
    "ModelSharingProtocol",
]
