# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Payloads for knowledge node creation and sharing."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from omnilearning.models.events.model_payload_base import (
    ModelInboundPayload,
    ModelOutboundPayload,
)


class ModelKnowledgeUpdatePayload(ModelInboundPayload):
    """``knowledge_update``: a producer contributes a knowledge node."""

    type: str = Field(min_length=1)
    content: Any = None
    relationships: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    is_public: bool = False


class ModelKnowledgeCreatedPayload(ModelOutboundPayload):
    """``knowledge_created``: a knowledge node was stored."""

    knowledge_id: str
    type: str
    confidence: float
    is_public: bool


class ModelKnowledgeSharedPayload(ModelOutboundPayload):
    """``knowledge_shared``: a knowledge node was offered to peers."""

    knowledge_id: str
    protocol: str
    type: str
    confidence: float


class ModelKnowledgeSharingPayload(ModelInboundPayload):
    """``knowledge_sharing``: a peer shared a knowledge node with us."""

    knowledge_id: str = Field(min_length=1)
    protocol: str | None = None
    type: str | None = None
    confidence: float | None = None


__all__ = [
    "ModelKnowledgeCreatedPayload",
    "ModelKnowledgeSharedPayload",
    "ModelKnowledgeSharingPayload",
    "ModelKnowledgeUpdatePayload",
]
