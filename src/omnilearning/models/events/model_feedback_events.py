# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Payloads for feedback_request (inbound) and feedback_received (outbound)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from omnilearning.enums import EnumFeedbackType, EnumPriority
from omnilearning.models.events.model_payload_base import (
    ModelInboundPayload,
    ModelOutboundPayload,
)


class ModelFeedbackRequestPayload(ModelInboundPayload):
    """``feedback_request``: a producer submits feedback for the rule engine."""

    type: EnumFeedbackType = EnumFeedbackType.USER
    data: dict[str, Any] = Field(default_factory=dict)
    priority: EnumPriority = EnumPriority.MEDIUM
    source: str = "unknown"
    target: str = "learning_system"


class ModelFeedbackReceivedPayload(ModelOutboundPayload):
    """``feedback_received``: a feedback item was queued as pending."""

    feedback_id: str
    type: EnumFeedbackType
    priority: EnumPriority
    source: str
    target: str


__all__ = ["ModelFeedbackReceivedPayload", "ModelFeedbackRequestPayload"]
