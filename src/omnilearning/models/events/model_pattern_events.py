# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Payloads for pattern_learned and pattern_updated."""

from __future__ import annotations

from pydantic import Field

from omnilearning.models.events.model_payload_base import ModelOutboundPayload


class ModelPatternLearnedPayload(ModelOutboundPayload):
    """``pattern_learned``: a new pattern was stored.

    ``features`` is the number of features on the pattern, not the list.
    """

    pattern_id: str
    type: str
    confidence: float = Field(ge=0.0, le=1.0)
    features: int = Field(ge=0)


class ModelPatternUpdatedPayload(ModelOutboundPayload):
    """``pattern_updated``: an existing pattern was observed again or adjusted."""

    pattern_id: str
    confidence: float = Field(ge=0.0, le=1.0)
    occurrences: int = Field(ge=1)


__all__ = ["ModelPatternLearnedPayload", "ModelPatternUpdatedPayload"]
