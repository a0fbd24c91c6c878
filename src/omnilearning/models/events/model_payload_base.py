# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Base classes for event payload models.

Payload keys on the wire are camelCase (``patternId``, ``seriesId``) because
other subsystems already consume them that way. Python code uses snake_case
attributes; aliases are generated and payloads accept either spelling.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ModelOutboundPayload(BaseModel):
    """Payload published by the learning services. Closed schema."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ModelInboundPayload(BaseModel):
    """Payload published by producers outside the learning core.

    Extra keys are kept so UI panels can attach panel-specific fields.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )


__all__ = ["ModelInboundPayload", "ModelOutboundPayload"]
