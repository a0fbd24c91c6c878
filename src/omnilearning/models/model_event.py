# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Event and subscription models for the EventBus.

Schema (``ModelEvent.to_dict``):
{
  "id": "event_1718000000000_3f9a1c2b7",
  "type": "pattern_learned",
  "source": "LearningSystem",
  "payload": {"patternId": "...", "type": "...", "confidence": 0.5, "features": 3},
  "context": {"component": "LearningSystem"},
  "timestamp": "2025-10-18T10:00:00.000000+00:00",
  "priority": "medium"
}

The payload is typed per event type when the type belongs to the known
vocabulary (see ``omnilearning.models.events``); unknown types carry a
free-form mapping.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnilearning.enums import EnumPriority
from omnilearning.utils.ids import generate_id, utc_now

# Handlers may be plain callables or coroutine functions.
EventHandler = Callable[["ModelEvent"], Awaitable[None] | None]


class ModelEvent(BaseModel):
    """An immutable event carried by the EventBus."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(default_factory=lambda: generate_id("event"))
    type: str = Field(min_length=1, description="Event type tag (wire name)")
    source: str = Field(default="unknown", description="Publishing component")
    # any-ok: typed model for known event types, mapping otherwise
    payload: Any = Field(default_factory=dict)
    context: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=utc_now)
    priority: EnumPriority = EnumPriority.MEDIUM

    @field_validator("timestamp")
    @classmethod
    def ensure_utc_timezone(cls, v: datetime) -> datetime:
        """Ensure timestamp is UTC timezone-aware."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v.astimezone(UTC)

    def payload_dict(self) -> dict[str, Any]:
        """Payload as a JSON-compatible mapping using wire (camelCase) keys."""
        if isinstance(self.payload, BaseModel):
            return self.payload.model_dump(mode="json", by_alias=True)
        return dict(self.payload or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert the event to a dictionary with JSON-serializable types."""
        return {
            "id": self.id,
            "type": self.type,
            "source": self.source,
            "payload": self.payload_dict(),
            "context": dict(self.context),
            "timestamp": self.timestamp.isoformat(),
            "priority": self.priority.value,
        }


@dataclass(slots=True)
class ModelSubscription:
    """A handler's registration for one event type.

    ``active`` flips to False on the first handler failure or on
    unsubscribe and never flips back.
    """

    event_type: str
    handler: EventHandler
    id: str = field(default_factory=lambda: generate_id("sub"))
    active: bool = True


__all__ = ["EventHandler", "ModelEvent", "ModelSubscription"]
