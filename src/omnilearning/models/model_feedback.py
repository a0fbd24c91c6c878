# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Feedback item and rule models for the feedback processor.

A FeedbackItem is a queued correction or reinforcement signal. The rule
engine turns it into a pattern-mutating action while moving it through
``pending → processing → completed | failed``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omnilearning.enums import (
    EnumFeedbackActionType,
    EnumFeedbackRuleAction,
    EnumFeedbackStatus,
    EnumFeedbackType,
    EnumPriority,
)
from omnilearning.utils.ids import utc_now

# Learning rate every feedback item starts with, before type-specific impact
DEFAULT_LEARNING_RATE: float = 0.1


class ModelFeedbackImpact(BaseModel):
    """Bookkeeping of what processing a feedback item changed."""

    learning_rate: float = DEFAULT_LEARNING_RATE
    confidence_change: float = 0.0
    pattern_updates: list[str] = Field(default_factory=list)
    knowledge_updates: list[str] = Field(default_factory=list)


class ModelFeedbackAction(BaseModel):
    """Action derived from the winning rule."""

    type: EnumFeedbackActionType = EnumFeedbackActionType.NONE
    parameters: dict[str, Any] = Field(default_factory=dict)
    executed: bool = False


class ModelFeedbackItem(BaseModel):
    """A feedback item and its processing state.

    Status changes go through ``transition_to`` so the state machine in
    EnumFeedbackStatus is enforced; terminal items cannot move again.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str
    type: EnumFeedbackType
    data: dict[str, Any] = Field(default_factory=dict)
    status: EnumFeedbackStatus = EnumFeedbackStatus.PENDING
    priority: EnumPriority = EnumPriority.MEDIUM
    source: str = "unknown"
    target: str = "learning_system"
    created_at: datetime = Field(default_factory=utc_now)
    processed_at: datetime | None = None
    impact: ModelFeedbackImpact = Field(default_factory=ModelFeedbackImpact)
    action: ModelFeedbackAction = Field(default_factory=ModelFeedbackAction)
    error: str | None = None

    @property
    def processed(self) -> bool:
        """True once the item completed successfully."""
        return self.status is EnumFeedbackStatus.COMPLETED

    def transition_to(self, target: EnumFeedbackStatus) -> None:
        """Move the item to ``target``.

        Raises:
            ValueError: If the transition is not allowed from the current status.
        """
        if not self.status.can_transition_to(target):
            raise ValueError(
                f"Invalid feedback transition for {self.id}: "
                f"{self.status.value} -> {target.value}"
            )
        self.status = target
        if target.is_terminal:
            self.processed_at = utc_now()


class ModelFeedbackRule(BaseModel):
    """Static rule evaluated against a feedback item's payload.

    Attributes:
        id: Rule identifier.
        condition: Predicate expression, e.g. ``"confidence < 0.5"``.
        action: Action kind applied when the condition matches.
        priority: Lower values are evaluated first.
        active: Inactive rules are skipped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    condition: str = Field(min_length=1)
    action: EnumFeedbackRuleAction
    priority: int = 1
    active: bool = True


__all__ = [
    "DEFAULT_LEARNING_RATE",
    "ModelFeedbackAction",
    "ModelFeedbackImpact",
    "ModelFeedbackItem",
    "ModelFeedbackRule",
]
