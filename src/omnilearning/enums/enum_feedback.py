# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Feedback enums for the pattern feedback loop.

This module contains the feedback item type, its processing status state
machine, the rule action kinds a FeedbackRule may name, and the action types
a processed item may carry.
"""

from enum import Enum


class EnumFeedbackType(str, Enum):
    """Origin of a feedback item."""

    USER = "user"
    SYSTEM = "system"
    PERFORMANCE = "performance"
    CORRECTION = "correction"
    REINFORCEMENT = "reinforcement"


class EnumFeedbackStatus(str, Enum):
    """Processing status for feedback items.

    Lifecycle Flow:
        PENDING → PROCESSING → COMPLETED | FAILED

    COMPLETED and FAILED are terminal. An item in a terminal state is never
    re-enqueued.

    Example:
        >>> EnumFeedbackStatus.PENDING.can_transition_to(EnumFeedbackStatus.PROCESSING)
        True
        >>> EnumFeedbackStatus.COMPLETED.can_transition_to(EnumFeedbackStatus.PENDING)
        False
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """True for COMPLETED and FAILED."""
        return self in (EnumFeedbackStatus.COMPLETED, EnumFeedbackStatus.FAILED)

    def can_transition_to(self, target: "EnumFeedbackStatus") -> bool:
        """Check if transition to target status is valid.

        Valid transitions:
            PENDING → PROCESSING
            PROCESSING → COMPLETED, FAILED
            COMPLETED → (none - terminal state)
            FAILED → (none - terminal state)

        Args:
            target: The target status to transition to.

        Returns:
            True if the transition is valid, False otherwise.
        """
        valid_transitions: dict[EnumFeedbackStatus, set[EnumFeedbackStatus]] = {
            EnumFeedbackStatus.PENDING: {EnumFeedbackStatus.PROCESSING},
            EnumFeedbackStatus.PROCESSING: {
                EnumFeedbackStatus.COMPLETED,
                EnumFeedbackStatus.FAILED,
            },
            EnumFeedbackStatus.COMPLETED: set(),
            EnumFeedbackStatus.FAILED: set(),
        }
        return target in valid_transitions.get(self, set())


class EnumFeedbackRuleAction(str, Enum):
    """Action kind named by a FeedbackRule."""

    REQUEST_FEEDBACK = "request_feedback"
    INCREASE_CONFIDENCE = "increase_confidence"


class EnumFeedbackActionType(str, Enum):
    """Action derived for a processed feedback item."""

    NONE = "none"
    UPDATE_PATTERN = "update_pattern"


__all__ = [
    "EnumFeedbackActionType",
    "EnumFeedbackRuleAction",
    "EnumFeedbackStatus",
    "EnumFeedbackType",
]
