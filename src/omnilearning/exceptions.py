# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Exceptions for the adaptive learning core.

All exceptions derive from OmniLearningError so callers can catch the whole
family with a single clause. Only the analytics errors and payload validation
errors are expected to reach callers; everything else is caught, logged, and
turned into a status change by the component that owns it.

Error Codes:
    - LEARN_001: InsufficientDataError - series below minimum sample size
    - LEARN_002: UnknownModelError - no active model of the requested type
    - LEARN_003: RuleEvaluationError - feedback rule predicate could not be evaluated
    - LEARN_004: PersistenceError - persistence collaborator failed
    - LEARN_005: EventPayloadValidationError - published payload is malformed
"""

from __future__ import annotations


class OmniLearningError(Exception):
    """Base class for all adaptive learning core errors."""


class AnalyticsError(OmniLearningError):
    """Base class for errors surfaced by predictive analytics calls."""


class InsufficientDataError(AnalyticsError):
    """Raised when analysis or forecasting is requested below the minimum sample size.

    Error code: LEARN_001 (non-recoverable, never retried automatically).

    Attributes:
        series_id: The series that was too short.
        required: Minimum number of points for the operation.
        available: Number of points currently stored.

    Example:
        >>> raise InsufficientDataError("cpu", required=10, available=9)
        InsufficientDataError: Insufficient data for series 'cpu': 9 points, need 10
    """

    def __init__(self, series_id: str, *, required: int, available: int) -> None:
        self.series_id = series_id
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient data for series '{series_id}': "
            f"{available} points, need {required}"
        )


class UnknownModelError(AnalyticsError):
    """Raised when a forecast names a model type with no active registered model.

    Error code: LEARN_002 (surfaced immediately).
    """

    def __init__(self, model_type: str) -> None:
        self.model_type = model_type
        super().__init__(f"No available model of type: {model_type}")


class RuleEvaluationError(OmniLearningError):
    """Raised when a feedback rule condition cannot be parsed or evaluated.

    Error code: LEARN_003. The feedback processor catches this and moves the
    offending item to ``failed``; the rest of the batch proceeds.
    """


class PersistenceError(OmniLearningError):
    """Raised by persistence collaborators when save or load fails.

    Error code: LEARN_004. Services catch this, log it, and continue in
    degraded (in-memory only) mode.
    """


class EventPayloadValidationError(OmniLearningError):
    """Raised at publish time when a known event type carries a malformed payload.

    Error code: LEARN_005.
    """

    def __init__(self, event_type: str, detail: str) -> None:
        self.event_type = event_type
        super().__init__(f"Invalid payload for event '{event_type}': {detail}")


__all__ = [
    "AnalyticsError",
    "EventPayloadValidationError",
    "InsufficientDataError",
    "OmniLearningError",
    "PersistenceError",
    "RuleEvaluationError",
    "UnknownModelError",
]
