# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Rule-driven feedback processing.

Feedback items are queued as ``pending`` and processed in batches by the
periodic feedback task. For each pending item:

1. status -> ``processing``
2. rules are evaluated in priority order; the first active rule whose
   condition matches the item's payload wins
3. the winning rule's action becomes an ``update_pattern`` action carrying a
   confidence delta; when the payload names a ``pattern_id`` the delta is
   applied to that pattern through the injected updater
4. the impact learning rate is set from the feedback type
5. status -> ``completed``

Any error on an item (including a rule that cannot be evaluated) moves that
item to ``failed`` with the error recorded; the rest of the batch proceeds.
Completed and failed items are never processed again.

Concurrency:
    ``process_pending`` is re-entry guarded by ``stats.is_processing``; a call
    made while a batch is running returns immediately.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from omnilearning.enums import (
    EnumFeedbackActionType,
    EnumFeedbackStatus,
)
from omnilearning.models import (
    ModelFeedbackAction,
    ModelFeedbackItem,
    ModelFeedbackProcessingStats,
    ModelFeedbackRule,
)
from omnilearning.pattern_engine.presets import (
    DEFAULT_FEEDBACK_RULES,
    FEEDBACK_TARGET_PATTERN_KEY,
    RULE_ACTION_CONFIDENCE_DELTAS,
    learning_rate_for,
)
from omnilearning.pattern_engine.rule_conditions import evaluate_condition

logger = logging.getLogger(__name__)

# (pattern_id, confidence_delta) -> whether the pattern was updated
PatternUpdater = Callable[[str, float], Awaitable[bool]]


def select_rule(
    rules: Iterable[ModelFeedbackRule], payload: Mapping[str, Any]
) -> ModelFeedbackRule | None:
    """First active rule, in priority order, whose condition matches ``payload``.

    Raises:
        RuleEvaluationError: If an evaluated condition is malformed or
            compares incomparable values.
    """
    for rule in sorted(rules, key=lambda r: r.priority):
        if rule.active and evaluate_condition(rule.condition, payload):
            return rule
    return None


def derive_action(
    rule: ModelFeedbackRule | None, payload: Mapping[str, Any]
) -> ModelFeedbackAction:
    """Action for the winning rule.

    ``parameters`` always carries ``confidence_delta``; ``confidence`` (the
    payload's confidence plus the delta, capped at 1.0) is added when the
    payload reports a numeric confidence.
    """
    if rule is None:
        return ModelFeedbackAction()
    delta = RULE_ACTION_CONFIDENCE_DELTAS.get(rule.action)
    if delta is None:
        return ModelFeedbackAction()
    parameters: dict[str, Any] = {"confidence_delta": delta, "rule_id": rule.id}
    base = payload.get("confidence")
    if isinstance(base, int | float) and not isinstance(base, bool):
        parameters["confidence"] = min(1.0, float(base) + delta)
    return ModelFeedbackAction(
        type=EnumFeedbackActionType.UPDATE_PATTERN,
        parameters=parameters,
    )


class FeedbackProcessor:
    """Queue of feedback items and the rule engine that processes them.

    Attributes:
        items: All items by id, in enqueue order.
        stats: Processing counters.
        active: When False, ``process_pending`` is a no-op.
    """

    def __init__(
        self,
        apply_pattern_update: PatternUpdater,
        rules: Iterable[ModelFeedbackRule] = DEFAULT_FEEDBACK_RULES,
    ) -> None:
        self._apply_pattern_update = apply_pattern_update
        self._rules: list[ModelFeedbackRule] = sorted(rules, key=lambda r: r.priority)
        self.items: dict[str, ModelFeedbackItem] = {}
        self.stats = ModelFeedbackProcessingStats()
        self.active = True

    @property
    def rules(self) -> list[ModelFeedbackRule]:
        return list(self._rules)

    def add_rule(self, rule: ModelFeedbackRule) -> None:
        """Add a rule, replacing any rule with the same id."""
        self._rules = sorted(
            [r for r in self._rules if r.id != rule.id] + [rule],
            key=lambda r: r.priority,
        )

    def enqueue(self, item: ModelFeedbackItem) -> None:
        """Queue a new item.

        Raises:
            ValueError: If the item is not pending or its id is already queued.
        """
        if item.status is not EnumFeedbackStatus.PENDING:
            raise ValueError(f"Only pending feedback can be queued: {item.id} is {item.status.value}")
        if item.id in self.items:
            raise ValueError(f"Feedback already queued: {item.id}")
        self.items[item.id] = item

    def pending(self) -> list[ModelFeedbackItem]:
        return [i for i in self.items.values() if i.status is EnumFeedbackStatus.PENDING]

    def by_status(self, status: EnumFeedbackStatus) -> list[ModelFeedbackItem]:
        return [i for i in self.items.values() if i.status is status]

    async def process_pending(self) -> list[ModelFeedbackItem]:
        """Process every pending item once.

        Returns:
            The items processed in this batch (completed or failed). Empty
            when inactive, when a batch is already running, or when nothing
            is pending.
        """
        if not self.active or self.stats.is_processing:
            return []
        batch = self.pending()
        if not batch:
            return []

        self.stats.is_processing = True
        self.stats.current_batch = len(batch)
        try:
            for item in batch:
                started = time.perf_counter()
                await self._process_item(item)
                elapsed_ms = (time.perf_counter() - started) * 1000.0
                self.stats.total_processed += 1
                self.stats.average_processing_time_ms += (
                    elapsed_ms - self.stats.average_processing_time_ms
                ) / self.stats.total_processed
        finally:
            self.stats.is_processing = False
            self.stats.current_batch = 0

        logger.info(
            f"Feedback batch processed | items={len(batch)} | "
            f"completed={sum(1 for i in batch if i.processed)} | "
            f"total_processed={self.stats.total_processed}"
        )
        return batch

    async def _process_item(self, item: ModelFeedbackItem) -> None:
        item.transition_to(EnumFeedbackStatus.PROCESSING)
        try:
            rule = select_rule(self._rules, item.data)
            action = derive_action(rule, item.data)
            item.action = action
            if action.type is EnumFeedbackActionType.UPDATE_PATTERN:
                delta = float(action.parameters["confidence_delta"])
                item.impact.confidence_change = delta
                target = item.data.get(FEEDBACK_TARGET_PATTERN_KEY)
                if isinstance(target, str) and target:
                    action.executed = await self._apply_pattern_update(target, delta)
                    if action.executed:
                        item.impact.pattern_updates.append(target)
            item.impact.learning_rate = learning_rate_for(item.type)
            item.transition_to(EnumFeedbackStatus.COMPLETED)
            self.stats.completed += 1
        except Exception as e:
            item.error = str(e)
            item.transition_to(EnumFeedbackStatus.FAILED)
            self.stats.failed += 1
            logger.warning(
                f"Feedback processing failed | feedback_id={item.id} | "
                f"type={item.type.value} | error={e}",
                exc_info=True,
            )


__all__ = [
    "FeedbackProcessor",
    "PatternUpdater",
    "derive_action",
    "select_rule",
]
