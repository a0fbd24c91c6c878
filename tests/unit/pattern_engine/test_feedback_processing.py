# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for the feedback rule engine.

Feedback items move pending -> processing -> completed | failed exactly once;
the first active rule (by priority) whose condition matches decides the
confidence delta applied to the targeted pattern.
"""

from __future__ import annotations

import pytest

from omnilearning.enums import (
    EnumFeedbackActionType,
    EnumFeedbackRuleAction,
    EnumFeedbackStatus,
    EnumFeedbackType,
    EnumPriority,
)
from omnilearning.event_bus import EventBus
from omnilearning.models import ModelFeedbackItem, ModelFeedbackRule
from omnilearning.pattern_engine import FeedbackProcessor, PatternEngine, derive_action, select_rule
from omnilearning.pattern_engine.presets import DEFAULT_FEEDBACK_RULES, FEEDBACK_COLLECTION
from omnilearning.testing import MockPersistenceStore

pytestmark = pytest.mark.unit


async def _no_update(pattern_id: str, delta: float) -> bool:
    return False


# =============================================================================
# Rule Selection
# =============================================================================


class TestRuleSelection:
    """select_rule and derive_action are pure."""

    def test_low_confidence_matches_first_rule(self) -> None:
        rule = select_rule(DEFAULT_FEEDBACK_RULES, {"confidence": 0.3})

        assert rule is not None
        assert rule.id == "rule_1"

    def test_frequent_pattern_matches_second_rule(self) -> None:
        rule = select_rule(DEFAULT_FEEDBACK_RULES, {"occurrences": 12})

        assert rule is not None
        assert rule.action is EnumFeedbackRuleAction.INCREASE_CONFIDENCE

    def test_priority_order_wins_over_declaration_order(self) -> None:
        rules = [
            ModelFeedbackRule(
                id="late", condition="x > 0", action=EnumFeedbackRuleAction.INCREASE_CONFIDENCE, priority=5
            ),
            ModelFeedbackRule(
                id="early", condition="x > 0", action=EnumFeedbackRuleAction.REQUEST_FEEDBACK, priority=1
            ),
        ]

        rule = select_rule(rules, {"x": 1})

        assert rule is not None
        assert rule.id == "early"

    def test_inactive_rule_is_skipped(self) -> None:
        rules = [
            ModelFeedbackRule(
                id="off",
                condition="x > 0",
                action=EnumFeedbackRuleAction.REQUEST_FEEDBACK,
                active=False,
            )
        ]

        assert select_rule(rules, {"x": 1}) is None

    def test_no_match_yields_no_action(self) -> None:
        action = derive_action(select_rule(DEFAULT_FEEDBACK_RULES, {}), {})

        assert action.type is EnumFeedbackActionType.NONE
        assert action.parameters == {}

    def test_action_carries_delta_and_capped_confidence(self) -> None:
        payload = {"confidence": 0.45}
        action = derive_action(select_rule(DEFAULT_FEEDBACK_RULES, payload), payload)

        assert action.type is EnumFeedbackActionType.UPDATE_PATTERN
        assert action.parameters["confidence_delta"] == 0.1
        assert action.parameters["confidence"] == pytest.approx(0.55)
        assert action.parameters["rule_id"] == "rule_1"


# =============================================================================
# Processor State Machine
# =============================================================================


class TestFeedbackProcessor:
    """Status transitions and counters."""

    @pytest.mark.asyncio
    async def test_matching_item_completes_with_update_action(self) -> None:
        processor = FeedbackProcessor(_no_update)
        item = ModelFeedbackItem(id="feedback_1", type=EnumFeedbackType.USER, data={"confidence": 0.3})
        processor.enqueue(item)

        processed = await processor.process_pending()

        assert processed == [item]
        assert item.status is EnumFeedbackStatus.COMPLETED
        assert item.processed is True
        assert item.processed_at is not None
        assert item.action.type is EnumFeedbackActionType.UPDATE_PATTERN
        assert item.action.parameters["confidence_delta"] == 0.1
        assert item.impact.confidence_change == 0.1
        assert item.impact.learning_rate == 0.1
        assert processor.stats.completed == 1
        assert processor.stats.total_processed == 1

    @pytest.mark.asyncio
    async def test_uncomparable_payload_fails_item(self) -> None:
        processor = FeedbackProcessor(_no_update)
        bad = ModelFeedbackItem(id="feedback_bad", type=EnumFeedbackType.USER, data={"confidence": "high"})
        good = ModelFeedbackItem(id="feedback_good", type=EnumFeedbackType.USER, data={"confidence": 0.1})
        processor.enqueue(bad)
        processor.enqueue(good)

        await processor.process_pending()

        assert bad.status is EnumFeedbackStatus.FAILED
        assert bad.error is not None
        assert good.status is EnumFeedbackStatus.COMPLETED
        assert processor.stats.failed == 1
        assert processor.stats.completed == 1

    @pytest.mark.asyncio
    async def test_terminal_items_are_never_reprocessed(self) -> None:
        processor = FeedbackProcessor(_no_update)
        processor.enqueue(ModelFeedbackItem(id="feedback_1", type=EnumFeedbackType.SYSTEM))

        first = await processor.process_pending()
        second = await processor.process_pending()

        assert len(first) == 1
        assert second == []
        assert processor.stats.total_processed == 1

    @pytest.mark.asyncio
    async def test_learning_rate_follows_feedback_type(self) -> None:
        processor = FeedbackProcessor(_no_update)
        correction = ModelFeedbackItem(id="f_c", type=EnumFeedbackType.CORRECTION)
        reinforcement = ModelFeedbackItem(id="f_r", type=EnumFeedbackType.REINFORCEMENT)
        processor.enqueue(correction)
        processor.enqueue(reinforcement)

        await processor.process_pending()

        assert correction.impact.learning_rate == 0.2
        assert reinforcement.impact.learning_rate == 0.15

    def test_enqueue_rejects_non_pending_and_duplicates(self) -> None:
        processor = FeedbackProcessor(_no_update)
        item = ModelFeedbackItem(id="feedback_1", type=EnumFeedbackType.USER)
        processor.enqueue(item)

        with pytest.raises(ValueError):
            processor.enqueue(item)
        done = ModelFeedbackItem(
            id="feedback_2", type=EnumFeedbackType.USER, status=EnumFeedbackStatus.COMPLETED
        )
        with pytest.raises(ValueError):
            processor.enqueue(done)

    def test_invalid_transition_raises(self) -> None:
        item = ModelFeedbackItem(id="feedback_1", type=EnumFeedbackType.USER)

        with pytest.raises(ValueError):
            item.transition_to(EnumFeedbackStatus.COMPLETED)

    @pytest.mark.asyncio
    async def test_inactive_processor_does_nothing(self) -> None:
        processor = FeedbackProcessor(_no_update)
        processor.enqueue(ModelFeedbackItem(id="feedback_1", type=EnumFeedbackType.USER))
        processor.active = False

        assert await processor.process_pending() == []
        assert len(processor.pending()) == 1

    def test_add_rule_replaces_same_id(self) -> None:
        processor = FeedbackProcessor(_no_update)
        processor.add_rule(
            ModelFeedbackRule(
                id="rule_1",
                condition="confidence < 0.2",
                action=EnumFeedbackRuleAction.REQUEST_FEEDBACK,
                priority=1,
            )
        )

        assert [r.id for r in processor.rules] == ["rule_1", "rule_2"]
        assert processor.rules[0].condition == "confidence < 0.2"


# =============================================================================
# Engine Integration
# =============================================================================


class TestEngineFeedback:
    """Feedback loops through the engine update the targeted pattern."""

    @pytest.mark.asyncio
    async def test_feedback_raises_target_pattern_confidence(
        self, engine: PatternEngine, store: MockPersistenceStore
    ) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1}, confidence=0.5)
        item = await engine.add_feedback_loop(
            "user", {"confidence": 0.3, "pattern_id": pattern.id}, priority="high"
        )

        processed = await engine.process_feedback_loops()

        assert processed == [item]
        assert item.status is EnumFeedbackStatus.COMPLETED
        assert item.priority is EnumPriority.HIGH
        assert item.action.executed is True
        assert item.impact.pattern_updates == [pattern.id]
        assert pattern.confidence == pytest.approx(0.6)
        document = store.get(FEEDBACK_COLLECTION, item.id)
        assert document is not None
        assert document["status"] == "completed"

    @pytest.mark.asyncio
    async def test_feedback_for_unknown_pattern_still_completes(
        self, engine: PatternEngine
    ) -> None:
        item = await engine.add_feedback_loop("user", {"occurrences": 20, "pattern_id": "pattern_gone"})

        await engine.process_feedback_loops()

        assert item.status is EnumFeedbackStatus.COMPLETED
        assert item.action.executed is False
        assert item.impact.confidence_change == 0.2
        assert item.impact.pattern_updates == []

    @pytest.mark.asyncio
    async def test_feedback_request_event_queues_pending_item(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        await bus.publish_simple(
            "feedback_request",
            "review_panel",
            {"type": "correction", "data": {"confidence": 0.2}, "source": "review_panel"},
        )

        pending = engine.feedback.pending()
        assert len(pending) == 1
        assert pending[0].type is EnumFeedbackType.CORRECTION
        received = bus.get_event_history("feedback_received")
        assert len(received) == 1
        assert received[0].payload.feedback_id == pending[0].id

    @pytest.mark.asyncio
    async def test_unknown_feedback_type_is_rejected(self, engine: PatternEngine) -> None:
        with pytest.raises(ValueError):
            await engine.add_feedback_loop("gossip", {})

        assert engine.feedback.items == {}

    @pytest.mark.asyncio
    async def test_corrections_count_as_false_positives(self, engine: PatternEngine) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1}, confidence=0.5)
        await engine.learn_pattern("scroll", {"y": 2}, confidence=0.5)
        await engine.add_feedback_loop("correction", {"confidence": 0.3, "pattern_id": pattern.id})
        await engine.add_feedback_loop("correction", {"confidence": 0.3, "pattern_id": "pattern_gone"})
        await engine.add_feedback_loop("user", {"confidence": 0.3, "pattern_id": pattern.id})

        await engine.process_feedback_loops()

        assert engine.recognition.false_positives == 1
        assert engine.update_metrics().patterns.false_positive_rate == pytest.approx(0.5)
