# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for PatternEngine pattern learning, persistence and bus handlers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from omnilearning.enums import EnumAlgorithmType, EnumModelStatus
from omnilearning.event_bus import EventBus
from omnilearning.exceptions import EventPayloadValidationError
from omnilearning.models.events import (
    ModelPatternLearnedPayload,
    ModelPatternUpdatedPayload,
)
from omnilearning.pattern_engine import PatternEngine
from omnilearning.pattern_engine.presets import ENGINE_SOURCE, PATTERNS_COLLECTION
from omnilearning.testing import EventRecorder, MockPersistenceStore

pytestmark = pytest.mark.unit


# =============================================================================
# Lifecycle
# =============================================================================


class TestLifecycle:
    """initialize/shutdown manage subscriptions and announce readiness."""

    @pytest.mark.asyncio
    async def test_initialize_announces_features(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        events = bus.get_event_history("learning_initialized")

        assert len(events) == 1
        assert events[0].source == ENGINE_SOURCE
        assert "pattern_recognition" in events[0].payload.features
        assert engine.is_initialized is True

    @pytest.mark.asyncio
    async def test_initialize_is_idempotent(self, engine: PatternEngine, bus: EventBus) -> None:
        subscriptions_before = len(bus.get_active_subscriptions())

        await engine.initialize()

        assert len(bus.get_active_subscriptions()) == subscriptions_before
        assert len(bus.get_event_history("learning_initialized")) == 1

    @pytest.mark.asyncio
    async def test_shutdown_removes_subscriptions(self, bus: EventBus) -> None:
        engine = PatternEngine(bus)
        await engine.initialize()
        assert bus.get_subscription_count("learning_pattern") == 1

        await engine.shutdown()

        assert bus.get_active_subscriptions() == []
        assert engine.is_initialized is False


# =============================================================================
# Learning Patterns
# =============================================================================


class TestLearnPattern:
    """First observations create patterns; repeats update them."""

    @pytest.mark.asyncio
    async def test_new_pattern_is_stored_and_announced(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        pattern = await engine.learn_pattern(
            "user_interaction", {"component": "button", "clicks": 3}, sources=["ui"]
        )

        assert engine.get_pattern(pattern.id) is pattern
        assert pattern.occurrences == 1
        assert pattern.confidence == 0.5
        assert pattern.sources == ["ui"]
        assert {f.name for f in pattern.features} == {"component", "clicks", "timestamp"}

        learned = bus.get_event_history("pattern_learned")
        assert len(learned) == 1
        payload = learned[0].payload
        assert isinstance(payload, ModelPatternLearnedPayload)
        assert payload.pattern_id == pattern.id
        assert payload.features == 3
        assert engine.recognition.patterns_detected == 1

    @pytest.mark.asyncio
    async def test_repeat_observation_updates_existing_pattern(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        first = await engine.learn_pattern("click", {"x": 1, "y": 2}, confidence=0.4)
        again = await engine.learn_pattern("click", {"y": 2, "x": 1}, confidence=0.7)

        assert again is first
        assert len(engine.patterns) == 1
        assert first.occurrences == 2
        assert first.confidence == 0.7
        assert engine.recognition.patterns_detected == 1

        updated = bus.get_event_history("pattern_updated")
        assert len(updated) == 1
        assert isinstance(updated[0].payload, ModelPatternUpdatedPayload)
        assert updated[0].payload.occurrences == 2

    @pytest.mark.asyncio
    async def test_repeat_never_lowers_confidence(self, engine: PatternEngine) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1}, confidence=0.9)
        await engine.learn_pattern("click", {"x": 1}, confidence=0.2)

        assert pattern.confidence == 0.9

    @pytest.mark.asyncio
    async def test_same_data_different_type_is_a_new_pattern(
        self, engine: PatternEngine
    ) -> None:
        a = await engine.learn_pattern("click", {"x": 1})
        b = await engine.learn_pattern("hover", {"x": 1})

        assert a.id != b.id
        assert [p.id for p in engine.get_patterns_by_type("hover")] == [b.id]

    @pytest.mark.asyncio
    async def test_similar_same_type_patterns_are_linked(self, engine: PatternEngine) -> None:
        first = await engine.learn_pattern("metric", {"x": 1, "y": 2})
        second = await engine.learn_pattern("metric", {"x": 2, "y": 4})

        assert [s.pattern_id for s in second.similarity] == [first.id]
        assert second.similarity[0].score == pytest.approx(1.0)
        assert second.prediction.confidence == pytest.approx(0.56)
        assert first.prediction.confidence == pytest.approx(0.5)

    @pytest.mark.asyncio
    async def test_confidence_outside_range_is_rejected(self, engine: PatternEngine) -> None:
        with pytest.raises(ValidationError):
            await engine.learn_pattern("click", {"x": 1}, confidence=1.5)

    @pytest.mark.asyncio
    async def test_patterns_by_type_sorted_by_confidence(self, engine: PatternEngine) -> None:
        low = await engine.learn_pattern("click", {"x": 1}, confidence=0.2)
        high = await engine.learn_pattern("click", {"x": 2}, confidence=0.9)

        assert [p.id for p in engine.get_patterns_by_type("click")] == [high.id, low.id]


# =============================================================================
# Updating Patterns
# =============================================================================


class TestUpdatePattern:
    """update_pattern merges data and only raises confidence, capped at 1.0."""

    @pytest.mark.asyncio
    async def test_update_merges_data_and_raises_confidence(
        self, engine: PatternEngine
    ) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1})

        assert await engine.update_pattern(pattern.id, {"y": 2}, 0.1) is True

        assert pattern.data == {"x": 1, "y": 2}
        assert pattern.confidence == pytest.approx(0.6)
        assert pattern.occurrences == 2

    @pytest.mark.asyncio
    async def test_confidence_is_capped_at_one(self, engine: PatternEngine) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1}, confidence=0.95)

        await engine.update_pattern(pattern.id, confidence_delta=0.2)

        assert pattern.confidence == 1.0

    @pytest.mark.asyncio
    async def test_negative_delta_does_not_lower_confidence(
        self, engine: PatternEngine
    ) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1}, confidence=0.6)

        await engine.update_pattern(pattern.id, confidence_delta=-0.3)

        assert pattern.confidence == 0.6

    @pytest.mark.asyncio
    async def test_unknown_pattern_returns_false(self, engine: PatternEngine) -> None:
        assert await engine.update_pattern("pattern_missing", {"x": 1}) is False

    @pytest.mark.asyncio
    async def test_updated_data_is_found_by_later_observation(
        self, engine: PatternEngine
    ) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1})
        await engine.update_pattern(pattern.id, {"y": 2})

        again = await engine.learn_pattern("click", {"x": 1, "y": 2})

        assert again is pattern
        assert len(engine.patterns) == 1


# =============================================================================
# Persistence
# =============================================================================


class TestPersistence:
    """Checkpointing, restore and degraded mode."""

    @pytest.mark.asyncio
    async def test_learned_pattern_is_checkpointed(
        self, engine: PatternEngine, store: MockPersistenceStore
    ) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1})

        document = store.get(PATTERNS_COLLECTION, pattern.id)
        assert document is not None
        assert document["type"] == "click"
        assert document["data"] == {"x": 1}

    @pytest.mark.asyncio
    async def test_pattern_is_restored_from_store(
        self, engine: PatternEngine, bus: EventBus, store: MockPersistenceStore
    ) -> None:
        pattern = await engine.learn_pattern("click", {"x": 1}, confidence=0.5)
        fresh = PatternEngine(bus, store=store)

        assert await fresh.update_pattern(pattern.id, confidence_delta=0.2) is True

        restored = fresh.get_pattern(pattern.id)
        assert restored is not None
        assert restored.confidence == pytest.approx(0.7)
        assert restored.occurrences == 2

    @pytest.mark.asyncio
    async def test_save_failures_degrade_without_raising(
        self, engine: PatternEngine, store: MockPersistenceStore
    ) -> None:
        store.fail_saves = True

        pattern = await engine.learn_pattern("click", {"x": 1})

        assert engine.get_pattern(pattern.id) is pattern
        assert engine.degraded is True
        assert store.get(PATTERNS_COLLECTION, pattern.id) is None

        store.fail_saves = False
        await engine.learn_pattern("click", {"x": 2})

        assert engine.degraded is False

    @pytest.mark.asyncio
    async def test_load_failure_is_treated_as_missing(
        self, bus: EventBus, store: MockPersistenceStore
    ) -> None:
        store.fail_loads = True
        engine = PatternEngine(bus, store=store)

        assert await engine.update_pattern("pattern_elsewhere", confidence_delta=0.1) is False

    @pytest.mark.asyncio
    async def test_engine_without_store_keeps_memory_only(self, bus: EventBus) -> None:
        engine = PatternEngine(bus)

        pattern = await engine.learn_pattern("click", {"x": 1})

        assert engine.get_pattern(pattern.id) is pattern
        assert engine.degraded is False


# =============================================================================
# Algorithms and Metrics
# =============================================================================


class TestAlgorithmsAndMetrics:
    """Algorithm descriptors feed the periodic metrics rollup."""

    @pytest.mark.asyncio
    async def test_register_algorithm_publishes_event(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        algorithm = await engine.register_algorithm(
            EnumAlgorithmType.SUPERVISED, "Classifier", performance=0.7
        )

        assert algorithm.status is EnumModelStatus.INACTIVE
        events = bus.get_event_history("algorithm_registered")
        assert events[0].payload.algorithm_id == algorithm.id

    @pytest.mark.asyncio
    async def test_update_metrics_rolls_up_counters(self, engine: PatternEngine) -> None:
        await engine.learn_pattern("click", {"x": 1}, confidence=0.4)
        await engine.learn_pattern("click", {"x": 2}, confidence=0.8)
        algorithm = await engine.register_algorithm("ensemble", "Blend")
        assert engine.set_algorithm_status(algorithm.id, EnumModelStatus.ACTIVE, 0.8) is True
        await engine.register_algorithm("deep", "Idle")

        metrics = engine.update_metrics()

        assert metrics.overall.total_patterns == 2
        assert metrics.patterns.recognition_rate == pytest.approx(1.0)
        assert metrics.patterns.accuracy == pytest.approx(0.6)
        assert metrics.algorithms.active_algorithms == 1
        assert metrics.algorithms.average_performance == pytest.approx(0.8)
        assert engine.metrics is metrics

    def test_set_status_of_unknown_algorithm(self, bus: EventBus) -> None:
        engine = PatternEngine(bus)

        assert engine.set_algorithm_status("algorithm_missing", EnumModelStatus.ACTIVE) is False

    @pytest.mark.asyncio
    async def test_training_report_keeps_omitted_values(self, engine: PatternEngine) -> None:
        algorithm = await engine.register_algorithm("deep", "Neural Network")
        engine.update_algorithm_training(algorithm.id, "training", progress=50, accuracy=0.75)

        assert engine.update_algorithm_training(algorithm.id, "completed") is True

        assert algorithm.training.is_training is False
        assert algorithm.training.progress == 50
        assert algorithm.training.accuracy == 0.75

    def test_training_report_for_unknown_algorithm(self, bus: EventBus) -> None:
        engine = PatternEngine(bus)

        assert engine.update_algorithm_training("algorithm_missing", "training") is False


# =============================================================================
# Bus Handlers
# =============================================================================


class TestBusHandlers:
    """Inbound events drive the engine's operations."""

    @pytest.mark.asyncio
    async def test_learning_pattern_event(self, engine: PatternEngine, bus: EventBus) -> None:
        await bus.publish_simple(
            "learning_pattern",
            "panel",
            {"type": "navigation", "data": {"page": "home"}, "confidence": 0.6},
        )

        patterns = engine.get_patterns_by_type("navigation")
        assert len(patterns) == 1
        assert patterns[0].sources == ["panel"]
        assert patterns[0].confidence == 0.6

    @pytest.mark.asyncio
    async def test_ui_event_becomes_pattern_of_event_type(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        await bus.publish_simple(
            "user_interaction", "toolbar", {"component": "button", "action": "click"}
        )

        patterns = engine.get_patterns_by_type("user_interaction")
        assert len(patterns) == 1
        assert patterns[0].data == {"component": "button", "action": "click"}

    @pytest.mark.asyncio
    async def test_invalid_learning_pattern_is_rejected_at_publish(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        with pytest.raises(EventPayloadValidationError):
            await bus.publish_simple(
                "learning_pattern", "panel", {"type": "x", "confidence": 1.5}
            )

        assert engine.patterns == {}

    @pytest.mark.asyncio
    async def test_knowledge_update_event_creates_node(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        await bus.publish_simple(
            "knowledge_update",
            "panel",
            {"type": "shortcut", "content": {"keys": "ctrl+s"}, "isPublic": True},
        )

        nodes = engine.get_knowledge_by_type("shortcut")
        assert len(nodes) == 1
        assert nodes[0].sharing.is_public is True
        assert len(bus.get_event_history("knowledge_created")) == 1

    @pytest.mark.asyncio
    async def test_performance_update_event_merges_snapshot(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        await bus.publish_simple(
            "performance_update", "monitor", {"accuracy": 0.9, "overall": {"latency": 12.0}}
        )
        await bus.publish_simple("performance_metric", "monitor", {"responseTime": 40.0})

        assert engine.performance.accuracy == 0.9
        assert engine.performance.response_time == 40.0
        assert engine.performance.overall == {"latency": 12.0}

    @pytest.mark.asyncio
    async def test_algorithm_training_event_updates_algorithm(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        algorithm = await engine.register_algorithm(EnumAlgorithmType.DEEP, "Neural Network")
        registered_at = algorithm.last_run

        await bus.publish_simple(
            "algorithm_training",
            "trainer",
            {"algorithmId": algorithm.id, "status": "training", "progress": 50, "accuracy": 0.75},
        )

        assert algorithm.training.is_training is True
        assert algorithm.training.progress == 50
        assert algorithm.training.accuracy == 0.75
        assert algorithm.last_run >= registered_at

    @pytest.mark.asyncio
    async def test_algorithm_training_for_unknown_algorithm_is_ignored(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        await bus.publish_simple(
            "algorithm_training", "trainer", {"algorithmId": "algorithm_missing", "status": "training"}
        )

        assert engine.algorithms == {}
        assert bus.get_subscription_count("algorithm_training") == 1

    @pytest.mark.asyncio
    async def test_engine_does_not_consume_its_own_events(
        self, engine: PatternEngine, bus: EventBus
    ) -> None:
        recorder = EventRecorder()
        bus.subscribe("feedback_received", recorder)

        await engine.add_feedback_loop("user", {"confidence": 0.3})
        await bus.drain()

        assert len(recorder.events) == 1
        assert len(engine.feedback.items) == 1
        assert bus.get_subscription_count("feedback_received") == 1

    @pytest.mark.asyncio
    async def test_stats_snapshot(self, engine: PatternEngine) -> None:
        await engine.learn_pattern("click", {"x": 1})

        stats = engine.get_stats()

        assert stats["patterns"] == 1
        assert stats["initialized"] is True
        assert stats["degraded"] is False
