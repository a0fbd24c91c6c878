# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Pattern & Feedback Engine.

The engine learns confidence-scored patterns from observations, runs the
feedback rule engine, keeps knowledge nodes and shares the public ones, and
rolls up learning metrics. It is a subscriber of the EventBus and publishes
its own results back onto the same bus.

Subscriptions (installed by ``initialize``):
    learning_pattern, pattern_recognition      -> learn_pattern
    feedback_request                           -> add_feedback_loop
    knowledge_update                           -> add_knowledge_node
    knowledge_sharing                          -> received counter
    algorithm_training                         -> algorithm training state
    performance_update, performance_metric     -> performance snapshot
    user_interaction, ui_state_change,
    accessibility_request                      -> learn a pattern of that type

Publications:
    pattern_learned, pattern_updated, feedback_received, knowledge_created,
    knowledge_shared, algorithm_registered, learning_initialized

Periodic work (driven by the runtime scheduler):
    process_feedback_loops, update_metrics, share_knowledge

Persistence:
    Patterns, feedback items and knowledge nodes are checkpointed through an
    optional ProtocolPersistenceStore. A failed checkpoint is logged and puts
    the engine into degraded mode (in-memory only); engine operations never
    raise because of persistence. The next successful checkpoint clears the
    flag.

Concurrency:
    Single asyncio event loop, no locks. Every mutation happens inside a
    coroutine on the loop; periodic operations carry their own re-entry
    guards.

Usage:
    bus = EventBus()
    engine = PatternEngine(bus, store=MockPersistenceStore())
    await engine.initialize()
    pattern = await engine.learn_pattern("click", {"x": 10, "button": "ok"}, ["ui"])
    await engine.shutdown()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ValidationError

from omnilearning.enums import (
    EnumAlgorithmType,
    EnumFeedbackStatus,
    EnumFeedbackType,
    EnumLearningEventType,
    EnumModelStatus,
    EnumPriority,
    EnumSharingProtocolType,
)
from omnilearning.exceptions import OmniLearningError
from omnilearning.models import (
    ModelEvent,
    ModelFeedbackItem,
    ModelFeedbackRule,
    ModelKnowledgeNode,
    ModelKnowledgeSharing,
    ModelLearningAlgorithm,
    ModelLearningMetrics,
    ModelPattern,
    ModelPatternFeature,
    ModelPerformanceSnapshot,
    ModelRecognitionStatistics,
    ModelRecognitionThresholds,
    ModelSharingProtocol,
    ModelSubscription,
)
from omnilearning.models.events import (
    ModelAlgorithmRegisteredPayload,
    ModelAlgorithmTrainingPayload,
    ModelFeedbackReceivedPayload,
    ModelFeedbackRequestPayload,
    ModelKnowledgeCreatedPayload,
    ModelKnowledgeSharingPayload,
    ModelKnowledgeUpdatePayload,
    ModelLearningInitializedPayload,
    ModelLearningPatternPayload,
    ModelPatternLearnedPayload,
    ModelPatternUpdatedPayload,
    ModelPerformanceUpdatePayload,
    ModelUiEventPayload,
)
from omnilearning.pattern_engine.feedback_processor import FeedbackProcessor
from omnilearning.pattern_engine.features import (
    build_prediction,
    canonical_data_key,
    extract_features,
    find_similar_patterns,
)
from omnilearning.pattern_engine.knowledge_sharing import KnowledgeSharing
from omnilearning.pattern_engine.metrics import compute_learning_metrics
from omnilearning.pattern_engine.presets import (
    DEFAULT_FEEDBACK_RULES,
    DEFAULT_SHARING_PROTOCOLS,
    ENGINE_FEATURES,
    ENGINE_SOURCE,
    FEEDBACK_COLLECTION,
    KNOWLEDGE_COLLECTION,
    MAX_SIMILAR_PATTERNS,
    PATTERNS_COLLECTION,
)
from omnilearning.utils.checkpoint import checkpoint_entity, restore_entity
from omnilearning.utils.ids import epoch_ms, generate_id, utc_now

if TYPE_CHECKING:
    from omnilearning.event_bus import EventBus
    from omnilearning.protocols import ProtocolPersistenceStore

logger = logging.getLogger(__name__)

_UI_EVENT_TYPES: tuple[EnumLearningEventType, ...] = (
    EnumLearningEventType.USER_INTERACTION,
    EnumLearningEventType.UI_STATE_CHANGE,
    EnumLearningEventType.ACCESSIBILITY_REQUEST,
)


class PatternEngine:
    """Pattern recognition, feedback, knowledge sharing and metrics.

    Attributes:
        thresholds: Recognition thresholds; ``similarity`` gates the
            similarity list of new patterns.
        patterns: Learned patterns by id, in learn order.
        recognition: Raw recognition counters.
        feedback: The feedback queue and rule engine.
        knowledge: Knowledge nodes and sharing state.
        algorithms: Registered algorithm descriptors by id.
        metrics: Latest rollup, written only by ``update_metrics``.
        performance: Latest performance snapshot reported on the bus.
        degraded: True while persistence is failing.
    """

    def __init__(
        self,
        bus: EventBus,
        *,
        store: ProtocolPersistenceStore | None = None,
        thresholds: ModelRecognitionThresholds | None = None,
        rules: Iterable[ModelFeedbackRule] = DEFAULT_FEEDBACK_RULES,
        protocols: Iterable[ModelSharingProtocol] = DEFAULT_SHARING_PROTOCOLS,
        sharing_protocol: EnumSharingProtocolType = EnumSharingProtocolType.PUSH,
        max_similar_patterns: int = MAX_SIMILAR_PATTERNS,
    ) -> None:
        self._bus = bus
        self._store = store
        self.thresholds = thresholds or ModelRecognitionThresholds()
        self.max_similar_patterns = max_similar_patterns

        self.patterns: dict[str, ModelPattern] = {}
        self._pattern_keys: dict[str, str] = {}
        self.recognition = ModelRecognitionStatistics()
        self.feedback = FeedbackProcessor(self._apply_feedback_update, rules)
        self.knowledge = KnowledgeSharing(bus, protocols, sharing_protocol)
        self.algorithms: dict[str, ModelLearningAlgorithm] = {}
        self.metrics = ModelLearningMetrics()
        self.performance = ModelPerformanceSnapshot()
        self.degraded = False

        self._subscriptions: list[ModelSubscription] = []
        self._initialized = False

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Subscribe to the inbound vocabulary and announce readiness.

        Idempotent: a second call does nothing.
        """
        if self._initialized:
            return
        handlers: list[tuple[EnumLearningEventType, Any]] = [
            (EnumLearningEventType.LEARNING_PATTERN, self._on_learning_pattern),
            (EnumLearningEventType.PATTERN_RECOGNITION, self._on_learning_pattern),
            (EnumLearningEventType.FEEDBACK_REQUEST, self._on_feedback_request),
            (EnumLearningEventType.KNOWLEDGE_UPDATE, self._on_knowledge_update),
            (EnumLearningEventType.KNOWLEDGE_SHARING, self._on_knowledge_sharing),
            (EnumLearningEventType.ALGORITHM_TRAINING, self._on_algorithm_training),
            (EnumLearningEventType.PERFORMANCE_UPDATE, self._on_performance_update),
            (EnumLearningEventType.PERFORMANCE_METRIC, self._on_performance_update),
            *((t, self._on_ui_event) for t in _UI_EVENT_TYPES),
        ]
        for event_type, handler in handlers:
            self._subscriptions.append(self._bus.subscribe(event_type.value, handler))
        self._initialized = True

        logger.info(
            f"Pattern engine initialized | subscriptions={len(self._subscriptions)} | "
            f"rules={len(self.feedback.rules)} | "
            f"sharing_protocol={self.knowledge.protocol_type.value} | "
            f"persistence={'enabled' if self._store is not None else 'disabled'}"
        )
        await self._publish(
            EnumLearningEventType.LEARNING_INITIALIZED,
            ModelLearningInitializedPayload(
                timestamp=epoch_ms(), features=list(ENGINE_FEATURES)
            ),
        )

    async def shutdown(self) -> None:
        """Remove the engine's subscriptions. State is kept."""
        for subscription in self._subscriptions:
            self._bus.unsubscribe(subscription.id)
        self._subscriptions.clear()
        self._initialized = False
        logger.info("Pattern engine shut down")

    # =========================================================================
    # Patterns
    # =========================================================================

    async def learn_pattern(
        self,
        pattern_type: str,
        data: Mapping[str, Any] | None,
        sources: Iterable[str] = (),
        confidence: float = 0.5,
        features: list[ModelPatternFeature] | None = None,
    ) -> ModelPattern:
        """Learn an observation of ``pattern_type``.

        The first observation of a ``(type, data)`` combination creates a
        pattern and publishes ``pattern_learned``. A repeat increments
        ``occurrences``, refreshes ``last_seen``, raises confidence to
        ``confidence`` if that is higher (never lowers it), and publishes
        ``pattern_updated``.

        Raises:
            ValidationError: If ``confidence`` is outside [0.0, 1.0].
        """
        data = dict(data or {})
        key = canonical_data_key(pattern_type, data)
        existing_id = self._pattern_keys.get(key)
        if existing_id is not None:
            return await self._observe_repeat(self.patterns[existing_id], sources, confidence)

        similar = find_similar_patterns(
            data,
            (p for p in self.patterns.values() if p.type == pattern_type),
            threshold=self.thresholds.similarity,
            limit=self.max_similar_patterns,
        )
        pattern = ModelPattern(
            id=generate_id("pattern"),
            type=pattern_type,
            data=data,
            confidence=confidence,
            sources=list(dict.fromkeys(sources)),
            features=features if features is not None else extract_features(data),
            similarity=similar,
            prediction=build_prediction(len(similar)),
        )
        self._store_pattern(pattern)

        stats = self.recognition
        stats.patterns_detected += 1
        stats.average_confidence += (
            pattern.confidence - stats.average_confidence
        ) / stats.patterns_detected

        await self._checkpoint(PATTERNS_COLLECTION, pattern.id, pattern)
        logger.debug(
            f"Pattern learned | pattern_id={pattern.id} | type={pattern_type} | "
            f"confidence={pattern.confidence:.3f} | similar={len(similar)}"
        )
        await self._publish(
            EnumLearningEventType.PATTERN_LEARNED,
            ModelPatternLearnedPayload(
                pattern_id=pattern.id,
                type=pattern.type,
                confidence=pattern.confidence,
                features=len(pattern.features),
            ),
        )
        return pattern

    async def _observe_repeat(
        self, pattern: ModelPattern, sources: Iterable[str], confidence: float
    ) -> ModelPattern:
        pattern.occurrences += 1
        pattern.last_seen = utc_now()
        pattern.confidence = max(pattern.confidence, confidence)
        pattern.sources = list(dict.fromkeys([*pattern.sources, *sources]))
        await self._checkpoint(PATTERNS_COLLECTION, pattern.id, pattern)
        await self._publish_pattern_updated(pattern)
        return pattern

    async def update_pattern(
        self,
        pattern_id: str,
        new_data: Mapping[str, Any] | None = None,
        confidence_delta: float = 0.0,
    ) -> bool:
        """Merge ``new_data`` into a pattern and raise its confidence.

        Confidence becomes ``min(1.0, max(existing, existing + delta))``:
        updates never lower confidence and never leave [0.0, 1.0].
        An id unknown in memory is looked up in the persistence store.

        Returns:
            True if the pattern was updated, False if it does not exist.
        """
        pattern = self.patterns.get(pattern_id) or await self._restore_pattern(pattern_id)
        if pattern is None:
            return False

        if new_data:
            old_key = canonical_data_key(pattern.type, pattern.data)
            pattern.data = {**pattern.data, **new_data}
            new_key = canonical_data_key(pattern.type, pattern.data)
            if new_key != old_key:
                if self._pattern_keys.get(old_key) == pattern.id:
                    del self._pattern_keys[old_key]
                self._pattern_keys.setdefault(new_key, pattern.id)

        current = pattern.confidence
        pattern.confidence = min(1.0, max(current, current + confidence_delta))
        pattern.occurrences += 1
        pattern.last_seen = utc_now()

        await self._checkpoint(PATTERNS_COLLECTION, pattern.id, pattern)
        await self._publish_pattern_updated(pattern)
        return True

    def get_pattern(self, pattern_id: str) -> ModelPattern | None:
        return self.patterns.get(pattern_id)

    def get_patterns_by_type(self, pattern_type: str) -> list[ModelPattern]:
        """Patterns of ``pattern_type``, highest confidence first."""
        return sorted(
            (p for p in self.patterns.values() if p.type == pattern_type),
            key=lambda p: p.confidence,
            reverse=True,
        )

    def _store_pattern(self, pattern: ModelPattern) -> None:
        self.patterns[pattern.id] = pattern
        self._pattern_keys.setdefault(canonical_data_key(pattern.type, pattern.data), pattern.id)

    async def _restore_pattern(self, pattern_id: str) -> ModelPattern | None:
        document = await restore_entity(self._store, PATTERNS_COLLECTION, pattern_id)
        if document is None:
            return None
        try:
            pattern = ModelPattern.model_validate(document)
        except ValidationError as e:
            logger.warning(f"Stored pattern is invalid | pattern_id={pattern_id} | error={e}")
            return None
        self._store_pattern(pattern)
        logger.info(f"Pattern restored from store | pattern_id={pattern_id}")
        return pattern

    async def _publish_pattern_updated(self, pattern: ModelPattern) -> None:
        await self._publish(
            EnumLearningEventType.PATTERN_UPDATED,
            ModelPatternUpdatedPayload(
                pattern_id=pattern.id,
                confidence=pattern.confidence,
                occurrences=pattern.occurrences,
            ),
        )

    # =========================================================================
    # Feedback
    # =========================================================================

    async def add_feedback_loop(
        self,
        feedback_type: EnumFeedbackType | str,
        data: Mapping[str, Any] | None = None,
        priority: EnumPriority | str = EnumPriority.MEDIUM,
        source: str = "unknown",
        target: str = "learning_system",
    ) -> ModelFeedbackItem:
        """Queue a feedback item as pending and publish ``feedback_received``.

        Raises:
            ValueError: If ``feedback_type`` or ``priority`` is not a known value.
        """
        item = ModelFeedbackItem(
            id=generate_id("feedback"),
            type=EnumFeedbackType(feedback_type),
            data=dict(data or {}),
            priority=EnumPriority(priority),
            source=source,
            target=target,
        )
        self.feedback.enqueue(item)
        await self._checkpoint(FEEDBACK_COLLECTION, item.id, item)
        await self._publish(
            EnumLearningEventType.FEEDBACK_RECEIVED,
            ModelFeedbackReceivedPayload(
                feedback_id=item.id,
                type=item.type,
                priority=item.priority,
                source=item.source,
                target=item.target,
            ),
        )
        return item

    async def process_feedback_loops(self) -> list[ModelFeedbackItem]:
        """Run the rule engine over all pending feedback (periodic task).

        A completed correction that adjusted a pattern counts as one false
        positive of the recognizer.

        Returns:
            The items processed by this call.
        """
        processed = await self.feedback.process_pending()
        for item in processed:
            if (
                item.status is EnumFeedbackStatus.COMPLETED
                and item.type is EnumFeedbackType.CORRECTION
                and item.impact.pattern_updates
            ):
                self.recognition.false_positives += 1
            await self._checkpoint(FEEDBACK_COLLECTION, item.id, item)
        return processed

    async def _apply_feedback_update(self, pattern_id: str, confidence_delta: float) -> bool:
        return await self.update_pattern(pattern_id, None, confidence_delta)

    # =========================================================================
    # Knowledge
    # =========================================================================

    async def add_knowledge_node(
        self,
        knowledge_type: str,
        content: Any = None,
        relationships: Iterable[str] = (),
        confidence: float = 0.5,
        is_public: bool = False,
    ) -> ModelKnowledgeNode:
        """Store a knowledge node and publish ``knowledge_created``."""
        node = ModelKnowledgeNode(
            id=generate_id("knowledge"),
            type=knowledge_type,
            content=content,
            relationships=list(relationships),
            confidence=confidence,
            sharing=ModelKnowledgeSharing(is_public=is_public),
        )
        self.knowledge.add(node)
        await self._checkpoint(KNOWLEDGE_COLLECTION, node.id, node)
        await self._publish(
            EnumLearningEventType.KNOWLEDGE_CREATED,
            ModelKnowledgeCreatedPayload(
                knowledge_id=node.id,
                type=node.type,
                confidence=node.confidence,
                is_public=is_public,
            ),
        )
        return node

    async def share_knowledge(self) -> int:
        """Share public knowledge nodes (periodic task). Returns the number shared."""
        return await self.knowledge.share_public()

    def get_knowledge_by_type(self, knowledge_type: str) -> list[ModelKnowledgeNode]:
        """Knowledge nodes of ``knowledge_type``, highest confidence first."""
        return sorted(
            (n for n in self.knowledge.nodes.values() if n.type == knowledge_type),
            key=lambda n: n.confidence,
            reverse=True,
        )

    # =========================================================================
    # Algorithms
    # =========================================================================

    async def register_algorithm(
        self,
        algorithm_type: EnumAlgorithmType | str,
        name: str,
        description: str = "",
        input_types: Iterable[str] = (),
        output_types: Iterable[str] = (),
        performance: float = 0.0,
    ) -> ModelLearningAlgorithm:
        """Register an algorithm descriptor (inactive) and publish ``algorithm_registered``."""
        algorithm = ModelLearningAlgorithm(
            id=generate_id("algorithm"),
            name=name,
            type=EnumAlgorithmType(algorithm_type),
            description=description,
            input_types=list(input_types),
            output_types=list(output_types),
            performance=performance,
        )
        self.algorithms[algorithm.id] = algorithm
        await self._publish(
            EnumLearningEventType.ALGORITHM_REGISTERED,
            ModelAlgorithmRegisteredPayload(
                algorithm_id=algorithm.id,
                type=algorithm.type,
                name=algorithm.name,
                performance=algorithm.performance,
            ),
        )
        return algorithm

    def set_algorithm_status(
        self,
        algorithm_id: str,
        status: EnumModelStatus,
        performance: float | None = None,
    ) -> bool:
        """Change an algorithm's status (and optionally its performance).

        Returns:
            False if the algorithm is unknown.
        """
        algorithm = self.algorithms.get(algorithm_id)
        if algorithm is None:
            return False
        algorithm.status = status
        if performance is not None:
            algorithm.performance = performance
        algorithm.last_run = utc_now()
        return True

    def update_algorithm_training(
        self,
        algorithm_id: str,
        status: str | None = None,
        progress: float | None = None,
        accuracy: float | None = None,
    ) -> bool:
        """Record a training progress report for an algorithm.

        The algorithm counts as training only while ``status`` is
        ``"training"``. Progress and accuracy keep their previous values when
        the report omits them.

        Returns:
            False if the algorithm is unknown.
        """
        algorithm = self.algorithms.get(algorithm_id)
        if algorithm is None:
            return False
        training = algorithm.training.model_copy(
            update={"is_training": status == "training"}
        )
        if progress is not None:
            training.progress = progress
        if accuracy is not None:
            training.accuracy = accuracy
        algorithm.training = training
        algorithm.last_run = utc_now()
        logger.debug(
            f"Algorithm training updated | algorithm_id={algorithm_id} | "
            f"status={status} | progress={training.progress} | "
            f"accuracy={training.accuracy}"
        )
        return True

    # =========================================================================
    # Metrics & performance
    # =========================================================================

    def update_metrics(self) -> ModelLearningMetrics:
        """Recompute the learning metrics rollup (periodic task)."""
        self.metrics = compute_learning_metrics(
            pattern_count=len(self.patterns),
            recognition=self.recognition,
            algorithms=list(self.algorithms.values()),
            knowledge=list(self.knowledge.nodes.values()),
            sharing=self.knowledge.stats,
            feedback=list(self.feedback.items.values()),
            feedback_stats=self.feedback.stats,
        )
        return self.metrics

    def update_performance(self, update: ModelPerformanceUpdatePayload) -> None:
        """Merge reported performance figures into the snapshot.

        Scalars are replaced when present; mappings are merged; trends are
        appended.
        """
        snapshot = self.performance
        for field in ("accuracy", "response_time", "learning_rate", "pattern_recognition_rate"):
            value = getattr(update, field)
            if value is not None:
                setattr(snapshot, field, value)
        if update.overall:
            snapshot.overall = {**snapshot.overall, **update.overall}
        if update.by_algorithm:
            snapshot.by_algorithm = {**snapshot.by_algorithm, **update.by_algorithm}
        if update.by_pattern_type:
            snapshot.by_pattern_type = {**snapshot.by_pattern_type, **update.by_pattern_type}
        if update.trends:
            snapshot.trends = [*snapshot.trends, *update.trends]

    def get_stats(self) -> dict[str, Any]:
        """Counts and counters for diagnostics."""
        return {
            "patterns": len(self.patterns),
            "patterns_detected": self.recognition.patterns_detected,
            "average_confidence": self.recognition.average_confidence,
            "feedback_total": len(self.feedback.items),
            "feedback_pending": len(self.feedback.pending()),
            "feedback_completed": len(self.feedback.by_status(EnumFeedbackStatus.COMPLETED)),
            "feedback_failed": len(self.feedback.by_status(EnumFeedbackStatus.FAILED)),
            "knowledge_nodes": len(self.knowledge.nodes),
            "shared_items": self.knowledge.stats.shared_items,
            "received_items": self.knowledge.stats.received_items,
            "algorithms": len(self.algorithms),
            "degraded": self.degraded,
            "initialized": self._initialized,
        }

    # =========================================================================
    # Bus handlers
    # =========================================================================

    async def _on_learning_pattern(self, event: ModelEvent) -> None:
        payload: ModelLearningPatternPayload = event.payload
        await self._handle(
            event,
            self.learn_pattern(
                payload.type, payload.data, payload.sources or [event.source], payload.confidence
            ),
        )

    async def _on_feedback_request(self, event: ModelEvent) -> None:
        payload: ModelFeedbackRequestPayload = event.payload
        await self._handle(
            event,
            self.add_feedback_loop(
                payload.type, payload.data, payload.priority, payload.source, payload.target
            ),
        )

    async def _on_knowledge_update(self, event: ModelEvent) -> None:
        payload: ModelKnowledgeUpdatePayload = event.payload
        await self._handle(
            event,
            self.add_knowledge_node(
                payload.type,
                payload.content,
                payload.relationships,
                payload.confidence,
                payload.is_public,
            ),
        )

    def _on_knowledge_sharing(self, event: ModelEvent) -> None:
        payload: ModelKnowledgeSharingPayload = event.payload
        logger.debug(
            f"Knowledge received | knowledge_id={payload.knowledge_id} | "
            f"protocol={payload.protocol} | source={event.source}"
        )
        self.knowledge.record_received(payload.knowledge_id)

    def _on_algorithm_training(self, event: ModelEvent) -> None:
        payload: ModelAlgorithmTrainingPayload = event.payload
        if not self.update_algorithm_training(
            payload.algorithm_id, payload.status, payload.progress, payload.accuracy
        ):
            logger.debug(
                f"Training report for unknown algorithm ignored | "
                f"algorithm_id={payload.algorithm_id} | source={event.source}"
            )

    def _on_performance_update(self, event: ModelEvent) -> None:
        self.update_performance(event.payload)

    async def _on_ui_event(self, event: ModelEvent) -> None:
        payload: ModelUiEventPayload = event.payload
        data = payload.model_dump(exclude_none=True)
        await self._handle(event, self.learn_pattern(event.type, data, [event.source]))

    async def _handle(self, event: ModelEvent, operation: Any) -> None:
        # Bad input from one producer must not cost the engine its subscription
        try:
            await operation
        except (OmniLearningError, ValueError) as e:
            logger.warning(
                f"Event rejected by pattern engine | event_type={event.type} | "
                f"event_id={event.id} | source={event.source} | error={e}"
            )

    # =========================================================================
    # Internals
    # =========================================================================

    async def _publish(self, event_type: EnumLearningEventType, payload: BaseModel) -> None:
        await self._bus.publish_simple(
            event_type.value,
            ENGINE_SOURCE,
            payload,
            context={"component": ENGINE_SOURCE},
        )

    async def _checkpoint(self, collection: str, key: str, value: BaseModel) -> None:
        if self._store is None:
            return
        saved = await checkpoint_entity(self._store, collection, key, value)
        if not saved and not self.degraded:
            self.degraded = True
            logger.warning(
                f"Persistence unavailable, pattern engine running in memory | "
                f"collection={collection}"
            )
        elif saved and self.degraded:
            self.degraded = False
            logger.info("Persistence recovered, pattern engine checkpointing again")


__all__ = ["PatternEngine"]
