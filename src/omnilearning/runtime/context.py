# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Explicit runtime context for the learning services.

One LearningContext owns one EventBus, one PatternEngine, one
PredictiveAnalytics and their four periodic tasks. Nothing is held at module
level; two contexts in one process are fully independent.

Lifecycle:
    start()    initialize both services (subscriptions plus the initialized
               events) and, unless disabled in settings, start the periodic
               tasks
    dispose()  stop the periodic tasks and wait for running ticks, drain the
               bus, then unsubscribe both services

Example:
    >>> context = LearningContext(LearningRuntimeSettings())
    >>> await context.start()
    >>> await context.bus.publish_simple("learning_pattern", "ui", {...})
    >>> await context.dispose()
"""

from __future__ import annotations

import logging
from typing import Any

from omnilearning.event_bus import EventBus
from omnilearning.pattern_engine import PatternEngine
from omnilearning.predictive import PredictiveAnalytics
from omnilearning.protocols import ProtocolPersistenceStore
from omnilearning.runtime.scheduler import PeriodicTask
from omnilearning.runtime.settings import LearningRuntimeSettings

logger = logging.getLogger(__name__)

_PACKAGE_LOGGER = "omnilearning"


class LearningContext:
    """Owns the bus, both services and the periodic tasks.

    Attributes:
        settings: Settings the context was built from.
        bus: The shared event bus.
        engine: Pattern & feedback engine.
        analytics: Predictive analytics service.
        tasks: Periodic tasks by name (feedback, metrics, knowledge_sharing,
            model_refresh).
    """

    def __init__(
        self,
        settings: LearningRuntimeSettings | None = None,
        *,
        store: ProtocolPersistenceStore | None = None,
    ) -> None:
        self.settings = settings or LearningRuntimeSettings()
        logging.getLogger(_PACKAGE_LOGGER).setLevel(self.settings.log_level.to_logging_level())

        self.bus = EventBus(max_history=self.settings.event_history_size)
        self.engine = PatternEngine(
            self.bus,
            store=store,
            thresholds=self.settings.to_thresholds(),
            sharing_protocol=self.settings.sharing_protocol,
            max_similar_patterns=self.settings.max_similar_patterns,
        )
        self.analytics = PredictiveAnalytics(self.bus)
        self.tasks: dict[str, PeriodicTask] = {
            task.name: task
            for task in (
                PeriodicTask(
                    "feedback",
                    self.settings.feedback_interval_seconds,
                    self.engine.process_feedback_loops,
                ),
                PeriodicTask(
                    "metrics",
                    self.settings.metrics_interval_seconds,
                    self.engine.update_metrics,
                ),
                PeriodicTask(
                    "knowledge_sharing",
                    self.settings.knowledge_sharing_interval_seconds,
                    self.engine.share_knowledge,
                ),
                PeriodicTask(
                    "model_refresh",
                    self.settings.model_refresh_interval_seconds,
                    self.analytics.refresh_models,
                ),
            )
        }
        self._started = False
        self._dispose_in_progress = False

    @property
    def is_started(self) -> bool:
        return self._started

    async def start(self) -> None:
        """Initialize the services and start the periodic tasks. Idempotent."""
        if self._started:
            return
        await self.engine.initialize()
        await self.analytics.initialize()
        if self.settings.start_background_tasks:
            for task in self.tasks.values():
                task.start()
        self._started = True
        logger.info(
            f"Learning context started | background_tasks={self.settings.start_background_tasks} | "
            f"subscriptions={len(self.bus.get_active_subscriptions())}"
        )

    async def dispose(self) -> None:
        """Stop the periodic tasks, drain the bus and unsubscribe the services.

        Safe to call more than once and on a context that never started.
        """
        if self._dispose_in_progress or not self._started:
            return
        self._dispose_in_progress = True
        try:
            for task in self.tasks.values():
                await task.stop()
            await self.bus.drain()
            await self.analytics.shutdown()
            await self.engine.shutdown()
            self._started = False
            logger.info(f"Learning context disposed | bus={self.bus.get_stats()}")
        finally:
            self._dispose_in_progress = False

    async def __aenter__(self) -> LearningContext:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.dispose()

    def get_stats(self) -> dict[str, Any]:
        return {
            "bus": self.bus.get_stats(),
            "engine": self.engine.get_stats(),
            "analytics": self.analytics.get_stats(),
            "tasks": {
                name: {
                    "running": task.is_running,
                    "runs": task.runs,
                    "skipped": task.skipped,
                    "failures": task.failures,
                }
                for name, task in self.tasks.items()
            },
        }


__all__ = ["LearningContext"]
