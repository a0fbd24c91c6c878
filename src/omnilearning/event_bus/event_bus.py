# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""In-process asynchronous publish/subscribe dispatcher.

The EventBus decouples producers (UI panels, user actions, the learning
services themselves) from consumers. It guarantees:

- Ordering: events are dispatched one at a time in publish order; every
  active subscriber sees the events of its type in that order.
- Fault isolation: a handler that raises is deactivated and the failure is
  logged; other subscribers of the same event and all later events are
  unaffected, and nothing propagates to the publisher.
- Validation: payloads of known event types are validated against their
  payload model at publish time; malformed payloads raise
  EventPayloadValidationError before anything is queued.

Dispatch model:
    ``publish`` appends the event to the bounded history and to a FIFO queue,
    starts the drain task when none is running, and waits until its own
    event has been dispatched to all subscribers. A publish issued from
    inside a handler only enqueues: the handler would otherwise wait on an
    event that cannot be dispatched until the handler itself returns.

    All active handlers of one event run concurrently and are awaited
    together before the next event is dispatched.

Concurrency:
    Single asyncio event loop, no locks. The drain task is the only
    dispatcher.

Usage:
    bus = EventBus()
    bus.subscribe("pattern_learned", on_pattern_learned)
    await bus.publish_simple(
        "learning_pattern",
        source="ui",
        payload={"type": "click", "data": {"x": 1}},
    )
    await bus.drain()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import deque
from contextvars import ContextVar
from typing import Any, Final, TypedDict

from omnilearning.enums import EnumPriority
from omnilearning.exceptions import EventPayloadValidationError
from omnilearning.models import EventHandler, ModelEvent, ModelSubscription
from omnilearning.models.events import coerce_event_payload

logger = logging.getLogger(__name__)

DEFAULT_MAX_HISTORY: Final[int] = 1000

# True inside the drain task and every handler task it spawns
_dispatching: ContextVar[bool] = ContextVar("omnilearning_bus_dispatching", default=False)


class BusCounters(TypedDict):
    """Monotonic counters maintained by the EventBus."""

    events_published: int
    events_dispatched: int
    handler_invocations: int
    handler_failures: int
    validation_errors: int


class EventBus:
    """Ordered, fault-isolating publish/subscribe dispatcher.

    Attributes:
        name: Label used in log messages.
        metrics: Monotonic counters (see BusCounters).
    """

    def __init__(self, *, max_history: int = DEFAULT_MAX_HISTORY, name: str = "EventBus") -> None:
        if max_history < 1:
            raise ValueError(f"max_history must be >= 1, got {max_history}")
        self.name = name
        self._subscriptions: dict[str, list[ModelSubscription]] = {}
        self._history: deque[ModelEvent] = deque(maxlen=max_history)
        self._queue: deque[tuple[ModelEvent, asyncio.Future[None] | None]] = deque()
        self._drain_task: asyncio.Task[None] | None = None
        self.metrics: BusCounters = {
            "events_published": 0,
            "events_dispatched": 0,
            "handler_invocations": 0,
            "handler_failures": 0,
            "validation_errors": 0,
        }

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def subscribe(self, event_type: str, handler: EventHandler) -> ModelSubscription:
        """Register ``handler`` for ``event_type``.

        The handler may be a plain callable or a coroutine function taking
        the ModelEvent.
        """
        subscription = ModelSubscription(event_type=event_type, handler=handler)
        self._subscriptions.setdefault(event_type, []).append(subscription)
        logger.debug(
            f"Subscribed | bus={self.name} | event_type={event_type} | "
            f"subscription_id={subscription.id}"
        )
        return subscription

    def unsubscribe(self, subscription_id: str) -> bool:
        """Deactivate and remove a subscription.

        Returns:
            True if the subscription existed, False otherwise.
        """
        for event_type, subscriptions in self._subscriptions.items():
            for subscription in subscriptions:
                if subscription.id == subscription_id:
                    subscription.active = False
                    subscriptions.remove(subscription)
                    if not subscriptions:
                        del self._subscriptions[event_type]
                    logger.debug(
                        f"Unsubscribed | bus={self.name} | event_type={event_type} | "
                        f"subscription_id={subscription_id}"
                    )
                    return True
        return False

    # =========================================================================
    # Publishing
    # =========================================================================

    def create_event(
        self,
        event_type: str,
        source: str,
        # any-ok: typed payload model or free-form mapping
        payload: Any = None,
        context: dict[str, Any] | None = None,
        priority: EnumPriority = EnumPriority.MEDIUM,
    ) -> ModelEvent:
        """Build an event with a fresh id and the current UTC timestamp."""
        return ModelEvent(
            type=event_type,
            source=source,
            payload={} if payload is None else payload,
            context=context or {},
            priority=priority,
        )

    async def publish(self, event: ModelEvent) -> ModelEvent:
        """Validate, record and dispatch ``event``.

        Returns:
            The event as recorded, with its payload coerced to the payload
            model registered for its type.

        Raises:
            EventPayloadValidationError: If the payload of a known event type
                is malformed. Nothing is recorded or queued in that case.
        """
        try:
            payload = coerce_event_payload(event.type, event.payload)
        except EventPayloadValidationError:
            self.metrics["validation_errors"] += 1
            logger.warning(
                f"Rejected malformed event | bus={self.name} | event_type={event.type} | "
                f"source={event.source}"
            )
            raise
        if payload is not event.payload:
            event = event.model_copy(update={"payload": payload})

        self._history.append(event)
        self.metrics["events_published"] += 1

        if _dispatching.get():
            self._queue.append((event, None))
            self._ensure_draining()
            return event

        done: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        self._queue.append((event, done))
        self._ensure_draining()
        await done
        return event

    async def publish_simple(
        self,
        event_type: str,
        source: str,
        payload: Any = None,
        context: dict[str, Any] | None = None,
        priority: EnumPriority = EnumPriority.MEDIUM,
    ) -> ModelEvent:
        """Build an event with ``create_event`` and publish it."""
        return await self.publish(
            self.create_event(event_type, source, payload, context, priority)
        )

    async def drain(self) -> None:
        """Wait until every queued event has been dispatched.

        Raises:
            RuntimeError: If called from inside a handler, which would wait
                on itself.
        """
        if _dispatching.get():
            raise RuntimeError("EventBus.drain() cannot be awaited from inside a handler")
        while self._drain_task is not None and not self._drain_task.done():
            await asyncio.shield(self._drain_task)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _ensure_draining(self) -> None:
        if self._drain_task is None or self._drain_task.done():
            self._drain_task = asyncio.create_task(
                self._drain_loop(), name=f"{self.name}-drain"
            )

    async def _drain_loop(self) -> None:
        _dispatching.set(True)
        while self._queue:
            event, done = self._queue.popleft()
            try:
                await self._dispatch(event)
            finally:
                if done is not None and not done.done():
                    done.set_result(None)

    async def _dispatch(self, event: ModelEvent) -> None:
        subscriptions = [
            s for s in self._subscriptions.get(event.type, ()) if s.active
        ]
        self.metrics["events_dispatched"] += 1
        if not subscriptions:
            return
        self.metrics["handler_invocations"] += len(subscriptions)
        await asyncio.gather(*(self._invoke(s, event) for s in subscriptions))

    async def _invoke(self, subscription: ModelSubscription, event: ModelEvent) -> None:
        try:
            result = subscription.handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception:
            subscription.active = False
            self.metrics["handler_failures"] += 1
            logger.error(
                f"Handler failed, subscription deactivated | bus={self.name} | "
                f"subscription_id={subscription.id} | event_type={event.type} | "
                f"event_id={event.id}",
                exc_info=True,
            )

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def is_processing(self) -> bool:
        """True while the drain task is dispatching."""
        return self._drain_task is not None and not self._drain_task.done()

    def get_event_history(
        self, event_type: str | None = None, limit: int | None = None
    ) -> list[ModelEvent]:
        """Recorded events, oldest first, optionally filtered by type.

        ``limit`` keeps only the most recent matching events.
        """
        events = [e for e in self._history if event_type is None or e.type == event_type]
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return events

    def clear_history(self) -> None:
        self._history.clear()

    def get_subscription_count(self, event_type: str) -> int:
        """Number of active subscriptions for ``event_type``."""
        return sum(1 for s in self._subscriptions.get(event_type, ()) if s.active)

    def get_active_subscriptions(self) -> list[ModelSubscription]:
        return [s for subs in self._subscriptions.values() for s in subs if s.active]

    def get_queue_status(self) -> dict[str, int | bool]:
        return {
            "queue_length": len(self._queue),
            "is_processing": self.is_processing,
            "history_size": len(self._history),
            "max_history": self._history.maxlen or 0,
        }

    def get_stats(self) -> dict[str, Any]:
        """Subscription, queue and counter snapshot."""
        all_subscriptions = [s for subs in self._subscriptions.values() for s in subs]
        return {
            "total_subscriptions": len(all_subscriptions),
            "active_subscriptions": sum(1 for s in all_subscriptions if s.active),
            "event_types": sorted(self._subscriptions),
            **self.get_queue_status(),
            **self.metrics,
        }


__all__ = ["DEFAULT_MAX_HISTORY", "BusCounters", "EventBus"]
