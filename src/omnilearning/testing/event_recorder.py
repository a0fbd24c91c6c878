# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Recording subscriber and series factories for bus-level tests."""

from __future__ import annotations

from collections.abc import Iterable

from omnilearning.models import ModelEvent, ModelTimeSeriesPoint

# One day in milliseconds, the default spacing of generated series
DAY_MS: float = 86_400_000.0


class EventRecorder:
    """Async handler that records every event it receives.

    Example:
        >>> recorder = EventRecorder()
        >>> bus.subscribe("pattern_learned", recorder)
        >>> await bus.publish_simple(...)
        >>> recorder.types
        ['pattern_learned']
    """

    def __init__(self, *, fail_on: Iterable[str] = ()) -> None:
        self.events: list[ModelEvent] = []
        self._fail_on = set(fail_on)

    async def __call__(self, event: ModelEvent) -> None:
        self.events.append(event)
        if event.id in self._fail_on or event.type in self._fail_on:
            raise RuntimeError(f"recorder configured to fail on {event.type}")

    @property
    def types(self) -> list[str]:
        return [e.type for e in self.events]

    def of_type(self, event_type: str) -> list[ModelEvent]:
        return [e for e in self.events if e.type == event_type]

    def clear(self) -> None:
        self.events.clear()


def make_series(
    values: Iterable[float],
    *,
    start_ms: float = 1_700_000_000_000.0,
    step_ms: float = DAY_MS,
) -> list[ModelTimeSeriesPoint]:
    """Build evenly spaced points from ``values``."""
    return [
        ModelTimeSeriesPoint(timestamp=start_ms + i * step_ms, value=float(v))
        for i, v in enumerate(values)
    ]


__all__ = ["DAY_MS", "EventRecorder", "make_series"]
