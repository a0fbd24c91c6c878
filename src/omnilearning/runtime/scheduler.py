# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Periodic background tasks.

A PeriodicTask ticks every ``interval`` seconds on the running loop. Each
tick spawns one run of the callback unless the previous run is still in
flight, in which case the tick is skipped. Two runs of the same task
therefore never overlap.

Example:
    >>> task = PeriodicTask("metrics", 60.0, engine.update_metrics)
    >>> task.start()
    >>> ...
    >>> await task.stop()
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

logger = logging.getLogger(__name__)

# Callbacks may be plain callables or coroutine functions.
TaskCallback = Callable[[], Awaitable[Any] | Any]


class PeriodicTask:
    """Run ``callback`` every ``interval`` seconds without overlapping runs.

    Attributes:
        name: Task name used in logs.
        interval: Seconds between ticks.
        runs: Completed runs (successful or failed).
        skipped: Ticks skipped because a run was still in flight.
        failures: Runs that raised.
    """

    def __init__(self, name: str, interval: float, callback: TaskCallback) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be > 0, got {interval}")
        self.name = name
        self.interval = interval
        self._callback = callback
        self._ticker: asyncio.Task[None] | None = None
        self._current: asyncio.Task[None] | None = None
        self.runs = 0
        self.skipped = 0
        self.failures = 0

    @property
    def is_running(self) -> bool:
        """True while the ticker is scheduled."""
        return self._ticker is not None and not self._ticker.done()

    @property
    def in_flight(self) -> bool:
        """True while a run of the callback has not finished."""
        return self._current is not None and not self._current.done()

    def start(self) -> None:
        """Start ticking on the running loop. A second call does nothing."""
        if self.is_running:
            return
        self._ticker = asyncio.get_running_loop().create_task(
            self._tick_loop(), name=f"periodic:{self.name}"
        )
        logger.info(f"Periodic task started | name={self.name} | interval={self.interval}s")

    async def stop(self) -> None:
        """Stop ticking and wait for a run in flight to finish."""
        ticker, self._ticker = self._ticker, None
        if ticker is not None:
            ticker.cancel()
            try:
                await ticker
            except asyncio.CancelledError:
                pass
        if self._current is not None:
            await asyncio.gather(self._current, return_exceptions=True)
            self._current = None
        logger.info(
            f"Periodic task stopped | name={self.name} | runs={self.runs} | "
            f"skipped={self.skipped} | failures={self.failures}"
        )

    def tick(self) -> bool:
        """Spawn one run unless the previous run is in flight.

        Returns:
            True if a run was spawned, False if the tick was skipped.
        """
        if self.in_flight:
            self.skipped += 1
            logger.debug(f"Periodic tick skipped, previous run in flight | name={self.name}")
            return False
        self._current = asyncio.get_running_loop().create_task(
            self.run_once(), name=f"periodic-run:{self.name}"
        )
        return True

    async def run_once(self) -> None:
        """Run the callback once, logging (not raising) its failure."""
        try:
            result = self._callback()
            if inspect.isawaitable(result):
                await result
        except Exception:
            self.failures += 1
            logger.error(f"Periodic task run failed | name={self.name}", exc_info=True)
        finally:
            self.runs += 1

    async def _tick_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            self.tick()


__all__ = ["PeriodicTask", "TaskCallback"]
