# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Unit tests for PeriodicTask."""

from __future__ import annotations

import asyncio
import logging

import pytest

from omnilearning.runtime import PeriodicTask

pytestmark = pytest.mark.unit


# =============================================================================
# Construction
# =============================================================================


class TestConstruction:
    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_non_positive_interval_raises(self, interval: float) -> None:
        with pytest.raises(ValueError, match="interval"):
            PeriodicTask("bad", interval, lambda: None)

    def test_initial_state(self) -> None:
        task = PeriodicTask("metrics", 1.0, lambda: None)

        assert task.is_running is False
        assert task.in_flight is False
        assert (task.runs, task.skipped, task.failures) == (0, 0, 0)


# =============================================================================
# Runs and Ticks
# =============================================================================


class TestRuns:
    @pytest.mark.asyncio
    async def test_sync_and_async_callbacks(self) -> None:
        calls: list[str] = []

        async def async_callback() -> None:
            calls.append("async")

        await PeriodicTask("a", 1.0, async_callback).run_once()
        await PeriodicTask("s", 1.0, lambda: calls.append("sync")).run_once()

        assert calls == ["async", "sync"]

    @pytest.mark.asyncio
    async def test_failure_is_counted_and_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        def boom() -> None:
            raise RuntimeError("boom")

        task = PeriodicTask("feedback", 1.0, boom)

        with caplog.at_level(logging.ERROR, logger="omnilearning.runtime.scheduler"):
            await task.run_once()

        assert task.failures == 1
        assert task.runs == 1
        assert "name=feedback" in caplog.text

    @pytest.mark.asyncio
    async def test_overlapping_tick_is_skipped(self) -> None:
        release = asyncio.Event()
        started = asyncio.Event()

        async def slow() -> None:
            started.set()
            await release.wait()

        task = PeriodicTask("slow", 1.0, slow)

        assert task.tick() is True
        await started.wait()
        assert task.in_flight is True
        assert task.tick() is False
        assert task.skipped == 1

        release.set()
        await task.stop()

        assert task.runs == 1
        assert task.in_flight is False
        assert task.tick() is True
        await task.stop()
        assert task.runs == 2


# =============================================================================
# Start / Stop
# =============================================================================


class TestStartStop:
    @pytest.mark.asyncio
    async def test_ticker_runs_callback(self) -> None:
        ran = asyncio.Event()
        task = PeriodicTask("fast", 0.01, ran.set)

        task.start()
        task.start()
        assert task.is_running is True
        await asyncio.wait_for(ran.wait(), timeout=1.0)
        await task.stop()

        assert task.is_running is False
        assert task.runs >= 1

    @pytest.mark.asyncio
    async def test_stop_waits_for_run_in_flight(self) -> None:
        finished: list[bool] = []
        started = asyncio.Event()

        async def work() -> None:
            started.set()
            await asyncio.sleep(0.01)
            finished.append(True)

        task = PeriodicTask("work", 1.0, work)
        task.tick()
        await started.wait()

        await task.stop()

        assert finished == [True]

    @pytest.mark.asyncio
    async def test_stop_without_start(self) -> None:
        task = PeriodicTask("idle", 1.0, lambda: None)

        await task.stop()

        assert task.runs == 0
