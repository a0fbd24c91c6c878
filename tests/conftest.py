"""
Pytest configuration and fixtures for omnilearning tests.

Shared fixtures for the event bus, the pattern engine and predictive analytics.
"""

from collections.abc import AsyncIterator

import pytest

from omnilearning.event_bus import EventBus
from omnilearning.models import ModelTimeSeriesPoint
from omnilearning.pattern_engine import PatternEngine
from omnilearning.predictive import PredictiveAnalytics
from omnilearning.testing import EventRecorder, MockPersistenceStore, make_series

# =========================================================================
# Event Bus Fixtures
# =========================================================================


@pytest.fixture
def bus() -> EventBus:
    """Fresh bus with the default history size."""
    return EventBus(name="TestBus")


@pytest.fixture
def recorder() -> EventRecorder:
    """Recording subscriber; subscribe it to the types a test cares about."""
    return EventRecorder()


# =========================================================================
# Persistence Fixtures
# =========================================================================


@pytest.fixture
def store() -> MockPersistenceStore:
    """In-memory persistence store with failure switches."""
    return MockPersistenceStore()


# =========================================================================
# Service Fixtures
# =========================================================================


@pytest.fixture
async def engine(bus: EventBus, store: MockPersistenceStore) -> AsyncIterator[PatternEngine]:
    """Initialized pattern engine backed by the mock store."""
    engine = PatternEngine(bus, store=store)
    await engine.initialize()
    yield engine
    await bus.drain()
    await engine.shutdown()


@pytest.fixture
async def analytics(bus: EventBus) -> AsyncIterator[PredictiveAnalytics]:
    """Initialized predictive analytics service with the seeded models."""
    analytics = PredictiveAnalytics(bus)
    await analytics.initialize()
    yield analytics
    await bus.drain()
    await analytics.shutdown()


# =========================================================================
# Time Series Sample Data
# =========================================================================


@pytest.fixture
def linear_series() -> list[ModelTimeSeriesPoint]:
    """25 daily points on the line 10 + 1.5 * i."""
    return make_series([10 + 1.5 * i for i in range(25)])


@pytest.fixture
def spiky_series() -> list[ModelTimeSeriesPoint]:
    """40 points cycling 20..25 with spikes of 50 at indices 15 and 30."""
    values = [20.0 + (i % 6) for i in range(40)]
    values[15] = 50.0
    values[30] = 50.0
    return make_series(values)
