# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Testing utilities for omnilearning.

Test doubles live in the package, not under tests/, so downstream
consumers of the learning services can reuse them in their own suites.

Modules:
    mock_persistence_store: In-memory ProtocolPersistenceStore with failure switches
    event_recorder: Recording bus subscriber and time series factories
"""

from omnilearning.testing.event_recorder import DAY_MS, EventRecorder, make_series
from omnilearning.testing.mock_persistence_store import MockPersistenceStore

__all__ = [
    "DAY_MS",
    "EventRecorder",
    "MockPersistenceStore",
    "make_series",
]
