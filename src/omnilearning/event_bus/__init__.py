# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Asynchronous in-process event bus."""

from omnilearning.event_bus.event_bus import DEFAULT_MAX_HISTORY, BusCounters, EventBus

__all__ = ["DEFAULT_MAX_HISTORY", "BusCounters", "EventBus"]
