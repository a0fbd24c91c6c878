# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Identifier and clock helpers shared by the learning services."""

from __future__ import annotations

import time
from datetime import UTC, datetime
from uuid import uuid4


def generate_id(prefix: str) -> str:
    """Return a unique, roughly time-ordered identifier.

    Format: ``{prefix}_{epoch_ms}_{9 hex chars}``, matching the identifiers
    other subsystems already store (``pattern_1718000000000_3f9a1c2b7``).

    Examples:
        >>> generate_id("pattern").startswith("pattern_")
        True
    """
    return f"{prefix}_{time.time_ns() // 1_000_000}_{uuid4().hex[:9]}"


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def epoch_ms() -> int:
    """Current time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


__all__ = ["epoch_ms", "generate_id", "utc_now"]
