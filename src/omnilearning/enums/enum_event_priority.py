# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Priority levels shared by events and feedback items."""

from enum import Enum


class EnumPriority(str, Enum):
    """Priority attached to events and feedback items."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


__all__ = ["EnumPriority"]
