# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Shared utilities for omnilearning."""

from omnilearning.utils.checkpoint import checkpoint_entity, restore_entity
from omnilearning.utils.ids import epoch_ms, generate_id, utc_now

__all__ = [
    "checkpoint_entity",
    "epoch_ms",
    "generate_id",
    "restore_entity",
    "utc_now",
]
