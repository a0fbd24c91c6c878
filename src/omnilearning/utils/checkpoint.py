# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Best-effort checkpointing through a ProtocolPersistenceStore.

Persistence is optional for the learning services: a failing store must not
fail the operation that triggered the checkpoint. These helpers log the
failure and report it through their return value so the caller can flip
into degraded mode.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

if TYPE_CHECKING:
    from omnilearning.protocols import ProtocolPersistenceStore

logger = logging.getLogger(__name__)


async def checkpoint_entity(
    store: ProtocolPersistenceStore | None,
    collection: str,
    key: str,
    value: BaseModel,
) -> bool:
    """Save ``value`` to ``store``.

    Returns:
        True when the value was saved, False when there is no store or the
        save failed (the failure is logged at WARNING).
    """
    if store is None:
        return False
    try:
        await store.save(collection, key, value.model_dump(mode="json"))
    except Exception as e:
        # Any store failure downgrades to in-memory operation
        logger.warning(
            "Checkpoint failed, continuing in memory | collection=%s | key=%s | error=%s",
            collection,
            key,
            e,
        )
        return False
    return True


# any-ok: documents are JSON-compatible mappings
async def restore_entity(
    store: ProtocolPersistenceStore | None,
    collection: str,
    key: str,
) -> dict[str, Any] | None:
    """Load a document from ``store``.

    Returns:
        The stored mapping, or None when there is no store, nothing is stored
        under the key, or the load failed (logged at WARNING).
    """
    if store is None:
        return None
    try:
        return await store.load(collection, key)
    except Exception as e:
        logger.warning(
            "Restore failed | collection=%s | key=%s | error=%s",
            collection,
            key,
            e,
        )
        return None


__all__ = ["checkpoint_entity", "restore_entity"]
