# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Protocol definitions for collaborators of the learning services.

The services depend only on these protocols so the persistence backend
(document store, REST API, in-memory double) can be swapped without touching
service code.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ProtocolPersistenceStore(Protocol):
    """Protocol for checkpointing learning state.

    Entities are saved as JSON-compatible mappings under a collection name
    and a key (the entity id). Collections used by the pattern engine:
    ``patterns``, ``feedback_items``, ``knowledge_nodes``.

    Implementations raise on failure (any exception). Callers treat a
    failure as "persistence unavailable" and continue in memory.
    """

    # any-ok: documents are JSON-compatible mappings
    async def save(self, collection: str, key: str, value: dict[str, Any]) -> None:
        """Persist ``value`` under ``collection``/``key``, replacing any previous value."""
        ...

    # any-ok: documents are JSON-compatible mappings
    async def load(self, collection: str, key: str) -> dict[str, Any] | None:
        """Return the stored document, or None when nothing is stored under the key."""
        ...


__all__ = ["ProtocolPersistenceStore"]
