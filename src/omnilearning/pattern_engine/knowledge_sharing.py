# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Knowledge node store and periodic sharing.

Public knowledge nodes are pushed to other subsystems by publishing
``knowledge_shared`` through the configured sharing protocol. Incoming
``knowledge_sharing`` events from other subsystems are counted as received.

Statistics:
    shared_items    +1 per node successfully shared
    received_items  +1 per incoming knowledge_sharing event
    success_rate    shared / (shared + received), 0.0 before any traffic
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from omnilearning.enums import EnumLearningEventType, EnumSharingProtocolType
from omnilearning.models import (
    ModelKnowledgeNode,
    ModelSharingProtocol,
    ModelSharingStatistics,
)
from omnilearning.models.events import ModelKnowledgeSharedPayload
from omnilearning.pattern_engine.presets import DEFAULT_SHARING_PROTOCOLS, ENGINE_SOURCE
from omnilearning.utils.ids import utc_now

if TYPE_CHECKING:
    from omnilearning.event_bus import EventBus

logger = logging.getLogger(__name__)


class KnowledgeSharing:
    """Holds knowledge nodes and shares the public ones.

    Attributes:
        nodes: Knowledge nodes by id, in insertion order.
        stats: Sharing counters.
        protocol_type: Protocol type used for outgoing shares.
        active: When False, ``share_public`` is a no-op.
    """

    def __init__(
        self,
        bus: EventBus,
        protocols: Iterable[ModelSharingProtocol] = DEFAULT_SHARING_PROTOCOLS,
        protocol_type: EnumSharingProtocolType = EnumSharingProtocolType.PUSH,
    ) -> None:
        self._bus = bus
        self.protocols: list[ModelSharingProtocol] = list(protocols)
        self.protocol_type = protocol_type
        self.nodes: dict[str, ModelKnowledgeNode] = {}
        self.stats = ModelSharingStatistics()
        self.active = True
        self._is_sharing = False

    def add(self, node: ModelKnowledgeNode) -> None:
        self.nodes[node.id] = node

    def get_protocol(self) -> ModelSharingProtocol | None:
        """First active protocol of the configured type."""
        for protocol in self.protocols:
            if protocol.active and protocol.type == self.protocol_type:
                return protocol
        return None

    def public_nodes(self) -> list[ModelKnowledgeNode]:
        return [n for n in self.nodes.values() if n.sharing.is_public]

    async def share_public(self) -> int:
        """Share every public node once through the configured protocol.

        Returns:
            Number of nodes shared. 0 when inactive, already sharing, or no
            active protocol of the configured type exists.
        """
        if not self.active or self._is_sharing:
            return 0
        protocol = self.get_protocol()
        if protocol is None:
            logger.warning(
                f"No active sharing protocol | protocol_type={self.protocol_type.value}"
            )
            return 0

        self._is_sharing = True
        shared = 0
        try:
            for node in self.public_nodes():
                started = time.perf_counter()
                try:
                    await self._bus.publish_simple(
                        EnumLearningEventType.KNOWLEDGE_SHARED.value,
                        ENGINE_SOURCE,
                        ModelKnowledgeSharedPayload(
                            knowledge_id=node.id,
                            protocol=protocol.name,
                            type=node.type,
                            confidence=node.confidence,
                        ),
                        context={"component": ENGINE_SOURCE},
                    )
                except Exception as e:
                    logger.error(
                        f"Failed to share knowledge | knowledge_id={node.id} | "
                        f"protocol={protocol.name} | error={e}"
                    )
                    continue
                latency_ms = (time.perf_counter() - started) * 1000.0
                shared += 1
                self.stats.shared_items += 1
                self.stats.average_latency_ms += (
                    latency_ms - self.stats.average_latency_ms
                ) / self.stats.shared_items
                node.sharing.last_shared = utc_now()
        finally:
            self._is_sharing = False
            self._update_success_rate()

        if shared:
            logger.debug(f"Knowledge shared | nodes={shared} | protocol={protocol.name}")
        return shared

    def record_received(self, knowledge_id: str) -> None:
        """Count an incoming share and stamp the local node, if any."""
        self.stats.received_items += 1
        node = self.nodes.get(knowledge_id)
        if node is not None:
            node.sharing.last_shared = utc_now()
        self._update_success_rate()

    def _update_success_rate(self) -> None:
        total = self.stats.shared_items + self.stats.received_items
        if total > 0:
            self.stats.success_rate = self.stats.shared_items / total


__all__ = ["KnowledgeSharing"]
