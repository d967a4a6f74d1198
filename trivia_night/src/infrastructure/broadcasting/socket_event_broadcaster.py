# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Socket.IO implementation of the broadcaster protocol.

Group fan-out walks the BroadcastGroups registry and emits to each member
session; "all" uses the server-wide emit.
"""

from typing import Any, Optional, Set

import socketio

from trivia_night.src.domain.protocols.broadcaster_protocol import BroadcasterProtocol
from trivia_night.src.infrastructure.broadcasting.broadcast_groups import BroadcastGroups
from trivia_night.src.monitoring import get_logger

logger = get_logger(__name__)


def _event_name(event: Any) -> str:
    # Enum members hash by name, so python-socketio must see the plain string
    return getattr(event, "value", event)


class SocketEventBroadcaster(BroadcasterProtocol):
    """Delivers events through a ``socketio.AsyncServer``."""

    def __init__(self, sio: socketio.AsyncServer, groups: Optional[BroadcastGroups] = None):
        """
        Args:
            sio: Socket.IO server used for delivery
            groups: Group registry (a fresh one is created if omitted)
        """
        self.sio = sio
        self.groups = groups or BroadcastGroups()

    async def emit_to_all(self, event: str, *payload: Any) -> None:
        await self.sio.emit(_event_name(event), payload)

    async def emit_to_group(self, group: str, event: str, *payload: Any) -> None:
        members = self.groups.members(group)
        logger.debug(f"Emitting {_event_name(event)} to group {group} ({len(members)} members)")
        for connection_id in members:
            await self.emit_to_connection(connection_id, event, *payload)

    async def emit_to_connection(self, connection_id: str, event: str, *payload: Any) -> None:
        await self.sio.emit(_event_name(event), payload, to=connection_id)

    def add_to_group(self, connection_id: str, group: str) -> None:
        self.groups.join(connection_id, group)

    def remove_from_group(self, connection_id: str, group: str) -> None:
        self.groups.leave(connection_id, group)

    def remove_from_all_groups(self, connection_id: str) -> Set[str]:
        return self.groups.leave_all(connection_id)
