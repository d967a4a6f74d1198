# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Broadcast group registry.

Named subscriber sets kept explicitly in memory rather than delegated to the
transport's room abstraction, so group membership can be inspected and
tested without a running Socket.IO server.
"""

from typing import Dict, List, Set

from trivia_night.src.common.socket_rooms import SocketRooms
from trivia_night.src.monitoring import get_logger

logger = get_logger(__name__)


class BroadcastGroups:
    """
    Registry of group name -> member connection ids.

    Members are kept in join order so fan-out is deterministic.
    """

    def __init__(self):
        self._members: Dict[str, Dict[str, None]] = {
            group: {} for group in SocketRooms.ALL
        }

    def join(self, connection_id: str, group: str) -> None:
        """
        Add a connection to a group.

        Raises:
            ValueError: If the group name is unknown
        """
        if not SocketRooms.validate_room_name(group):
            raise ValueError(f"Unknown broadcast group: {group}")
        self._members[group][connection_id] = None
        logger.debug(f"{connection_id} joined group {group}")

    def leave(self, connection_id: str, group: str) -> bool:
        """Remove a connection from a group. Returns True if it was a member."""
        members = self._members.get(group)
        if members is None or connection_id not in members:
            return False
        del members[connection_id]
        logger.debug(f"{connection_id} left group {group}")
        return True

    def leave_all(self, connection_id: str) -> Set[str]:
        """Remove a connection from every group it belongs to."""
        groups = self.groups_of(connection_id)
        for group in groups:
            self.leave(connection_id, group)
        return groups

    def members(self, group: str) -> List[str]:
        """Connection ids in a group, in join order."""
        return list(self._members.get(group, {}))

    def groups_of(self, connection_id: str) -> Set[str]:
        return {group for group, members in self._members.items() if connection_id in members}

    def is_member(self, connection_id: str, group: str) -> bool:
        return connection_id in self._members.get(group, {})
