# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Broadcaster Protocol (Domain Layer).

Defines how application services push events to clients without knowing
anything about the transport. Payloads are passed positionally; an event
with no payload is emitted with no arguments.
"""

from abc import ABC, abstractmethod
from typing import Any, Set


class BroadcasterProtocol(ABC):
    """
    Protocol for role-based event delivery.

    Implementations keep named broadcast groups ("host", "teams",
    "leaderboard") and deliver events to one connection, one group, or
    every connected client.
    """

    @abstractmethod
    async def emit_to_all(self, event: str, *payload: Any) -> None:
        """Send an event to every connected client."""
        pass

    @abstractmethod
    async def emit_to_group(self, group: str, event: str, *payload: Any) -> None:
        """Send an event to every member of a broadcast group."""
        pass

    @abstractmethod
    async def emit_to_connection(self, connection_id: str, event: str, *payload: Any) -> None:
        """Send an event to a single connection."""
        pass

    @abstractmethod
    def add_to_group(self, connection_id: str, group: str) -> None:
        """Subscribe a connection to a broadcast group."""
        pass

    @abstractmethod
    def remove_from_group(self, connection_id: str, group: str) -> None:
        """Unsubscribe a connection from a broadcast group (no-op if absent)."""
        pass

    @abstractmethod
    def remove_from_all_groups(self, connection_id: str) -> Set[str]:
        """
        Unsubscribe a connection from every group.

        Returns:
            Names of the groups the connection was removed from
        """
        pass
