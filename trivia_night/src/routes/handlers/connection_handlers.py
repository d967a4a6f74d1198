# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Connection Handlers for WebSocket Events

This module handles client connection lifecycle events including:
- Initial connection establishment
- Connection acknowledgment
- Disconnection, team snapshotting and group cleanup
"""

import time
from typing import Any, Dict, Optional

import socketio

from trivia_night.src.application.bootstrap import GameServices
from trivia_night.src.common.socket_events import OutboundEvent
from trivia_night.src.monitoring import get_logger
from trivia_night.src.services.error.unified_error_decorator import handle_socket_errors

logger = get_logger(__name__)


class ConnectionHandlers:
    """Handles WebSocket client connection lifecycle events.

    This handler is responsible for:
    - Sending connection acknowledgments
    - Saving a disconnecting team so it can rejoin with its score
    - Removing the connection from every broadcast group
    """

    def __init__(self, sio: socketio.AsyncServer, services: GameServices):
        """Initialize the connection handlers.

        Args:
            sio: The Socket.IO server instance for event registration
            services: The game services shared by all handlers
        """
        self.sio = sio
        self.services = services

    def register(self) -> None:
        """Register 'connect' and 'disconnect' handlers."""

        @self.sio.event
        @handle_socket_errors()
        async def connect(sid: str, environ: Dict[str, Any], auth: Optional[Any] = None) -> None:
            """Acknowledge a new connection.

            The client still has to announce its role (host:join,
            team:join or leaderboard:join) before it receives any game state.
            """
            logger.info(f"Client connected: {sid}")
            await self.services.broadcaster.emit_to_connection(
                sid,
                OutboundEvent.CONNECTION_STATUS.value,
                {"status": "connected", "sid": sid, "server_time": time.time()},
            )

        @self.sio.event
        @handle_socket_errors()
        async def disconnect(sid: str, reason: Optional[Any] = None) -> None:
            """Handle client disconnection.

            Side Effects:
                - A team connection is saved as a disconnected team and
                  leaderboard/host views are rebroadcast
                - The connection leaves every broadcast group
            """
            logger.info(f"Client disconnected: {sid}")
            async with self.services.event_lock:
                self.services.broadcaster.remove_from_all_groups(sid)
                await self.services.roster.disconnect(sid)
