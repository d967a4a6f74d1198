# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Display Handlers for WebSocket Events

Passive big-screen viewers announce themselves once and then only listen.
"""

from typing import Any

import socketio

from trivia_night.src.application.bootstrap import GameServices
from trivia_night.src.common.socket_events import DisplayEvent
from trivia_night.src.common.socket_rooms import SocketRooms
from trivia_night.src.monitoring import get_logger
from trivia_night.src.services.error.unified_error_decorator import handle_socket_errors

logger = get_logger(__name__)


class DisplayHandlers:
    """Handles display viewer subscription."""

    def __init__(self, sio: socketio.AsyncServer, services: GameServices):
        self.sio = sio
        self.services = services

    def register(self) -> None:
        """Register the 'leaderboard:join' handler."""
        services = self.services

        @self.sio.on(DisplayEvent.JOIN.value)
        @handle_socket_errors()
        async def handle_display_join(sid: str, data: Any = None) -> None:
            """Subscribe a viewer and send it the full current picture.

            A viewer may join mid-game, so it gets mode, highlight,
            leaderboard, answer board (answers mode only) and the current
            question right away instead of waiting for the next change.
            """
            logger.info(f"Display viewer joined: {sid}")
            async with services.event_lock:
                services.broadcaster.add_to_group(sid, SocketRooms.LEADERBOARD)
                await services.display.send_catch_up(sid)
