# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Team Handlers for WebSocket Events

Events sent by team clients: joining under a name and submitting answers.
"""

from typing import Any

import socketio

from trivia_night.src.application.bootstrap import GameServices
from trivia_night.src.common.socket_events import OutboundEvent, TeamEvent
from trivia_night.src.monitoring import get_logger
from trivia_night.src.monitoring.core.exceptions import ValidationError
from trivia_night.src.services.error.unified_error_decorator import handle_socket_errors
from trivia_night.src.utils.payload_utils import as_payload

logger = get_logger(__name__)


class TeamHandlers:
    """Handles team client events."""

    def __init__(self, sio: socketio.AsyncServer, services: GameServices):
        """Initialize the team handlers.

        Args:
            sio: The Socket.IO server instance for event registration
            services: The game services shared by all handlers
        """
        self.sio = sio
        self.services = services

    def register(self) -> None:
        """Register 'team:join' and 'team:submit' handlers."""
        services = self.services

        @self.sio.on(TeamEvent.JOIN.value)
        @handle_socket_errors()
        async def handle_team_join(sid: str, data: Any = None) -> None:
            """Join as a team, or rejoin after a dropped connection.

            Side Effects:
                - On success: join:success to the caller, then leaderboard
                  and host:state rebroadcasts
                - On a rejected name: join:error with a readable message to
                  the caller only; nothing else changes
            """
            name = as_payload(data).get("name")
            async with services.event_lock:
                try:
                    await services.roster.join(sid, name)
                except ValidationError as e:
                    logger.info(f"Join rejected for {sid}: {e}")
                    await services.broadcaster.emit_to_connection(
                        sid, OutboundEvent.JOIN_ERROR.value, str(e)
                    )

        @self.sio.on(TeamEvent.SUBMIT.value)
        @handle_socket_errors()
        async def handle_team_submit(sid: str, data: Any = None) -> None:
            answer = as_payload(data).get("answer")
            async with services.event_lock:
                await services.roster.submit_answer(sid, answer)
