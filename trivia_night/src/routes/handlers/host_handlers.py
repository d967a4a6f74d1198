# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Host Handlers for WebSocket Events

Events sent by the host dashboard: question flow, scoring, team removal,
display control and game reset.
"""

from typing import Any

import socketio

from trivia_night.src.application.bootstrap import GameServices
from trivia_night.src.common.socket_events import HostEvent
from trivia_night.src.common.socket_rooms import SocketRooms
from trivia_night.src.monitoring import get_logger
from trivia_night.src.services.error.unified_error_decorator import handle_socket_errors
from trivia_night.src.utils.payload_utils import as_payload, get_optional_text

logger = get_logger(__name__)


class HostHandlers:
    """Handles host dashboard events.

    Every event runs under the shared event lock so its state change and
    all resulting broadcasts complete before the next event is processed.
    """

    def __init__(self, sio: socketio.AsyncServer, services: GameServices):
        """Initialize the host handlers.

        Args:
            sio: The Socket.IO server instance for event registration
            services: The game services shared by all handlers
        """
        self.sio = sio
        self.services = services

    def register(self) -> None:
        """Register all host:* event handlers."""
        services = self.services

        @self.sio.on(HostEvent.JOIN.value)
        @handle_socket_errors()
        async def handle_host_join(sid: str, data: Any = None) -> None:
            """Subscribe the dashboard to host:state and send it immediately."""
            logger.info(f"Host joined: {sid}")
            async with services.event_lock:
                services.broadcaster.add_to_group(sid, SocketRooms.HOST)
                await services.display.broadcast_host_state()

        @self.sio.on(HostEvent.PUSH_QUESTION.value)
        @handle_socket_errors()
        async def handle_push_question(sid: str, data: Any = None) -> None:
            payload = as_payload(data)
            async with services.event_lock:
                await services.questions.push_question(payload.get("text"), payload.get("type"))

        @self.sio.on(HostEvent.CLEAR_QUESTION.value)
        @handle_socket_errors()
        async def handle_clear_question(sid: str, data: Any = None) -> None:
            async with services.event_lock:
                await services.questions.clear_question()

        @self.sio.on(HostEvent.AWARD_POINTS.value)
        @handle_socket_errors()
        async def handle_award_points(sid: str, data: Any = None) -> None:
            payload = as_payload(data)
            async with services.event_lock:
                await services.roster.award_points(payload.get("teamId"), payload.get("delta"))

        @self.sio.on(HostEvent.SET_SCORE.value)
        @handle_socket_errors()
        async def handle_set_score(sid: str, data: Any = None) -> None:
            payload = as_payload(data)
            async with services.event_lock:
                await services.roster.set_score(payload.get("teamId"), payload.get("score"))

        @self.sio.on(HostEvent.REMOVE_TEAM.value)
        @handle_socket_errors()
        async def handle_remove_team(sid: str, data: Any = None) -> None:
            payload = as_payload(data)
            async with services.event_lock:
                await services.roster.remove_team(payload.get("teamId"))

        @self.sio.on(HostEvent.HIGHLIGHT_TEAM.value)
        @handle_socket_errors()
        async def handle_highlight_team(sid: str, data: Any = None) -> None:
            team_name = get_optional_text(as_payload(data), "teamName")
            async with services.event_lock:
                await services.display.toggle_highlight(team_name)

        @self.sio.on(HostEvent.REVEAL_ANSWER.value)
        @handle_socket_errors()
        async def handle_reveal_answer(sid: str, data: Any = None) -> None:
            team_name = get_optional_text(as_payload(data), "teamName")
            async with services.event_lock:
                await services.display.toggle_reveal(team_name)

        @self.sio.on(HostEvent.RESET_GAME.value)
        @handle_socket_errors()
        async def handle_reset_game(sid: str, data: Any = None) -> None:
            logger.info(f"Game reset requested by {sid}")
            async with services.event_lock:
                await services.questions.reset_game()

        @self.sio.on(HostEvent.SET_DISPLAY.value)
        @handle_socket_errors()
        async def handle_set_display(sid: str, data: Any = None) -> None:
            mode = as_payload(data).get("mode")
            async with services.event_lock:
                await services.display.set_display_mode(mode)
