# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Server-Authoritative WebSocket Handlers

Clients announce a role and send commands, but never hold authoritative
state; every view they render is pushed by the server.

This factory creates and registers one handler instance per role:
- ConnectionHandlers: connect / disconnect
- HostHandlers: host dashboard commands
- TeamHandlers: team join and answers
- DisplayHandlers: big-screen viewers
"""

from typing import Optional

import socketio

from trivia_night.src.application.bootstrap import GameServices
from trivia_night.src.monitoring import get_logger
from trivia_night.src.routes.handlers.connection_handlers import ConnectionHandlers
from trivia_night.src.routes.handlers.display_handlers import DisplayHandlers
from trivia_night.src.routes.handlers.host_handlers import HostHandlers
from trivia_night.src.routes.handlers.team_handlers import TeamHandlers

logger = get_logger(__name__)


class TriviaWebSocketHandlers:
    """WebSocket handlers factory for the trivia session.

    The connection gateway of the server: routes each inbound event by name
    to the handler for the sender's role.
    """

    def __init__(self, sio: socketio.AsyncServer, services: Optional[GameServices] = None):
        self.sio = sio
        self.services = services or GameServices.for_socketio(sio)

        self.connection_handlers = ConnectionHandlers(sio, self.services)
        self.host_handlers = HostHandlers(sio, self.services)
        self.team_handlers = TeamHandlers(sio, self.services)
        self.display_handlers = DisplayHandlers(sio, self.services)

        logger.info("TriviaWebSocketHandlers initialized")

    def register(self) -> None:
        """Register every handler class on the Socket.IO server."""
        self.connection_handlers.register()
        self.host_handlers.register()
        self.team_handlers.register()
        self.display_handlers.register()
        logger.info("Trivia WebSocket handlers registered successfully")
