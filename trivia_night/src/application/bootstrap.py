# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Game session bootstrap.

Wires the session state, the broadcaster and the application services
together once per process.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional

import socketio

from trivia_night.src.application.services.display_coordinator_application_service import (
    DisplayCoordinatorApplicationService,
)
from trivia_night.src.application.services.question_lifecycle_application_service import (
    QuestionLifecycleApplicationService,
)
from trivia_night.src.application.services.roster_application_service import (
    RosterApplicationService,
)
from trivia_night.src.domain.protocols.broadcaster_protocol import BroadcasterProtocol
from trivia_night.src.domain.session.session_state import SessionState
from trivia_night.src.infrastructure.broadcasting.socket_event_broadcaster import (
    SocketEventBroadcaster,
)
from trivia_night.src.monitoring import get_logger

logger = get_logger(__name__)


@dataclass
class GameServices:
    """
    Everything a socket handler needs to serve one game.

    Attributes:
        state: The session state
        broadcaster: Event delivery and broadcast groups
        display: Display coordinator
        roster: Roster manager
        questions: Question lifecycle controller
        event_lock: Serializes event handling so each event, including its
            rebroadcasts, finishes before the next one touches the state
    """
    state: SessionState
    broadcaster: BroadcasterProtocol
    display: DisplayCoordinatorApplicationService
    roster: RosterApplicationService
    questions: QuestionLifecycleApplicationService
    event_lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @classmethod
    def create(
        cls,
        broadcaster: BroadcasterProtocol,
        state: Optional[SessionState] = None,
    ) -> "GameServices":
        """Build the service graph around a broadcaster."""
        state = state or SessionState()
        display = DisplayCoordinatorApplicationService(state, broadcaster)
        services = cls(
            state=state,
            broadcaster=broadcaster,
            display=display,
            roster=RosterApplicationService(state, broadcaster, display),
            questions=QuestionLifecycleApplicationService(state, broadcaster, display),
        )
        logger.info("Initializing GameServices")
        return services

    @classmethod
    def for_socketio(cls, sio: socketio.AsyncServer) -> "GameServices":
        """Build the service graph delivering through a Socket.IO server."""
        return cls.create(SocketEventBroadcaster(sio))
