# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
WebSocket Event Handlers

One handler class per client role:
- ConnectionHandlers: Client connection lifecycle
- HostHandlers: Host dashboard commands
- TeamHandlers: Team join and answer submission
- DisplayHandlers: Passive display viewer subscription
"""

from trivia_night.src.routes.handlers.connection_handlers import ConnectionHandlers
from trivia_night.src.routes.handlers.host_handlers import HostHandlers
from trivia_night.src.routes.handlers.team_handlers import TeamHandlers
from trivia_night.src.routes.handlers.display_handlers import DisplayHandlers

__all__ = [
    "ConnectionHandlers",
    "HostHandlers",
    "TeamHandlers",
    "DisplayHandlers",
]
