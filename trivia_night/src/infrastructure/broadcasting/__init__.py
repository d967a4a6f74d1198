# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

from trivia_night.src.infrastructure.broadcasting.broadcast_groups import BroadcastGroups
from trivia_night.src.infrastructure.broadcasting.socket_event_broadcaster import (
    SocketEventBroadcaster,
)

__all__ = ["BroadcastGroups", "SocketEventBroadcaster"]
