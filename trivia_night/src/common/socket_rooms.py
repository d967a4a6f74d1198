# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Broadcast Group Constants

Centralized names for the role-based broadcast groups to eliminate magic
strings across handlers and services.
"""


class SocketRooms:
    """
    Role-based broadcast group names.

    - HOST: dashboard clients that drive the game
    - TEAMS: clients that joined successfully as a team
    - LEADERBOARD: passive big-screen viewers

    Usage:
        broadcaster.add_to_group(sid, SocketRooms.TEAMS)
    """

    HOST = "host"
    TEAMS = "teams"
    LEADERBOARD = "leaderboard"

    ALL = (HOST, TEAMS, LEADERBOARD)

    @staticmethod
    def validate_room_name(room_name: str) -> bool:
        """
        Validate that a room name is one of the known groups.

        Example:
            >>> SocketRooms.validate_room_name("teams")
            True
            >>> SocketRooms.validate_room_name("playlists")
            False
        """
        return room_name in SocketRooms.ALL
