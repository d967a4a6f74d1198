# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Socket.IO event names.

Inbound events are grouped by the role that sends them; outbound events are
what the server pushes to clients.
"""

from enum import Enum


class HostEvent(str, Enum):
    """Events sent by the host dashboard."""
    JOIN = "host:join"
    PUSH_QUESTION = "host:push-question"
    CLEAR_QUESTION = "host:clear-question"
    AWARD_POINTS = "host:award-points"
    SET_SCORE = "host:set-score"
    REMOVE_TEAM = "host:remove-team"
    HIGHLIGHT_TEAM = "host:highlight-team"
    REVEAL_ANSWER = "host:reveal-answer"
    RESET_GAME = "host:reset-game"
    SET_DISPLAY = "host:set-display"


class TeamEvent(str, Enum):
    """Events sent by team clients."""
    JOIN = "team:join"
    SUBMIT = "team:submit"


class DisplayEvent(str, Enum):
    """Events sent by passive display viewers."""
    JOIN = "leaderboard:join"


class OutboundEvent(str, Enum):
    """Events pushed by the server."""
    CONNECTION_STATUS = "connection_status"
    LEADERBOARD_UPDATE = "leaderboard:update"
    DISPLAY_ANSWERS = "display:answers"
    DISPLAY_HIGHLIGHT = "display:highlight"
    DISPLAY_MODE = "display:mode"
    QUESTION_NEW = "question:new"
    QUESTION_CLEAR = "question:clear"
    GAME_RESET = "game:reset"
    JOIN_SUCCESS = "join:success"
    JOIN_ERROR = "join:error"
    SUBMIT_ACK = "submit:ack"
    HOST_STATE = "host:state"
