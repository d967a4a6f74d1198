# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Team Models (Domain Layer).

A Team is keyed by its connection while connected. When the connection
drops, its name, score and answer are kept as a DisconnectedTeam so the
same team can pick up where it left off.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Team:
    """
    An active team.

    Attributes:
        connection_id: Socket.IO session id of the team's client
        name: Display name, trimmed and unique (case-insensitive)
        score: Current score, never negative
        answer: Answer to the current question; None until submitted
    """
    connection_id: str
    name: str
    score: int = 0
    answer: Optional[str] = None

    @property
    def name_key(self) -> str:
        """Case-insensitive identity of the name."""
        return self.name.lower()

    def to_dict(self) -> Dict[str, Any]:
        """Host dashboard representation; the connection id doubles as the team id."""
        return {
            "id": self.connection_id,
            "name": self.name,
            "score": self.score,
            "answer": self.answer,
        }

    def snapshot(self) -> "DisconnectedTeam":
        return DisconnectedTeam(name=self.name, score=self.score, answer=self.answer)


@dataclass(frozen=True)
class DisconnectedTeam:
    """Saved state of a team whose connection dropped."""
    name: str
    score: int
    answer: Optional[str]
