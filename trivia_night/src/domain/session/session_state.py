# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Session State Store (Domain Layer).

Single authoritative game state shared by every application service. It does
not validate anything on its own; services check their inputs before
mutating it.
"""

from typing import Dict, List, Optional

from trivia_night.src.domain.models.display import DisplayMode, Highlight
from trivia_night.src.domain.models.question import Question
from trivia_night.src.domain.models.team import DisconnectedTeam, Team


class SessionState:
    """
    In-memory state of the one running game.

    Attributes:
        teams: connection_id -> Team, in join order
        disconnected: lowercased name -> DisconnectedTeam
        current_question: Question on screen, or None
        question_count: Number of questions pushed since the last reset
        question_history: Every pushed question, in push order
        display_mode: What the big screen renders
        revealed_answers: Team names whose answer is shown, in reveal order
        highlight: Spotlighted team snapshot, or None
    """

    def __init__(self):
        self.teams: Dict[str, Team] = {}
        self.disconnected: Dict[str, DisconnectedTeam] = {}
        self.current_question: Optional[Question] = None
        self.question_count = 0
        self.question_history: List[Question] = []
        self.display_mode = DisplayMode.LEADERBOARD
        self.revealed_answers: List[str] = []
        self.highlight: Optional[Highlight] = None

    def reset(self) -> None:
        """Return every field to its initial empty value, in place."""
        self.teams.clear()
        self.disconnected.clear()
        self.current_question = None
        self.question_count = 0
        self.question_history.clear()
        self.display_mode = DisplayMode.LEADERBOARD
        self.revealed_answers.clear()
        self.highlight = None

    def find_team_by_name(self, name: str) -> Optional[Team]:
        """Active team with exactly this name."""
        for team in self.teams.values():
            if team.name == name:
                return team
        return None

    def is_name_taken(self, name: str) -> bool:
        """True if an active team already uses this name, ignoring case."""
        key = name.lower()
        return any(team.name_key == key for team in self.teams.values())

    def is_revealed(self, name: str) -> bool:
        return name in self.revealed_answers

    @property
    def highlighted_team_name(self) -> Optional[str]:
        return self.highlight.name if self.highlight else None
