# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

from trivia_night.src.domain.models.display import DisplayMode, Highlight
from trivia_night.src.domain.models.question import Question
from trivia_night.src.domain.models.team import DisconnectedTeam, Team

__all__ = ["DisconnectedTeam", "DisplayMode", "Highlight", "Question", "Team"]
