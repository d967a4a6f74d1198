# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Display Models (Domain Layer).

What the shared big screen renders: either the leaderboard or the answer
board, optionally with one team spotlighted full-screen.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class DisplayMode(Enum):
    """Aggregate view rendered by passive display viewers."""
    LEADERBOARD = "leaderboard"
    ANSWERS = "answers"

    @classmethod
    def parse(cls, value: Any) -> Optional["DisplayMode"]:
        """Return the matching mode, or None for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Highlight:
    """
    Spotlighted team.

    The answer is captured when the host highlights the team; a later
    resubmission does not change what is on screen.
    """
    name: str
    answer: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "answer": self.answer}
