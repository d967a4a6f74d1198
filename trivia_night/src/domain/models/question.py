# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Question model (Domain Layer)."""

from dataclasses import dataclass
from typing import Any, Dict

from trivia_night.src.config.game_config import DEFAULT_QUESTION_TYPE


@dataclass(frozen=True)
class Question:
    """
    A pushed question.

    Attributes:
        text: Trimmed question text
        number: 1-based push counter
        type: Answer widget the team page should render ("text", "draw", ...)
    """
    text: str
    number: int
    type: str = DEFAULT_QUESTION_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return {"text": self.text, "number": self.number, "type": self.type}
