# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Tests for the domain models."""

import dataclasses

import pytest

from trivia_night.src.domain.models.display import DisplayMode, Highlight
from trivia_night.src.domain.models.question import Question
from trivia_night.src.domain.models.team import DisconnectedTeam, Team


class TestTeam:
    def test_defaults(self):
        team = Team(connection_id="sid-1", name="Owls")

        assert team.score == 0
        assert team.answer is None

    def test_name_key_is_lowercase(self):
        assert Team(connection_id="sid-1", name="Quiz Wizards").name_key == "quiz wizards"

    def test_to_dict_uses_connection_as_id(self):
        team = Team(connection_id="sid-1", name="Owls", score=5, answer="Paris")

        assert team.to_dict() == {"id": "sid-1", "name": "Owls", "score": 5, "answer": "Paris"}

    def test_snapshot(self):
        team = Team(connection_id="sid-1", name="Owls", score=5, answer="Paris")

        assert team.snapshot() == DisconnectedTeam(name="Owls", score=5, answer="Paris")

    def test_snapshot_is_immutable(self):
        snapshot = Team(connection_id="sid-1", name="Owls").snapshot()

        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.score = 100


class TestQuestion:
    def test_default_type(self):
        assert Question(text="Q", number=1).type == "text"

    def test_to_dict(self):
        assert Question(text="Draw it", number=3, type="draw").to_dict() == {
            "text": "Draw it",
            "number": 3,
            "type": "draw",
        }


class TestDisplay:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("leaderboard", DisplayMode.LEADERBOARD),
            ("answers", DisplayMode.ANSWERS),
            ("Answers", None),
            ("podium", None),
            (None, None),
            (["answers"], None),
        ],
    )
    def test_parse(self, raw, expected):
        assert DisplayMode.parse(raw) is expected

    def test_highlight_to_dict(self):
        assert Highlight(name="Owls", answer=None).to_dict() == {"name": "Owls", "answer": None}
