# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Question Lifecycle Controller (Application Layer).

push -> answers come in -> clear or replace, plus the full game reset.
"""

from typing import Any, Optional

from trivia_night.src.common.socket_events import OutboundEvent
from trivia_night.src.common.socket_rooms import SocketRooms
from trivia_night.src.config.game_config import DEFAULT_QUESTION_TYPE
from trivia_night.src.domain.models.question import Question
from trivia_night.src.domain.protocols.broadcaster_protocol import BroadcasterProtocol
from trivia_night.src.domain.session.session_state import SessionState
from trivia_night.src.application.services.display_coordinator_application_service import (
    DisplayCoordinatorApplicationService,
)
from trivia_night.src.monitoring import get_logger

logger = get_logger(__name__)


class QuestionLifecycleApplicationService:
    """Pushes and clears questions and resets the whole game."""

    def __init__(
        self,
        state: SessionState,
        broadcaster: BroadcasterProtocol,
        display: DisplayCoordinatorApplicationService,
    ):
        self._state = state
        self._broadcaster = broadcaster
        self._display = display

    async def push_question(self, text: Any, question_type: Any = None) -> Optional[Question]:
        """
        Make a new question current.

        Starts a fresh round: every team's answer, the reveal set and the
        highlight are cleared. Text that is empty after trimming is ignored.

        Args:
            text: Question text
            question_type: Answer widget type, "text" when missing

        Returns:
            The new Question, or None if the text was empty
        """
        trimmed = text.strip() if isinstance(text, str) else ""
        if not trimmed:
            logger.warning("Ignoring question with empty text")
            return None

        self._state.question_count += 1
        question = Question(
            text=trimmed,
            number=self._state.question_count,
            type=question_type if isinstance(question_type, str) and question_type else DEFAULT_QUESTION_TYPE,
        )
        self._state.current_question = question
        self._state.question_history.append(question)
        self._state.revealed_answers.clear()
        self._state.highlight = None
        for team in self._state.teams.values():
            team.answer = None

        logger.info(f"Question {question.number} pushed ({question.type}): {question.text}")

        await self._display.broadcast_highlight()
        await self._broadcaster.emit_to_group(
            SocketRooms.TEAMS, OutboundEvent.QUESTION_NEW.value, question.to_dict()
        )
        await self._display.broadcast_host_state()
        await self._display.broadcast_leaderboard()
        return question

    async def clear_question(self) -> None:
        """Take the current question down. History, scores and answers stay."""
        self._state.current_question = None
        logger.info("Question cleared")

        await self._broadcaster.emit_to_group(SocketRooms.TEAMS, OutboundEvent.QUESTION_CLEAR.value)
        await self._display.broadcast_host_state()

    async def reset_game(self) -> None:
        """Wipe the session back to its initial state and tell everyone."""
        self._state.reset()
        logger.info("Game reset")

        await self._broadcaster.emit_to_all(OutboundEvent.GAME_RESET.value)
        await self._display.broadcast_highlight()
        await self._display.broadcast_leaderboard()
        await self._display.broadcast_host_state()
