# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Roster Manager (Application Layer).

Team join/rejoin, answer submission, scoring, removal and disconnects.

Active teams are addressed by connection id; teams whose connection dropped
are kept by lowercased name so rejoining under the same name restores their
score and answer. Requests naming an unknown team are ignored on purpose:
the host dashboard may act on a team that disconnected a moment earlier.
"""

from typing import Any, Dict

from trivia_night.src.common.socket_events import OutboundEvent
from trivia_night.src.common.socket_rooms import SocketRooms
from trivia_night.src.config.game_config import MAX_TEAM_NAME_LENGTH
from trivia_night.src.domain.models.display import DisplayMode
from trivia_night.src.domain.models.team import Team
from trivia_night.src.domain.protocols.broadcaster_protocol import BroadcasterProtocol
from trivia_night.src.domain.session.session_state import SessionState
from trivia_night.src.application.services.display_coordinator_application_service import (
    DisplayCoordinatorApplicationService,
)
from trivia_night.src.monitoring import get_logger
from trivia_night.src.monitoring.core.exceptions import (
    TeamNameRequiredError,
    TeamNameTakenError,
    TeamNameTooLongError,
)
from trivia_night.src.utils.score_utils import clamp_score, coerce_int

logger = get_logger(__name__)


class RosterApplicationService:
    """Manages the active roster and the disconnected-team snapshots."""

    def __init__(
        self,
        state: SessionState,
        broadcaster: BroadcasterProtocol,
        display: DisplayCoordinatorApplicationService,
    ):
        """
        Args:
            state: Shared session state
            broadcaster: Event delivery (used for direct replies and group membership)
            display: Coordinator that rebroadcasts views after each change
        """
        self._state = state
        self._broadcaster = broadcaster
        self._display = display

    def validate_name(self, name: Any) -> str:
        """
        Normalize and validate a requested team name.

        Returns:
            The trimmed name

        Raises:
            TeamNameRequiredError: Name is empty after trimming
            TeamNameTooLongError: Name is longer than MAX_TEAM_NAME_LENGTH
            TeamNameTakenError: An active team already uses the name (any case)
        """
        trimmed = name.strip() if isinstance(name, str) else ""
        if not trimmed:
            raise TeamNameRequiredError()
        if len(trimmed) > MAX_TEAM_NAME_LENGTH:
            raise TeamNameTooLongError(MAX_TEAM_NAME_LENGTH)
        if self._state.is_name_taken(trimmed):
            raise TeamNameTakenError(trimmed)
        return trimmed

    async def join(self, connection_id: str, name: Any) -> Dict[str, Any]:
        """
        Register the connection as a team.

        A team that disconnected earlier under the same name (any case)
        gets its score and answer back.

        Returns:
            The join:success payload sent to the caller

        Raises:
            ValidationError: If the name is rejected; state is unchanged
        """
        trimmed = self.validate_name(name)

        saved = self._state.disconnected.pop(trimmed.lower(), None)
        team = Team(
            connection_id=connection_id,
            name=trimmed,
            score=saved.score if saved else 0,
            answer=saved.answer if saved else None,
        )
        self._state.teams[connection_id] = team
        self._broadcaster.add_to_group(connection_id, SocketRooms.TEAMS)

        if saved:
            logger.info(f"Team rejoined: {trimmed} (score {team.score})")
        else:
            logger.info(f"Team joined: {trimmed}")

        question = self._state.current_question
        payload = {"name": trimmed, "question": question.to_dict() if question else None}
        await self._broadcaster.emit_to_connection(
            connection_id, OutboundEvent.JOIN_SUCCESS.value, payload
        )
        await self._display.broadcast_leaderboard()
        await self._display.broadcast_host_state()
        return payload

    async def submit_answer(self, connection_id: str, answer: Any) -> bool:
        """
        Store a team's answer to the current question.

        Ignored when the connection is not a team or no question is active.
        An empty answer is stored as "" and counts as submitted.

        Returns:
            True if the answer was stored
        """
        team = self._state.teams.get(connection_id)
        if team is None or self._state.current_question is None:
            logger.debug(f"Ignoring answer from {connection_id}: no team or no active question")
            return False

        team.answer = answer.strip() if isinstance(answer, str) else ""
        logger.debug(f"Answer received from {team.name}")

        await self._broadcaster.emit_to_connection(connection_id, OutboundEvent.SUBMIT_ACK.value)
        await self._display.broadcast_host_state()
        if self._state.display_mode is DisplayMode.ANSWERS:
            await self._display.broadcast_answers()
        return True

    async def award_points(self, team_id: Any, delta: Any) -> bool:
        """
        Add (or subtract) points. The result never drops below zero.

        Returns:
            True if the team exists
        """
        team = self._get_team(team_id)
        if team is None:
            logger.debug(f"Ignoring points for unknown team: {team_id!r}")
            return False

        team.score = clamp_score(team.score + coerce_int(delta))
        logger.info(f"Score for {team.name}: {team.score}")
        await self._broadcast_roster_change()
        return True

    async def set_score(self, team_id: Any, score: Any) -> bool:
        """
        Overwrite a team's score. Non-numeric input counts as 0.

        Returns:
            True if the team exists
        """
        team = self._get_team(team_id)
        if team is None:
            logger.debug(f"Ignoring score for unknown team: {team_id!r}")
            return False

        team.score = clamp_score(coerce_int(score))
        logger.info(f"Score for {team.name} set to {team.score}")
        await self._broadcast_roster_change()
        return True

    async def remove_team(self, team_id: Any) -> bool:
        """
        Remove a team for good. Its disconnect snapshot, if any, is kept.

        Idempotent: removing an unknown team still rebroadcasts.

        Returns:
            True if a team was removed
        """
        team = self._get_team(team_id)
        if team is not None:
            del self._state.teams[team.connection_id]
            self._broadcaster.remove_from_group(team.connection_id, SocketRooms.TEAMS)
            logger.info(f"Team removed by host: {team.name}")

        await self._broadcast_roster_change()
        return team is not None

    async def disconnect(self, connection_id: str) -> bool:
        """
        Handle a dropped connection.

        A team is saved under its lowercased name, replacing any older save,
        and leaves the active roster.

        Returns:
            True if the connection belonged to a team
        """
        team = self._state.teams.pop(connection_id, None)
        if team is None:
            return False

        self._state.disconnected[team.name_key] = team.snapshot()
        logger.info(f"Team disconnected: {team.name} (score {team.score} saved)")
        await self._broadcast_roster_change()
        return True

    def _get_team(self, team_id: Any):
        if not isinstance(team_id, str):
            return None
        return self._state.teams.get(team_id)

    async def _broadcast_roster_change(self) -> None:
        await self._display.broadcast_leaderboard()
        await self._display.broadcast_host_state()
