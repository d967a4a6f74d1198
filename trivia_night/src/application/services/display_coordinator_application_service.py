# Copyright (c) 2025 Jonathan Piette
# This file is part of TriviaNight and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""
Display Coordinator (Application Layer).

Builds the views every audience renders from the current session state and
pushes them out. Other services call the ``broadcast_*`` methods right after
they mutate state so no client is left looking at a stale view.
"""

from typing import Any, Dict, List, Optional

from trivia_night.src.common.socket_events import OutboundEvent
from trivia_night.src.common.socket_rooms import SocketRooms
from trivia_night.src.domain.models.display import DisplayMode, Highlight
from trivia_night.src.domain.protocols.broadcaster_protocol import BroadcasterProtocol
from trivia_night.src.domain.session.session_state import SessionState
from trivia_night.src.monitoring import get_logger

logger = get_logger(__name__)


class DisplayCoordinatorApplicationService:
    """
    Computes and emits the leaderboard, answer board, highlight and host views.

    Also owns the host actions that only change what is displayed: display
    mode, answer reveals and the highlight spotlight.
    """

    def __init__(self, state: SessionState, broadcaster: BroadcasterProtocol):
        self._state = state
        self._broadcaster = broadcaster

    # MARK: - Views

    def leaderboard_view(self) -> List[Dict[str, Any]]:
        """
        Active teams by score, highest first.

        Ties keep join order (``sorted`` is stable over the insertion-ordered
        roster). Ranks are positional: tied teams get different ranks.
        """
        ranked = sorted(self._state.teams.values(), key=lambda team: team.score, reverse=True)
        return [
            {"rank": position, "name": team.name, "score": team.score}
            for position, team in enumerate(ranked, start=1)
        ]

    def answer_board_view(self) -> Dict[str, Any]:
        """Every active team's answer, with its reveal flag, plus the current question."""
        question = self._state.current_question
        return {
            "question": question.to_dict() if question else None,
            "answers": [
                {
                    "name": team.name,
                    "answer": team.answer,
                    "revealed": self._state.is_revealed(team.name),
                }
                for team in self._state.teams.values()
            ],
        }

    def highlight_view(self) -> Optional[Dict[str, Any]]:
        highlight = self._state.highlight
        return highlight.to_dict() if highlight else None

    def host_view(self) -> Dict[str, Any]:
        """Full dashboard state, including team ids the host uses for scoring."""
        question = self._state.current_question
        return {
            "teams": [team.to_dict() for team in self._state.teams.values()],
            "question": question.to_dict() if question else None,
            "questionHistory": [q.to_dict() for q in self._state.question_history],
            "displayMode": self._state.display_mode.value,
            "revealedAnswers": list(self._state.revealed_answers),
            "highlightedTeamName": self._state.highlighted_team_name,
        }

    # MARK: - Broadcasts

    async def broadcast_leaderboard(self) -> None:
        await self._broadcaster.emit_to_all(
            OutboundEvent.LEADERBOARD_UPDATE.value, self.leaderboard_view()
        )

    async def broadcast_answers(self) -> None:
        await self._broadcaster.emit_to_all(
            OutboundEvent.DISPLAY_ANSWERS.value, self.answer_board_view()
        )

    async def broadcast_highlight(self) -> None:
        await self._broadcaster.emit_to_all(
            OutboundEvent.DISPLAY_HIGHLIGHT.value, self.highlight_view()
        )

    async def broadcast_host_state(self) -> None:
        await self._broadcaster.emit_to_group(
            SocketRooms.HOST, OutboundEvent.HOST_STATE.value, self.host_view()
        )

    async def send_catch_up(self, connection_id: str) -> None:
        """
        Bring a display viewer that joined mid-session up to date.

        Everything goes to the new viewer only; other clients already have it.
        """
        send = self._broadcaster.emit_to_connection
        await send(connection_id, OutboundEvent.DISPLAY_MODE.value, self._state.display_mode.value)
        await send(connection_id, OutboundEvent.DISPLAY_HIGHLIGHT.value, self.highlight_view())
        await send(connection_id, OutboundEvent.LEADERBOARD_UPDATE.value, self.leaderboard_view())
        if self._state.display_mode is DisplayMode.ANSWERS:
            await send(connection_id, OutboundEvent.DISPLAY_ANSWERS.value, self.answer_board_view())
        if self._state.current_question:
            await send(
                connection_id,
                OutboundEvent.QUESTION_NEW.value,
                self._state.current_question.to_dict(),
            )

    # MARK: - Host display actions

    async def set_display_mode(self, mode: Any) -> bool:
        """
        Switch what the big screen renders.

        Args:
            mode: "leaderboard" or "answers"; anything else is ignored

        Returns:
            True if the mode was applied
        """
        display_mode = DisplayMode.parse(mode)
        if display_mode is None:
            logger.warning(f"Ignoring unknown display mode: {mode!r}")
            return False

        self._state.display_mode = display_mode
        logger.info(f"Display mode set to {display_mode.value}")

        await self._broadcaster.emit_to_all(OutboundEvent.DISPLAY_MODE.value, display_mode.value)
        if display_mode is DisplayMode.ANSWERS:
            await self.broadcast_answers()
        else:
            await self.broadcast_leaderboard()
        await self.broadcast_host_state()
        return True

    async def toggle_reveal(self, team_name: Any) -> None:
        """
        Show or hide one team's answer on the answer board.

        The name is not checked against the roster; a name that never
        matches a team simply has no visible effect.
        """
        if not isinstance(team_name, str):
            logger.debug(f"Ignoring reveal toggle for non-string name: {team_name!r}")
            return

        if team_name in self._state.revealed_answers:
            self._state.revealed_answers.remove(team_name)
            logger.debug(f"Answer hidden: {team_name}")
        else:
            self._state.revealed_answers.append(team_name)
            logger.debug(f"Answer revealed: {team_name}")

        await self.broadcast_answers()
        await self.broadcast_host_state()

    async def toggle_highlight(self, team_name: Any) -> None:
        """
        Spotlight a team's answer full-screen, or clear the spotlight.

        Highlighting the team that is already highlighted clears it. An
        unknown name leaves the highlight unchanged.
        """
        current = self._state.highlight
        if current is not None and current.name == team_name:
            self._state.highlight = None
            logger.info(f"Highlight cleared: {team_name}")
        else:
            team = self._state.find_team_by_name(team_name) if isinstance(team_name, str) else None
            if team is None:
                logger.debug(f"Highlight requested for unknown team: {team_name!r}")
                return
            self._state.highlight = Highlight(name=team.name, answer=team.answer)
            logger.info(f"Highlighting team: {team.name}")

        await self.broadcast_highlight()
        await self.broadcast_host_state()
