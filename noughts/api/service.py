"""
API Service - Business logic layer between a presentation layer and the engine.

The service:
1. Translates requests to session calls
2. Manages sessions
3. Formats responses as pydantic models

Bad input becomes an ErrorResponse rather than an exception, so a UI can
show it without its own try/except. This layer is framework-agnostic.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union

from .schemas import (
    # Requests
    CreateSessionRequest,
    SetNamesRequest,
    # Responses
    GameStateResponse,
    TurnResponse,
    EndSessionResponse,
    ErrorResponse,
    # Shared
    PlayerInfo,
    # Enums
    CellValue,
    GameStatusValue,
    TurnKind,
    RejectReasonValue,
    ErrorCode,
)
from ..engine_core.errors import InvalidIndexError
from ..engine_core.player import Player
from ..engine_core.result import TIE_MESSAGE, win_message
from ..session import SessionManager, GameSession, GameStatus


def player_info(player: Player, session: GameSession) -> PlayerInfo:
    return PlayerInfo(
        name=player.name,
        mark=CellValue(player.mark.value),
        is_current_turn=(
            player is session.get_current_player() and not session.is_over
        ),
    )


def status_text(session: GameSession) -> str:
    """The status line a renderer shows under the board."""
    if session.status is GameStatus.WON:
        return win_message(session.winner.name)
    if session.status is GameStatus.TIED:
        return TIE_MESSAGE
    player = session.get_current_player()
    return f"Current Turn: {player.name} ({player.mark.value})"


def build_state(session: GameSession) -> GameStateResponse:
    """Snapshot a session as a GameStateResponse."""
    line = session.winning_line
    return GameStateResponse(
        session_id=session.session_id,
        board=[CellValue(c.value) for c in session.get_board()],
        players=[player_info(p, session) for p in session.players],
        current_player=player_info(session.get_current_player(), session),
        status=GameStatusValue(session.status.value),
        winner=player_info(session.winner, session) if session.winner else None,
        winning_line=list(line) if line else None,
        move_count=session.move_count,
        status_text=status_text(session),
    )


@dataclass
class GameService:
    """
    Command/query facade for presentation layers.

    Usage:
        service = GameService()

        state = service.create_session(CreateSessionRequest(player1_name="Ann"))
        turn = service.play_turn(state.session_id, 4)

        if isinstance(turn, ErrorResponse):
            show_error(turn.message)
        elif turn.kind == TurnKind.TERMINAL:
            show_banner(turn.message)
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error_code=ErrorCode.SESSION_NOT_FOUND,
            message=f"Session not found: {session_id}",
            session_id=session_id,
        )

    def create_session(self, request: CreateSessionRequest | None = None) -> GameStateResponse:
        """Start a new session and return its initial state."""
        request = request or CreateSessionRequest()
        session = self.session_manager.create_session(
            player1_name=request.player1_name,
            player2_name=request.player2_name,
        )
        return build_state(session)

    def get_state(self, session_id: str) -> Union[GameStateResponse, ErrorResponse]:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return build_state(session)

    def play_turn(self, session_id: str, index: int) -> Union[TurnResponse, ErrorResponse]:
        """
        Play the current player's mark at index.

        A rejected move is a normal TurnResponse with kind=REJECTED;
        only an unknown session or an out-of-range index is an error.
        """
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)

        try:
            result = session.play_turn(index)
        except InvalidIndexError as e:
            return ErrorResponse(
                error_code=ErrorCode.INVALID_INDEX,
                message=str(e),
                session_id=session_id,
            )

        return TurnResponse(
            kind=TurnKind(result.kind.value),
            index=result.index,
            player=player_info(result.player, session),
            reason=RejectReasonValue(result.reason.value) if result.reason else None,
            message=result.message,
            winning_line=list(result.winning_line) if result.winning_line else None,
            state=build_state(session),
        )

    def reset_game(self, session_id: str) -> Union[GameStateResponse, ErrorResponse]:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.reset_game()
        return build_state(session)

    def set_player_names(
        self, session_id: str, request: SetNamesRequest
    ) -> Union[GameStateResponse, ErrorResponse]:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.set_player_names(request.player1_name, request.player2_name)
        return build_state(session)

    def end_session(self, session_id: str) -> Union[EndSessionResponse, ErrorResponse]:
        if not self.session_manager.end_session(session_id):
            return self._not_found(session_id)
        return EndSessionResponse(session_id=session_id, ended=True)
