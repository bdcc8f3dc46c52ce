"""
Tests for the API service.

Tests:
- Session lifecycle via the service
- Turn responses for each outcome
- Error handling
"""

import pytest

from ..api.schemas import (
    CreateSessionRequest,
    SetNamesRequest,
    GameStateResponse,
    TurnResponse,
    ErrorResponse,
    EndSessionResponse,
    CellValue,
    GameStatusValue,
    TurnKind,
    RejectReasonValue,
    ErrorCode,
)
from ..api.service import GameService


class TestGameService:
    """Tests for GameService."""

    @pytest.fixture
    def session_id(self, service):
        state = service.create_session(
            CreateSessionRequest(player1_name="Alice", player2_name="Bob")
        )
        return state.session_id

    def test_create_session(self, service):
        state = service.create_session()

        assert isinstance(state, GameStateResponse)
        assert state.session_id is not None
        assert state.board == [CellValue.EMPTY] * 9
        assert state.status == GameStatusValue.IN_PROGRESS
        assert state.current_player.name == "Player 1"
        assert state.current_player.mark == CellValue.X
        assert state.status_text == "Current Turn: Player 1 (X)"

    def test_get_state(self, service, session_id):
        state = service.get_state(session_id)

        assert state.session_id == session_id
        assert [p.name for p in state.players] == ["Alice", "Bob"]
        assert state.players[0].is_current_turn
        assert not state.players[1].is_current_turn

    def test_continue_turn(self, service, session_id):
        turn = service.play_turn(session_id, 4)

        assert isinstance(turn, TurnResponse)
        assert turn.kind == TurnKind.CONTINUE
        assert turn.player.name == "Alice"
        assert turn.state.board[4] == CellValue.X
        assert turn.state.current_player.name == "Bob"
        assert turn.state.status_text == "Current Turn: Bob (O)"

    def test_rejected_turn(self, service, session_id):
        service.play_turn(session_id, 4)
        turn = service.play_turn(session_id, 4)

        assert turn.kind == TurnKind.REJECTED
        assert turn.reason == RejectReasonValue.CELL_OCCUPIED
        assert turn.state.current_player.name == "Bob"
        assert turn.state.move_count == 1

    def test_terminal_turn(self, service, session_id):
        for index in (0, 3, 1, 4):
            service.play_turn(session_id, index)

        turn = service.play_turn(session_id, 2)

        assert turn.kind == TurnKind.TERMINAL
        assert turn.message == "Alice wins!"
        assert turn.winning_line == [0, 1, 2]
        assert turn.state.status == GameStatusValue.WON
        assert turn.state.winner.name == "Alice"
        assert turn.state.status_text == "Alice wins!"
        assert turn.state.status_text == turn.message
        assert not any(p.is_current_turn for p in turn.state.players)

    def test_tie_state(self, service, session_id):
        for index in (0, 1, 2, 4, 3, 5, 7, 6):
            service.play_turn(session_id, index)

        turn = service.play_turn(session_id, 8)

        assert turn.message == "It's a tie!"
        assert turn.state.status == GameStatusValue.TIED
        assert turn.state.winner is None
        assert turn.state.status_text == "It's a tie!"
        assert turn.state.status_text == turn.message

    def test_move_after_game_over(self, service, session_id):
        for index in (0, 3, 1, 4, 2):
            service.play_turn(session_id, index)

        turn = service.play_turn(session_id, 8)

        assert turn.kind == TurnKind.REJECTED
        assert turn.reason == RejectReasonValue.GAME_OVER

    def test_invalid_index(self, service, session_id):
        error = service.play_turn(session_id, 9)

        assert isinstance(error, ErrorResponse)
        assert error.error_code == ErrorCode.INVALID_INDEX
        assert service.get_state(session_id).move_count == 0

    def test_reset_game(self, service, session_id):
        service.play_turn(session_id, 0)

        state = service.reset_game(session_id)

        assert state.board == [CellValue.EMPTY] * 9
        assert state.current_player.name == "Alice"

    def test_set_player_names(self, service, session_id):
        state = service.set_player_names(
            session_id, SetNamesRequest(player1_name="", player2_name="Carol")
        )
        assert [p.name for p in state.players] == ["Alice", "Carol"]

    def test_end_session(self, service, session_id):
        response = service.end_session(session_id)

        assert isinstance(response, EndSessionResponse)
        assert response.ended

        error = service.get_state(session_id)
        assert isinstance(error, ErrorResponse)
        assert error.error_code == ErrorCode.SESSION_NOT_FOUND

    @pytest.mark.parametrize("call", [
        lambda s: s.get_state("missing"),
        lambda s: s.play_turn("missing", 0),
        lambda s: s.reset_game("missing"),
        lambda s: s.set_player_names("missing", SetNamesRequest()),
        lambda s: s.end_session("missing"),
    ])
    def test_unknown_session(self, service, call):
        error = call(service)
        assert isinstance(error, ErrorResponse)
        assert error.error_code == ErrorCode.SESSION_NOT_FOUND
        assert error.session_id == "missing"
