"""
Pytest fixtures for Noughts tests.
"""

import pytest

from ..config import GameConfig
from ..engine_core.board import Board
from ..session import GameSession, SessionManager
from ..api.service import GameService


def play_moves(game: GameSession, moves):
    """Play a sequence of indices and return the list of results."""
    return [game.play_turn(i) for i in moves]


@pytest.fixture
def board() -> Board:
    """An empty board."""
    return Board()


@pytest.fixture
def game() -> GameSession:
    """A fresh session with the default names."""
    return GameSession()


@pytest.fixture
def named_game() -> GameSession:
    """A fresh session with Alice as X and Bob as O."""
    return GameSession(config=GameConfig(player1_name="Alice", player2_name="Bob"))


@pytest.fixture
def tied_game(game: GameSession) -> GameSession:
    """A session whose board was filled with no line.

    X O X
    X O O
    O X X
    """
    play_moves(game, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    return game


@pytest.fixture
def manager() -> SessionManager:
    return SessionManager()


@pytest.fixture
def service() -> GameService:
    """Create a fresh game service."""
    return GameService()
