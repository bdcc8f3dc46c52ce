"""
Session Module - Turn control and session bookkeeping.

A session is one table of two players that can play any number of
rounds. Sessions are ephemeral: nothing is persisted.
"""

from .game import GameSession, GameStatus, WINNING_LINES, find_line
from .manager import SessionManager

__all__ = [
    "GameSession",
    "GameStatus",
    "WINNING_LINES",
    "find_line",
    "SessionManager",
]
