"""
Noughts - Two-player noughts and crosses engine

A small, deterministic engine for a 3x3 grid game. It provides:
- Board state with single-occupancy placement
- A turn controller with win and tie detection
- Independent, in-memory game sessions
- Pydantic response models for presentation layers
"""

from .engine_core import Board, Cell, Player, TurnResult, TurnKind, RejectReason
from .engine_core import NoughtsError, InvalidMarkError, InvalidIndexError
from .session import GameSession, GameStatus, SessionManager

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Cell",
    "Player",
    "TurnResult",
    "TurnKind",
    "RejectReason",
    "NoughtsError",
    "InvalidMarkError",
    "InvalidIndexError",
    "GameSession",
    "GameStatus",
    "SessionManager",
]
