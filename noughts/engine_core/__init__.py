"""
Engine Core - Board state, players and turn results.

The engine core is the leaf layer:
1. Board owns the 9 cells and refuses to overwrite a mark
2. Player pairs a display name with a fixed mark
3. TurnResult describes the outcome of one move
"""

from .board import Board, Cell, MARKS, BOARD_SIZE, CELL_COUNT, coerce_mark, split_rows
from .errors import NoughtsError, InvalidMarkError, InvalidIndexError
from .player import Player
from .result import TurnResult, TurnKind, RejectReason, TIE_MESSAGE, win_message

__all__ = [
    "Board",
    "Cell",
    "MARKS",
    "BOARD_SIZE",
    "CELL_COUNT",
    "coerce_mark",
    "split_rows",
    "NoughtsError",
    "InvalidMarkError",
    "InvalidIndexError",
    "Player",
    "TurnResult",
    "TurnKind",
    "RejectReason",
    "TIE_MESSAGE",
    "win_message",
]
