"""
Board State - The 3x3 grid and its single-occupancy rule.

Cells are addressed by index 0-8, row-major:

     0 | 1 | 2
    ---+---+---
     3 | 4 | 5
    ---+---+---
     6 | 7 | 8

A cell moves from EMPTY to a mark exactly once. The only way back is
reset_board(), which clears the whole grid.
"""

from __future__ import annotations
from enum import Enum
from typing import Sequence
import logging

from .errors import InvalidIndexError, InvalidMarkError

logger = logging.getLogger(__name__)

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Cell(Enum):
    """Contents of a single cell."""
    EMPTY = ""
    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


MARKS = (Cell.X, Cell.O)


def coerce_mark(mark: Cell | str) -> Cell:
    """
    Normalize a mark to Cell.X or Cell.O.

    Accepts the enum members or their string values "X" / "O".
    Raises InvalidMarkError for anything else, including Cell.EMPTY.
    """
    if isinstance(mark, Cell):
        if mark in MARKS:
            return mark
        raise InvalidMarkError(mark)
    if isinstance(mark, str) and mark in ("X", "O"):
        return Cell(mark)
    raise InvalidMarkError(mark)


def check_index(index: int) -> int:
    """Validate a cell index, raising InvalidIndexError if out of range."""
    # bool is an int subclass but never a meaningful cell address
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidIndexError(index)
    if not 0 <= index < CELL_COUNT:
        raise InvalidIndexError(index)
    return index


def split_rows(cells: Sequence) -> list[tuple]:
    """Split 9 row-major cells into three rows, top to bottom."""
    return [
        tuple(cells[r * BOARD_SIZE:(r + 1) * BOARD_SIZE])
        for r in range(BOARD_SIZE)
    ]


class Board:
    """
    Sole owner of the 9-cell grid.

    Usage:
        board = Board()
        board.place_mark(4, Cell.X)   # True
        board.place_mark(4, Cell.O)   # False, cell taken
        board.get_board()             # copy of the 9 cells
    """

    def __init__(self):
        self._cells: list[Cell] = [Cell.EMPTY] * CELL_COUNT

    def __repr__(self) -> str:
        marks = "".join(c.value or "." for c in self._cells)
        return f"Board({marks!r})"

    def get_board(self) -> list[Cell]:
        """Return a copy of the cells; mutating it does not touch the board."""
        return list(self._cells)

    def cell(self, index: int) -> Cell:
        return self._cells[check_index(index)]

    def place_mark(self, index: int, mark: Cell | str) -> bool:
        """
        Write mark into index if the cell is empty.

        Returns:
            True if the mark was placed, False if the cell was occupied.
            On False nothing changes.

        Raises:
            InvalidIndexError: index is not an int in 0..8
            InvalidMarkError: mark is not X or O
        """
        check_index(index)
        mark = coerce_mark(mark)

        if self._cells[index] is not Cell.EMPTY:
            logger.debug("Cell %d already holds %s", index, self._cells[index])
            return False

        self._cells[index] = mark
        logger.debug("Placed %s at %d", mark, index)
        return True

    def reset_board(self) -> None:
        """Set every cell back to EMPTY."""
        self._cells = [Cell.EMPTY] * CELL_COUNT

    def is_full(self) -> bool:
        return all(c is not Cell.EMPTY for c in self._cells)

    def empty_indices(self) -> list[int]:
        """Indices of cells that can still be played."""
        return [i for i, c in enumerate(self._cells) if c is Cell.EMPTY]
