"""
Players - A display name and a fixed mark.
"""

from __future__ import annotations

from .board import Cell, coerce_mark


class Player:
    """
    One of the two participants in a session.

    The name can be changed at any time; the mark is fixed when the
    player is created. Two players with the same name and mark are still
    different players: turn order follows identity.
    """

    __slots__ = ("name", "_mark")

    def __init__(self, name: str, mark: Cell | str):
        self._mark = coerce_mark(mark)
        self.name = name

    @property
    def mark(self) -> Cell:
        return self._mark

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, mark={self._mark.value!r})"
