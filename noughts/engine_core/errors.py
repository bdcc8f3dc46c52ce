"""
Engine errors.

Only malformed input raises. An occupied cell or a move after the game
has ended is a normal outcome and is reported through TurnResult.
"""


class NoughtsError(Exception):
    """Base class for all engine errors."""


class InvalidMarkError(NoughtsError, ValueError):
    """A mark other than X or O was supplied."""

    def __init__(self, mark):
        self.mark = mark
        super().__init__(f"Mark must be 'X' or 'O', got {mark!r}")


class InvalidIndexError(NoughtsError, IndexError):
    """A cell index outside 0..8 was supplied."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"Cell index must be an int in 0..8, got {index!r}")
