"""
Turn Results - What happened when a player tried to move.

Every call to GameSession.play_turn yields exactly one of:

- REJECTED: nothing changed (cell taken, or the game is already over)
- CONTINUE: mark placed, the other player is up next
- TERMINAL: mark placed and the game ended (win or tie)

Callers branch on `kind`, never on truthiness: a rejected move and an
accepted one are different things.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .player import Player


TIE_MESSAGE = "It's a tie!"


def win_message(name: str) -> str:
    return f"{name} wins!"


class TurnKind(Enum):
    """The three possible outcomes of a turn."""
    REJECTED = "rejected"
    CONTINUE = "continue"
    TERMINAL = "terminal"


class RejectReason(Enum):
    """Why a move was not applied."""
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TurnResult:
    """
    Result of a single play_turn call.

    Fields beyond `kind` are only set for the variant they belong to:
    `reason` for REJECTED, `message` for TERMINAL, `winning_line` for a
    TERMINAL win.
    """
    kind: TurnKind
    index: int
    player: Player

    reason: RejectReason | None = None
    message: str | None = None
    winning_line: tuple[int, int, int] | None = None

    @classmethod
    def rejected(cls, index: int, player: Player, reason: RejectReason) -> TurnResult:
        """Create a rejection; the board and turn are untouched."""
        return cls(kind=TurnKind.REJECTED, index=index, player=player, reason=reason)

    @classmethod
    def continued(cls, index: int, player: Player) -> TurnResult:
        """Create a result for an accepted move that did not end the game."""
        return cls(kind=TurnKind.CONTINUE, index=index, player=player)

    @classmethod
    def won(cls, index: int, player: Player, line: tuple[int, int, int]) -> TurnResult:
        """Create a terminal result announcing the mover as winner."""
        return cls(
            kind=TurnKind.TERMINAL,
            index=index,
            player=player,
            message=win_message(player.name),
            winning_line=line,
        )

    @classmethod
    def tied(cls, index: int, player: Player) -> TurnResult:
        """Create a terminal result for a full board with no line."""
        return cls(kind=TurnKind.TERMINAL, index=index, player=player, message=TIE_MESSAGE)

    @property
    def is_rejected(self) -> bool:
        return self.kind is TurnKind.REJECTED

    @property
    def is_continue(self) -> bool:
        return self.kind is TurnKind.CONTINUE

    @property
    def is_terminal(self) -> bool:
        return self.kind is TurnKind.TERMINAL

    @property
    def is_win(self) -> bool:
        return self.is_terminal and self.winning_line is not None

    @property
    def is_tie(self) -> bool:
        return self.is_terminal and self.winning_line is None
