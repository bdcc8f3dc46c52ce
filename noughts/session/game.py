"""
Game Session - The turn controller.

One session is one table: two players, one board, and a pointer to
whose turn it is. The session runs the per-move protocol:

1. Place the current player's mark (rejected if the cell is taken)
2. Check whether that mark completed one of the 8 lines
3. Otherwise check for a full board (tie)
4. Otherwise hand the turn to the other player

Once a game is won or tied, moves are rejected until reset_game().
Sessions are reusable: reset_game() starts a new round with the same
players and names.
"""

from __future__ import annotations
from enum import Enum
import logging

from ..config import GameConfig
from ..engine_core.board import Board, Cell, CELL_COUNT
from ..engine_core.player import Player
from ..engine_core.result import TurnResult, RejectReason

logger = logging.getLogger(__name__)

WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class GameStatus(Enum):
    """Where the current round stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


def find_line(cells: list[Cell], mark: Cell) -> tuple[int, int, int] | None:
    """Return the first winning line fully held by mark, if any."""
    for line in WINNING_LINES:
        if all(cells[i] is mark for i in line):
            return line
    return None


class GameSession:
    """
    Turn controller for a two-player game.

    Usage:
        game = GameSession()
        game.set_player_names("Alice", "Bob")

        result = game.play_turn(4)
        if result.is_rejected:
            ...  # ask the same player again
        elif result.is_terminal:
            print(result.message)
            game.reset_game()
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        session_id: str | None = None,
    ):
        config = config or GameConfig()
        self.session_id = session_id
        self._board = Board()
        self._player1 = Player(config.player1_name, Cell.X)
        self._player2 = Player(config.player2_name, Cell.O)
        self._current = self._player1
        self._status = GameStatus.IN_PROGRESS
        self._winner: Player | None = None
        self._winning_line: tuple[int, int, int] | None = None

    def __repr__(self) -> str:
        return (
            f"GameSession(id={self.session_id!r}, status={self._status.value}, "
            f"current={self._current.name!r}, board={self._board!r})"
        )

    # -- queries ---------------------------------------------------------

    @property
    def players(self) -> tuple[Player, Player]:
        return (self._player1, self._player2)

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Player | None:
        """The winning player, or None unless status is WON."""
        return self._winner

    @property
    def winning_line(self) -> tuple[int, int, int] | None:
        return self._winning_line

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def move_count(self) -> int:
        return CELL_COUNT - len(self._board.empty_indices())

    def get_current_player(self) -> Player:
        """
        The player whose move is next.

        After a win this stays on the winner; after a tie it stays on the
        player who made the last move. Only meaningful again after reset.
        """
        return self._current

    def get_board(self) -> list[Cell]:
        return self._board.get_board()

    def other_player(self, player: Player) -> Player:
        return self._player2 if player is self._player1 else self._player1

    # -- commands --------------------------------------------------------

    def play_turn(self, index: int) -> TurnResult:
        """
        Play the current player's mark at index.

        Returns:
            TurnResult - REJECTED, CONTINUE or TERMINAL

        Raises:
            InvalidIndexError: index is not an int in 0..8
        """
        mover = self._current

        if self.is_over:
            # still validate so bad input is never silently ignored
            self._board.cell(index)
            logger.debug("Rejected move at %s: game is over", index)
            return TurnResult.rejected(index, mover, RejectReason.GAME_OVER)

        if not self._board.place_mark(index, mover.mark):
            return TurnResult.rejected(index, mover, RejectReason.CELL_OCCUPIED)

        cells = self._board.get_board()

        line = find_line(cells, mover.mark)
        if line is not None:
            self._status = GameStatus.WON
            self._winner = mover
            self._winning_line = line
            logger.info("%s (%s) wins on line %s", mover.name, mover.mark, line)
            return TurnResult.won(index, mover, line)

        if self._board.is_full():
            self._status = GameStatus.TIED
            logger.info("Game tied, %s (%s) made the last move", mover.name, mover.mark)
            return TurnResult.tied(index, mover)

        self._current = self.other_player(mover)
        return TurnResult.continued(index, mover)

    def reset_game(self) -> None:
        """Clear the board and give the first move back to X. Names are kept."""
        self._board.reset_board()
        self._current = self._player1
        self._status = GameStatus.IN_PROGRESS
        self._winner = None
        self._winning_line = None
        logger.debug("Game reset")

    def set_player_names(self, name1: str | None = None, name2: str | None = None) -> None:
        """
        Rename the players. Empty or missing names leave the current name.
        """
        if name1:
            self._player1.name = name1
        if name2:
            self._player2.name = name2
        logger.debug("Player names: %r, %r", self._player1.name, self._player2.name)
