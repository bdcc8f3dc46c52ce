"""
Pydantic Schemas - The contract between a presentation layer and the engine.

A renderer only ever needs these models: the board as 9 cell values,
who is to move, the round status, and what the last move did.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or was ended
- INVALID_INDEX: Cell index outside 0..8
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class CellValue(str, Enum):
    """Cell contents as rendered."""
    EMPTY = ""
    X = "X"
    O = "O"


class GameStatusValue(str, Enum):
    """Round status values."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    TIED = "tied"


class TurnKind(str, Enum):
    """Outcome of a play_turn request."""
    REJECTED = "rejected"
    CONTINUE = "continue"
    TERMINAL = "terminal"


class RejectReasonValue(str, Enum):
    """Why a move was not applied."""
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_INDEX = "INVALID_INDEX"


# =============================================================================
# Shared Models
# =============================================================================

class PlayerInfo(BaseModel):
    """Player information for display."""
    name: str
    mark: CellValue
    is_current_turn: bool = False


class GameStateResponse(BaseModel):
    """Full snapshot of a session, enough to redraw the screen."""
    session_id: Optional[str] = None
    board: list[CellValue] = Field(min_length=9, max_length=9)
    players: list[PlayerInfo] = Field(min_length=2, max_length=2)
    current_player: PlayerInfo
    status: GameStatusValue = GameStatusValue.IN_PROGRESS
    winner: Optional[PlayerInfo] = None
    winning_line: Optional[list[int]] = None
    move_count: int = Field(0, ge=0, le=9)
    status_text: str = Field(description="Current Turn: <name> (<mark>), or the result message")


class TurnResponse(BaseModel):
    """Result of a play_turn request."""
    kind: TurnKind
    index: int = Field(ge=0, le=8)
    player: PlayerInfo
    reason: Optional[RejectReasonValue] = None
    message: Optional[str] = None
    winning_line: Optional[list[int]] = None
    state: GameStateResponse


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a new session."""
    player1_name: Optional[str] = Field(None, description="Name for X; default used if empty")
    player2_name: Optional[str] = Field(None, description="Name for O; default used if empty")


class SetNamesRequest(BaseModel):
    """Rename players. Empty values keep the current name."""
    player1_name: Optional[str] = None
    player2_name: Optional[str] = None


# =============================================================================
# Other Responses
# =============================================================================

class ErrorResponse(BaseModel):
    """Error returned instead of a normal response."""
    error_code: ErrorCode
    message: str
    session_id: Optional[str] = None


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    session_id: str
    ended: bool
