"""
API Module - In-process interface for presentation layers.

A presentation layer (terminal, GUI, web page) drives a game by:
1. Creating a session
2. Sending play_turn requests with a cell index
3. Redrawing from the returned GameStateResponse
4. Resetting or renaming between rounds

All state is session-scoped. Nothing is persisted.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    SetNamesRequest,
    # Responses
    GameStateResponse,
    TurnResponse,
    EndSessionResponse,
    ErrorResponse,
    # Shared
    PlayerInfo,
    # Enums
    CellValue,
    GameStatusValue,
    TurnKind,
    RejectReasonValue,
    ErrorCode,
)
from .service import GameService, build_state, status_text

__all__ = [
    # Requests
    "CreateSessionRequest",
    "SetNamesRequest",
    # Responses
    "GameStateResponse",
    "TurnResponse",
    "EndSessionResponse",
    "ErrorResponse",
    # Shared
    "PlayerInfo",
    # Enums
    "CellValue",
    "GameStatusValue",
    "TurnKind",
    "RejectReasonValue",
    "ErrorCode",
    # Service
    "GameService",
    "build_state",
    "status_text",
]
