"""
Configuration - Construction-time defaults for new sessions.

Environment:
    NOUGHTS_PLAYER1_NAME   Default name for the X player (moves first)
    NOUGHTS_PLAYER2_NAME   Default name for the O player
"""

from __future__ import annotations
from dataclasses import dataclass
import os

DEFAULT_PLAYER1_NAME = "Player 1"
DEFAULT_PLAYER2_NAME = "Player 2"


@dataclass(frozen=True)
class GameConfig:
    """Default player names. Marks are always X (first) and O."""
    player1_name: str = DEFAULT_PLAYER1_NAME
    player2_name: str = DEFAULT_PLAYER2_NAME

    @classmethod
    def from_env(cls) -> GameConfig:
        """Build a config from environment variables, falling back to defaults."""
        return cls(
            player1_name=os.getenv("NOUGHTS_PLAYER1_NAME") or DEFAULT_PLAYER1_NAME,
            player2_name=os.getenv("NOUGHTS_PLAYER2_NAME") or DEFAULT_PLAYER2_NAME,
        )
