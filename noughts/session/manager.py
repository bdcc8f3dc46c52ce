"""
Session Manager - Creates and tracks independent game sessions.

Each session owns its own board and players; nothing is shared between
them. Sessions live in memory only and are dropped on end_session or
when the process exits.
"""

from __future__ import annotations
import logging
import uuid

from ..config import GameConfig
from .game import GameSession

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with default or supplied player names
    - Look sessions up by id
    - Forget sessions that are finished with

    No persistence - sessions are in-memory only.
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._sessions: dict[str, GameSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create_session(
        self,
        player1_name: str | None = None,
        player2_name: str | None = None,
    ) -> GameSession:
        """
        Create a new game session.

        Args:
            player1_name: Name for the X player (default from config)
            player2_name: Name for the O player (default from config)

        Returns:
            New GameSession, X to move
        """
        session_id = str(uuid.uuid4())
        session = GameSession(config=self.config, session_id=session_id)
        session.set_player_names(player1_name, player2_name)

        self._sessions[session_id] = session
        logger.info("Created session %s", session_id)
        return session

    def get_session(self, session_id: str) -> GameSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        logger.info("Ended session %s", session_id)
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all live sessions."""
        return list(self._sessions)
