"""
Tests for configuration.
"""

from ..config import GameConfig, DEFAULT_PLAYER1_NAME, DEFAULT_PLAYER2_NAME


class TestGameConfig:
    """Tests for GameConfig."""

    def test_defaults(self):
        config = GameConfig()
        assert config.player1_name == DEFAULT_PLAYER1_NAME == "Player 1"
        assert config.player2_name == DEFAULT_PLAYER2_NAME == "Player 2"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("NOUGHTS_PLAYER1_NAME", "Ann")
        monkeypatch.delenv("NOUGHTS_PLAYER2_NAME", raising=False)

        config = GameConfig.from_env()

        assert config.player1_name == "Ann"
        assert config.player2_name == "Player 2"

    def test_from_env_ignores_empty(self, monkeypatch):
        monkeypatch.setenv("NOUGHTS_PLAYER1_NAME", "")
        monkeypatch.setenv("NOUGHTS_PLAYER2_NAME", "")

        config = GameConfig.from_env()

        assert config == GameConfig()
