import pytest

from connectfour.core.config import reset_settings
from connectfour.game.engine import GameEngine


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep host environment variables out of the settings under test."""
    for key in ("UI_USE_COLOR", "UI_CLEAR_SCREEN", "UI_SYMBOL_A", "UI_SYMBOL_B",
                "UI_MESSAGE_LINES", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def engine():
    return GameEngine()


@pytest.fixture
def play():
    """Drop a sequence of columns, returning every MoveResult."""

    def _play(engine: GameEngine, columns):
        return [engine.drop_token(col) for col in columns]

    return _play
