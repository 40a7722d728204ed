"""Core types and infrastructure for the Connect Four engine."""

from .bus import EventBus
from .config import LogLevel, LogSettings, Settings, UISettings, get_settings, reset_settings
from .errors import ColumnFullError, GameOverError, InvalidColumnError, MoveError
from .events import Event, EventType
from .types import (
    COLUMNS,
    CONNECT,
    ROWS,
    BoardState,
    GameSnapshot,
    GameState,
    GameStatus,
    Move,
    MoveOutcome,
    MoveResult,
    Player,
    Position,
    RejectReason,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "UISettings",
    "LogSettings",
    "LogLevel",
    # Types
    "COLUMNS",
    "ROWS",
    "CONNECT",
    "Player",
    "GameStatus",
    "Position",
    "BoardState",
    "Move",
    "GameState",
    "GameSnapshot",
    "MoveOutcome",
    "MoveResult",
    "RejectReason",
    # Errors
    "MoveError",
    "InvalidColumnError",
    "ColumnFullError",
    "GameOverError",
    # Events
    "Event",
    "EventType",
    "EventBus",
]
