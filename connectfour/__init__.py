"""Two-player Connect Four: game engine plus a small terminal front end."""

from .core.types import GameSnapshot, GameStatus, MoveOutcome, MoveResult, Player, RejectReason
from .game.engine import GameEngine


__version__ = "0.1.0"

__all__ = [
    "GameEngine",
    "GameSnapshot",
    "GameStatus",
    "MoveOutcome",
    "MoveResult",
    "Player",
    "RejectReason",
]
