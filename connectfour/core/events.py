"""
Event definitions for the Connect Four engine.

The engine publishes these so a presentation layer can feed its message
panel without inspecting every MoveResult itself.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    """Types of events the engine emits."""

    GAME_STARTED = auto()
    MOVE_MADE = auto()
    INVALID_MOVE = auto()
    TURN_CHANGED = auto()
    GAME_WON = auto()
    GAME_DRAW = auto()
    GAME_RESET = auto()


@dataclass
class Event:
    """
    Base event structure.

    Attributes:
        type: The type of event
        data: Event-specific payload
        timestamp: When the event was created
        source: Which module created the event
    """

    type: EventType
    data: Any = None
    timestamp: float = field(default_factory=time.time)
    source: str = "unknown"

    def __str__(self) -> str:
        return f"[{self.source}] {self.type.name}: {self.data}"
