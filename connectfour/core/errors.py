"""
Move rejection errors.

The rules raise these; the engine turns them into rejected MoveResults so
nothing crosses the engine boundary as an exception.
"""

import numbers
import operator

from .types import RejectReason


def describe_column(column: object) -> str:
    """Integral columns print as plain numbers, anything else as its repr."""
    if isinstance(column, numbers.Integral) and not isinstance(column, bool):
        return str(operator.index(column))
    return repr(column)


class MoveError(ValueError):
    """Base class for a refused drop."""

    reason: RejectReason

    def __init__(self, column: object = None, message: str | None = None):
        self.column = column
        super().__init__(message or self.default_message(column))

    @staticmethod
    def default_message(column: object) -> str:
        return f"column {describe_column(column)} cannot be played"


class InvalidColumnError(MoveError):
    reason = RejectReason.INVALID_COLUMN

    @staticmethod
    def default_message(column: object) -> str:
        return f"column {describe_column(column)} is out of range"


class ColumnFullError(MoveError):
    reason = RejectReason.COLUMN_FULL

    @staticmethod
    def default_message(column: object) -> str:
        return f"column {describe_column(column)} is full"


class GameOverError(MoveError):
    reason = RejectReason.GAME_OVER

    @staticmethod
    def default_message(column: object) -> str:
        return "game already finished"


_ERRORS: dict[RejectReason, type[MoveError]] = {
    RejectReason.INVALID_COLUMN: InvalidColumnError,
    RejectReason.COLUMN_FULL: ColumnFullError,
    RejectReason.GAME_OVER: GameOverError,
}


def error_for(reason: RejectReason, column: object = None) -> MoveError:
    """Build the exception matching a rejection reason."""
    return _ERRORS[reason](column)
