"""
Shared data types for the Connect Four engine.

These types are the contracts between the engine and whatever renders it.
Columns are numbered 0-6 left to right, rows 0-5 from the bottom up.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np


COLUMNS = 7
ROWS = 6
CONNECT = 4


# ─────────────────────────────────────────────────────────────
# PLAYER & GAME STATUS
# ─────────────────────────────────────────────────────────────


class Player(Enum):
    """Cell owner / side to move."""

    A = "a"
    B = "b"
    EMPTY = "empty"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Default board symbol."""
        return {"a": "X", "b": "O", "empty": " "}[self.value]

    @property
    def opponent(self) -> "Player":
        if self is Player.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Player.B if self is Player.A else Player.A


class GameStatus(Enum):
    """Where the game is in its lifecycle."""

    IN_PROGRESS = auto()
    WON = auto()  # winner is set on the state
    DRAW = auto()


class MoveOutcome(Enum):
    """What a call to drop_token() did."""

    PLACED = auto()
    WON = auto()
    DRAW = auto()
    REJECTED = auto()


class RejectReason(Enum):
    """Why a drop was refused."""

    INVALID_COLUMN = auto()
    COLUMN_FULL = auto()
    GAME_OVER = auto()


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, order=True)
class Position:
    """Grid position (0-indexed)."""

    col: int  # 0 = left, 6 = right
    row: int  # 0 = bottom, 5 = top


@dataclass
class BoardState:
    """
    Mutable grid, stored column-major.

    columns[col][row] holds a Player value, row 0 is the bottom.
    Occupied cells of a column always form a run starting at row 0.
    """

    columns: list[list[Player]] = field(
        default_factory=lambda: [[Player.EMPTY] * ROWS for _ in range(COLUMNS)]
    )

    def cell(self, col: int, row: int) -> Player:
        return self.columns[col][row]

    def height(self, col: int) -> int:
        """Number of tokens already in a column."""
        count = 0
        for cell in self.columns[col]:
            if cell == Player.EMPTY:
                break
            count += 1
        return count

    def is_column_full(self, col: int) -> bool:
        return self.columns[col][ROWS - 1] != Player.EMPTY

    def is_full(self) -> bool:
        return all(self.is_column_full(col) for col in range(COLUMNS))

    def copy(self) -> "BoardState":
        """Create a deep copy of the board."""
        return BoardState(columns=[list(column) for column in self.columns])

    def freeze(self) -> tuple[tuple[Player, ...], ...]:
        """Immutable copy of the grid, same indexing as columns."""
        return tuple(tuple(column) for column in self.columns)


# ─────────────────────────────────────────────────────────────
# MOVE & GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Move:
    """A token that landed on the board."""

    column: int
    row: int
    player: Player

    @property
    def position(self) -> Position:
        return Position(col=self.column, row=self.row)


@dataclass
class GameState:
    """Live, engine-owned game state. Never handed out directly."""

    board: BoardState = field(default_factory=BoardState)
    current_player: Player = Player.A
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Player | None = None
    winning_line: list[Position] = field(default_factory=list)
    move_history: list[Move] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game for rendering."""

    grid: tuple[tuple[Player, ...], ...]
    current_player: Player
    status: GameStatus
    winner: Player | None = None
    winning_line: tuple[Position, ...] = ()
    moves: tuple[Move, ...] = ()

    @classmethod
    def from_state(cls, state: GameState) -> "GameSnapshot":
        return cls(
            grid=state.board.freeze(),
            current_player=state.current_player,
            status=state.status,
            winner=state.winner,
            winning_line=tuple(state.winning_line),
            moves=tuple(state.move_history),
        )

    def cell(self, col: int, row: int) -> Player:
        return self.grid[col][row]

    def rows_top_down(self) -> list[tuple[Player, ...]]:
        """Rows in display order, top row first."""
        return [
            tuple(self.grid[col][row] for col in range(COLUMNS))
            for row in range(ROWS - 1, -1, -1)
        ]

    @property
    def legal_moves(self) -> list[int]:
        if self.is_over:
            return []
        return [col for col in range(COLUMNS) if self.grid[col][ROWS - 1] == Player.EMPTY]

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def turn_number(self) -> int:
        return len(self.moves) + 1

    @property
    def last_move(self) -> Move | None:
        return self.moves[-1] if self.moves else None

    def as_matrix(self) -> np.ndarray:
        """Convert to a read-only numpy matrix, top row first.

        Returns:
            int8 array of shape (6, 7) where A=1, B=-1, EMPTY=0
        """
        mapping = {Player.A: 1, Player.B: -1, Player.EMPTY: 0}
        matrix = np.array(
            [[mapping[cell] for cell in row] for row in self.rows_top_down()],
            dtype=np.int8,
        )
        matrix.setflags(write=False)
        return matrix


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single drop_token() call."""

    outcome: MoveOutcome
    column: object  # as requested, may be out of range or not an int
    message: str
    placement: Move | None = None
    winner: Player | None = None
    winning_line: tuple[Position, ...] = ()
    reason: RejectReason | None = None

    @property
    def ok(self) -> bool:
        """True if a token was placed."""
        return self.outcome != MoveOutcome.REJECTED

    @property
    def is_terminal(self) -> bool:
        return self.outcome in (MoveOutcome.WON, MoveOutcome.DRAW)

    def raise_for_outcome(self) -> None:
        """Raise the matching MoveError if this move was rejected."""
        if self.reason is None:
            return
        # local import: errors depends on this module
        from .errors import error_for

        raise error_for(self.reason, self.column)
