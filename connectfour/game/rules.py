"""Connect Four rules for the standard 7x6 board."""

import numbers
import operator

from ..core.errors import ColumnFullError, InvalidColumnError
from ..core.types import COLUMNS, CONNECT, ROWS, BoardState, Player, Position


# (dcol, drow) for each axis; the opposite direction is walked as well
AXES = (
    (1, 0),   # Horizontal
    (0, 1),   # Vertical
    (1, 1),   # Diagonal up-right
    (1, -1),  # Diagonal down-right
)


class Connect4Rules:
    """Connect Four rules.

    Win condition: 4 in a row (horizontal, vertical, or diagonal)
    """

    columns = COLUMNS
    rows = ROWS
    win_length = CONNECT

    def column_index(self, column: object) -> int | None:
        """Plain int index for column, or None if it is not a board column.

        Any integral type is accepted (numpy integers included); bool is not.
        """
        if isinstance(column, bool) or not isinstance(column, numbers.Integral):
            return None
        index = operator.index(column)
        return index if 0 <= index < self.columns else None

    def is_valid_column(self, column: object) -> bool:
        return self.column_index(column) is not None

    def get_legal_moves(self, board: BoardState) -> list[int]:
        """Get columns that aren't full.

        Args:
            board: Current board state

        Returns:
            List of column indices (0-6) that can accept a piece
        """
        return [col for col in range(self.columns) if not board.is_column_full(col)]

    def get_landing_row(self, board: BoardState, column: int) -> int:
        """Get the row where a piece would land in given column.

        Returns:
            Row index where piece lands, or -1 if column is full
        """
        if board.is_column_full(column):
            return -1
        return board.height(column)

    def validate_drop(self, board: BoardState, column: object) -> Position:
        """Check a drop and return where it would land.

        Raises:
            InvalidColumnError: column is not an index in [0, 6]
            ColumnFullError: the column's top row is occupied
        """
        index = self.column_index(column)
        if index is None:
            raise InvalidColumnError(column)
        row = self.get_landing_row(board, index)
        if row < 0:
            raise ColumnFullError(index)
        return Position(col=index, row=row)

    def apply_move(self, board: BoardState, column: object, player: Player) -> Position:
        """Drop a piece in place.

        Returns:
            Position where the piece landed

        Raises:
            MoveError: If move is invalid
        """
        if player == Player.EMPTY:
            raise ValueError("EMPTY cannot make a move")
        position = self.validate_drop(board, column)
        board.columns[position.col][position.row] = player
        return position

    def _in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.columns and 0 <= row < self.rows

    def _run(self, board: BoardState, start: Position, dcol: int, drow: int, player: Player) -> list[Position]:
        """Cells owned by player walking from start (exclusive) along one direction."""
        cells = []
        col, row = start.col + dcol, start.row + drow
        while self._in_bounds(col, row) and board.cell(col, row) == player:
            cells.append(Position(col=col, row=row))
            col += dcol
            row += drow
        return cells

    def winning_line(self, board: BoardState, position: Position) -> list[Position]:
        """Check for a line through one cell.

        Only the four axes through position are examined, so this is the
        cheap check to run right after a drop.

        Returns:
            The full contiguous run (sorted) on the first axis that reaches
            win_length, or an empty list if there is none
        """
        player = board.cell(position.col, position.row)
        if player == Player.EMPTY:
            return []

        for dcol, drow in AXES:
            line = (
                self._run(board, position, -dcol, -drow, player)
                + [position]
                + self._run(board, position, dcol, drow, player)
            )
            if len(line) >= self.win_length:
                return sorted(line)

        return []

    def check_winner(self, board: BoardState) -> tuple[Player | None, list[Position]]:
        """Full-board scan for a winner.

        Returns:
            Tuple of (winner, winning_positions). Winner is None if no winner.
        """
        for col in range(self.columns):
            for row in range(self.rows):
                player = board.cell(col, row)
                if player == Player.EMPTY:
                    continue

                for dcol, drow in AXES:
                    positions = self._check_direction(board, col, row, dcol, drow, player)
                    if positions:
                        return player, positions

        return None, []

    def _check_direction(
        self,
        board: BoardState,
        start_col: int,
        start_row: int,
        dcol: int,
        drow: int,
        player: Player
    ) -> list[Position]:
        """Check for win_length in a row in given direction.

        Returns:
            List of winning positions, or empty list if no win
        """
        positions = []

        for i in range(self.win_length):
            col = start_col + i * dcol
            row = start_row + i * drow

            if not self._in_bounds(col, row):
                return []

            if board.cell(col, row) != player:
                return []

            positions.append(Position(col=col, row=row))

        return sorted(positions)

    def is_draw(self, board: BoardState) -> bool:
        """Check if game is a draw (board full, no winner)."""
        if not board.is_full():
            return False
        winner, _ = self.check_winner(board)
        return winner is None
