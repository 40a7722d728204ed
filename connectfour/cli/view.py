"""Text rendering for the terminal front end: board, column menu, message panel."""

from collections import deque

import typer

from ..core.bus import EventBus
from ..core.config import UISettings
from ..core.events import Event, EventType
from ..core.types import (
    COLUMNS,
    ROWS,
    GameSnapshot,
    GameStatus,
    MoveOutcome,
    MoveResult,
    Player,
    Position,
)


PLAYER_COLORS = {
    Player.A: typer.colors.RED,
    Player.B: typer.colors.YELLOW,
}


def player_symbol(player: Player, ui: UISettings) -> str:
    if player == Player.A:
        return ui.symbol_a
    if player == Player.B:
        return ui.symbol_b
    return " "


def _cell(player: Player, ui: UISettings, highlight: bool = False) -> str:
    symbol = player_symbol(player, ui)
    if not ui.use_color or player == Player.EMPTY:
        return symbol
    return typer.style(symbol, fg=PLAYER_COLORS[player], bold=True, reverse=highlight)


class ColumnMenu:
    """Column cursor; moves wrap around the board edges."""

    def __init__(self, index: int = COLUMNS // 2):
        self.start = index % COLUMNS
        self.index = self.start

    def reset(self) -> int:
        self.index = self.start
        return self.index

    def next(self) -> int:
        self.index = (self.index + 1) % COLUMNS
        return self.index

    def prev(self) -> int:
        self.index = (self.index - 1) % COLUMNS
        return self.index

    def select(self, column: int) -> int:
        if not 0 <= column < COLUMNS:
            raise ValueError(f"column {column} is out of range")
        self.index = column
        return self.index

    def render(self, ui: UISettings) -> str:
        """Column numbers with the cursor marked above its column."""
        marker = "  " + "    " * self.index + "v"
        labels = []
        for col in range(COLUMNS):
            label = str(col)
            if ui.use_color:
                color = typer.colors.RED if col == self.index else typer.colors.YELLOW
                label = typer.style(label, fg=color, bold=col == self.index)
            labels.append(label)
        return marker + "\n  " + "   ".join(labels)


class MessagePanel:
    """Rolling log of engine messages, fed from the event bus."""

    def __init__(self, ui: UISettings):
        self.ui = ui
        self.lines: deque[str] = deque(maxlen=ui.message_lines)

    def attach(self, bus: EventBus) -> None:
        bus.subscribe_all(self.on_event)

    def add(self, message: str) -> None:
        self.lines.append(message)

    def _symbol(self, value: str) -> str:
        return player_symbol(Player(value), self.ui)

    def on_event(self, event: Event) -> None:
        data = event.data or {}
        if event.type == EventType.MOVE_MADE:
            self.add(f"Player {self._symbol(data['player'])} dropped into column {data['column']}")
        elif event.type == EventType.INVALID_MOVE:
            self.add(data["message"])
        elif event.type == EventType.GAME_WON:
            self.add(f"Player {self._symbol(data['winner'])} wins!")
        elif event.type == EventType.GAME_DRAW:
            self.add("Draw game.")
        elif event.type == EventType.GAME_RESET:
            self.lines.clear()
            self.add("New game.")

    def render(self) -> str:
        return "\n".join(self.lines)


def board_to_ascii(snapshot: GameSnapshot, ui: UISettings) -> str:
    """Convert board to ASCII display, top row first."""
    highlight = set(snapshot.winning_line)
    separator = "+" + "---+" * COLUMNS

    lines = [separator]
    for top_down_index, row in enumerate(snapshot.rows_top_down()):
        row_index = ROWS - 1 - top_down_index
        cells = [
            _cell(cell, ui, Position(col=col, row=row_index) in highlight)
            for col, cell in enumerate(row)
        ]
        lines.append("|" + "".join(f" {cell} |" for cell in cells))
        lines.append(separator)

    return "\n".join(lines)


def status_line(snapshot: GameSnapshot, ui: UISettings) -> str:
    if snapshot.status == GameStatus.WON:
        return f"Player {player_symbol(snapshot.winner, ui)} wins!"
    if snapshot.status == GameStatus.DRAW:
        return "Draw game."
    return f"Turn {snapshot.turn_number}: Player {player_symbol(snapshot.current_player, ui)} to move"


def describe_result(result: MoveResult, ui: UISettings) -> str:
    """One message-panel line for a MoveResult, using the configured symbols."""
    if result.outcome == MoveOutcome.REJECTED:
        return result.message
    if result.outcome == MoveOutcome.DRAW:
        return "Draw game."
    symbol = player_symbol(result.placement.player, ui)
    if result.outcome == MoveOutcome.WON:
        return f"Player {symbol} wins!"
    return f"Player {symbol} dropped into column {result.placement.column}"
