"""Game engine for Connect Four state management."""

import logging

from ..core.bus import EventBus
from ..core.errors import GameOverError, MoveError
from ..core.events import Event, EventType
from ..core.types import (
    GameSnapshot,
    GameState,
    GameStatus,
    Move,
    MoveOutcome,
    MoveResult,
    Player,
    Position,
)
from .rules import Connect4Rules


logger = logging.getLogger(__name__)


class GameEngine:
    """Owns one game and enforces the rules.

    Stateful engine that:
    - Tracks current game state
    - Validates moves
    - Detects wins/draws
    - Emits events for state changes

    Not thread-safe; callers on several threads must serialize calls.
    """

    def __init__(self, rules: Connect4Rules | None = None, bus: EventBus | None = None):
        """Initialize game engine with a fresh game.

        Args:
            rules: Game rules (uses defaults if None)
            bus: Event bus (a private one is created if None)
        """
        self.rules = rules or Connect4Rules()
        self.bus = bus or EventBus()
        self._state = GameState()
        self._publish(EventType.GAME_STARTED, {"first_player": self._state.current_player.value})
        logger.info("New game, player %s to move", self._state.current_player)

    def new_game(self) -> GameSnapshot:
        """Throw away the current game and start over.

        Returns:
            Snapshot of the starting position
        """
        self._state = GameState()
        self._publish(EventType.GAME_RESET)
        self._publish(EventType.GAME_STARTED, {"first_player": self._state.current_player.value})
        logger.info("Game reset, player %s to move", self._state.current_player)
        return self.snapshot()

    reset = new_game

    def drop_token(self, column: object) -> MoveResult:
        """Drop the current player's token into a column.

        Never raises for bad moves: a refused drop comes back as a
        REJECTED result and leaves the game untouched.

        Args:
            column: Column index (0-6)

        Returns:
            What happened, including any win or draw it caused
        """
        state = self._state
        player = state.current_player

        try:
            if state.is_over:
                raise GameOverError(column)
            position = self.rules.apply_move(state.board, column, player)
        except MoveError as e:
            logger.debug("Rejected drop into %r: %s", column, e)
            self._publish(
                EventType.INVALID_MOVE,
                {"column": column, "reason": e.reason.name, "message": str(e)},
            )
            return MoveResult(
                outcome=MoveOutcome.REJECTED,
                column=column,
                message=str(e),
                reason=e.reason,
            )

        move = Move(column=position.col, row=position.row, player=player)
        state.move_history.append(move)
        logger.debug("Player %s dropped into column %d, row %d", player, move.column, move.row)
        self._publish(
            EventType.MOVE_MADE,
            {"column": move.column, "row": move.row, "player": player.value},
        )

        line = self.rules.winning_line(state.board, position)
        if line:
            return self._finish_won(move, line)

        if state.board.is_full():
            return self._finish_draw(move)

        state.current_player = player.opponent
        self._publish(
            EventType.TURN_CHANGED,
            {"player": state.current_player.value, "turn": len(state.move_history) + 1},
        )
        return MoveResult(
            outcome=MoveOutcome.PLACED,
            column=column,
            message=f"Player {player.symbol} dropped into column {move.column}",
            placement=move,
        )

    def _finish_won(self, move: Move, line: list[Position]) -> MoveResult:
        state = self._state
        state.status = GameStatus.WON
        state.winner = move.player
        state.winning_line = line
        logger.info("Player %s wins after %d moves", move.player, len(state.move_history))
        self._publish(
            EventType.GAME_WON,
            {"winner": move.player.value, "positions": [(p.col, p.row) for p in line]},
        )
        return MoveResult(
            outcome=MoveOutcome.WON,
            column=move.column,
            message=f"Player {move.player.symbol} wins!",
            placement=move,
            winner=move.player,
            winning_line=tuple(line),
        )

    def _finish_draw(self, move: Move) -> MoveResult:
        self._state.status = GameStatus.DRAW
        logger.info("Draw after %d moves", len(self._state.move_history))
        self._publish(EventType.GAME_DRAW)
        return MoveResult(
            outcome=MoveOutcome.DRAW,
            column=move.column,
            message="Draw game.",
            placement=move,
        )

    def _publish(self, event_type: EventType, data: dict | None = None) -> None:
        self.bus.publish(Event(type=event_type, data=data, source="game_engine"))

    def snapshot(self) -> GameSnapshot:
        """Get a read-only copy of the current game."""
        return GameSnapshot.from_state(self._state)

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def is_game_over(self) -> bool:
        """Check if game is over."""
        return self._state.is_over
