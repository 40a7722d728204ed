"""
CLI for Connect Four.

Usage:
    python -m connectfour --help
    python -m connectfour play
    python -m connectfour play --no-color
    python -m connectfour simulate 0 6 1 6 2 6 3
"""

import logging
from typing import Annotated

import typer

from ..core.config import LogLevel, UISettings, get_settings
from ..core.types import GameStatus, MoveOutcome
from ..game.engine import GameEngine
from .view import ColumnMenu, MessagePanel, board_to_ascii, describe_result, status_line


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="connectfour",
    help="Two-player Connect Four in the terminal.",
    add_completion=False,
)

PROMPT = "Column (0-6, </> to move, enter drops, n new game, q quit)"

ColorOption = Annotated[
    bool | None,
    typer.Option("--color/--no-color", help="Override UI_USE_COLOR"),
]
LogLevelOption = Annotated[
    LogLevel | None,
    typer.Option("--log-level", case_sensitive=False, help="Override LOG_LEVEL"),
]


def _setup(color: bool | None, log_level: LogLevel | None) -> UISettings:
    """Configure logging and resolve UI settings for one command."""
    settings = get_settings()
    level = log_level or settings.log.level
    logging.basicConfig(level=level.value, format=settings.log.format)
    logger.debug("Settings: %s", settings)

    ui = settings.ui
    if color is not None:
        ui = ui.model_copy(update={"use_color": color})
    return ui


def render_screen(engine: GameEngine, ui: UISettings, menu: ColumnMenu, panel: MessagePanel) -> str:
    """Whole screen: header, menu, board, status, messages."""
    snapshot = engine.snapshot()
    parts = [
        " connectFour",
        "=" * 29,
        menu.render(ui),
        board_to_ascii(snapshot, ui),
        status_line(snapshot, ui),
    ]
    messages = panel.render()
    if messages:
        parts.append("-" * 29)
        parts.append(messages)
    return "\n".join(parts)


def handle_input(raw: str, engine: GameEngine, menu: ColumnMenu, panel: MessagePanel) -> bool:
    """Map one line of input to a menu or engine call.

    Returns:
        False when the player asked to quit
    """
    command = raw.strip().lower()

    if command in {"q", "quit", "exit"}:
        return False

    if command in {"n", "new"}:
        engine.new_game()
        menu.reset()
        return True

    if command in {"<", "h", "a"}:
        menu.prev()
        return True

    if command in {">", "l", "d"}:
        menu.next()
        return True

    if not command:
        engine.drop_token(menu.index)
        return True

    try:
        column = int(command)
    except ValueError:
        panel.add(f"Invalid input '{raw.strip()}'. Enter a column number 0-6.")
        return True

    result = engine.drop_token(column)
    if result.ok:
        menu.select(column)
    return True


@app.command()
def play(
    color: ColorOption = None,
    log_level: LogLevelOption = None,
):
    """
    Play Connect Four, two players on one keyboard.

    Player X moves first. Type a column number, or move the cursor with
    < and > and press enter to drop.
    """
    ui = _setup(color, log_level)

    engine = GameEngine()
    menu = ColumnMenu()
    panel = MessagePanel(ui)
    panel.attach(engine.bus)
    panel.add(f"Player {ui.symbol_a} starts.")

    while True:
        if ui.clear_screen:
            typer.clear()
        typer.echo(render_screen(engine, ui, menu, panel))

        try:
            raw = typer.prompt(f"\n{PROMPT}", default="", show_default=False)
        except typer.Abort:
            typer.echo("\nGame quit.")
            return

        if not handle_input(raw, engine, menu, panel):
            typer.echo("Game quit.")
            return


@app.command()
def simulate(
    moves: Annotated[list[int], typer.Argument(help="Columns to play, in order")],
    strict: Annotated[bool, typer.Option("--strict", help="Exit 1 if any move is rejected")] = False,
    color: ColorOption = None,
    log_level: LogLevelOption = None,
):
    """
    Play a fixed sequence of columns and print the final board.

    Examples:
        simulate 0 6 1 6 2 6 3     # X wins along the bottom row
        simulate 0 0 0 0 0 0 0     # 7th drop is refused, column full
    """
    ui = _setup(color, log_level)
    engine = GameEngine()

    rejected = 0
    for number, column in enumerate(moves, start=1):
        result = engine.drop_token(column)
        typer.echo(f"{number:>2}. {describe_result(result, ui)}")
        if result.outcome == MoveOutcome.REJECTED:
            rejected += 1

    snapshot = engine.snapshot()
    typer.echo(board_to_ascii(snapshot, ui))
    typer.echo(status_line(snapshot, ui))

    if snapshot.status == GameStatus.IN_PROGRESS:
        typer.echo(f"Legal moves: {snapshot.legal_moves}")

    if strict and rejected:
        typer.echo(f"{rejected} move(s) rejected", err=True)
        raise typer.Exit(1)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
