import pytest
from typer.testing import CliRunner

from connectfour.cli.main import app, handle_input, render_screen
from connectfour.cli.view import ColumnMenu, MessagePanel, board_to_ascii, describe_result, status_line
from connectfour.core.config import UISettings
from connectfour.core.types import Player
from connectfour.game.engine import GameEngine


runner = CliRunner()

EMPTY_ROW = "|   |   |   |   |   |   |   |"
SEPARATOR = "+---+---+---+---+---+---+---+"


@pytest.fixture
def ui():
    return UISettings(use_color=False, message_lines=4)


@pytest.fixture
def panel(ui, engine):
    panel = MessagePanel(ui)
    panel.attach(engine.bus)
    return panel


# --------------------------
# View
# --------------------------

def test_empty_board_ascii(engine, ui):
    text = board_to_ascii(engine.snapshot(), ui)
    lines = text.splitlines()
    assert len(lines) == 13
    assert lines[0] == SEPARATOR
    assert lines[1::2] == [EMPTY_ROW] * 6


def test_tokens_render_bottom_up(engine, ui, play):
    play(engine, [3, 3, 0])
    lines = board_to_ascii(engine.snapshot(), ui).splitlines()
    assert lines[-2] == "| X |   |   | X |   |   |   |"
    assert lines[-4] == "|   |   |   | O |   |   |   |"


def test_custom_symbols(engine, play):
    ui = UISettings(use_color=False, symbol_a="R", symbol_b="Y")
    play(engine, [0, 1])
    assert board_to_ascii(engine.snapshot(), ui).splitlines()[-2].startswith("| R | Y |")
    assert status_line(engine.snapshot(), ui) == "Turn 3: Player R to move"


def test_status_line_after_win(engine, ui, play):
    play(engine, [0, 6, 1, 6, 2, 6, 3])
    assert status_line(engine.snapshot(), ui) == "Player X wins!"


def test_column_menu_wraps():
    menu = ColumnMenu(6)
    assert menu.next() == 0
    assert menu.prev() == 6
    assert menu.prev() == 5


def test_column_menu_select_and_reset():
    menu = ColumnMenu()
    assert menu.index == 3
    menu.select(1)
    assert menu.reset() == 3
    with pytest.raises(ValueError):
        menu.select(7)


def test_column_menu_marker_alignment(ui):
    marker, labels = ColumnMenu(2).render(ui).splitlines()
    assert marker.index("v") == labels.index("2")


def test_message_panel_follows_engine(engine, panel, play):
    play(engine, [0] * 7)
    assert panel.lines[-1] == "column 0 is full"
    assert len(panel.lines) == 4

    engine.new_game()
    assert list(panel.lines) == ["New game."]


def test_message_panel_reports_win(engine, panel, play):
    play(engine, [0, 6, 1, 6, 2, 6, 3])
    assert list(panel.lines)[-2:] == ["Player X dropped into column 3", "Player X wins!"]


# --------------------------
# Input handling
# --------------------------

def test_handle_input_digit_drops_and_moves_cursor(engine, panel):
    menu = ColumnMenu()
    assert handle_input("5", engine, menu, panel)
    assert engine.snapshot().cell(5, 0) == Player.A
    assert menu.index == 5


def test_handle_input_cursor_then_enter(engine, panel):
    menu = ColumnMenu()
    handle_input(">", engine, menu, panel)
    handle_input("l", engine, menu, panel)
    handle_input("", engine, menu, panel)
    handle_input("<", engine, menu, panel)
    handle_input("  ", engine, menu, panel)

    snap = engine.snapshot()
    assert snap.cell(5, 0) == Player.A
    assert snap.cell(4, 0) == Player.B


def test_handle_input_garbage(engine, panel):
    menu = ColumnMenu()
    assert handle_input("abc", engine, menu, panel)
    assert panel.lines[-1] == "Invalid input 'abc'. Enter a column number 0-6."
    assert engine.snapshot().moves == ()


def test_handle_input_out_of_range(engine, panel):
    menu = ColumnMenu()
    handle_input("9", engine, menu, panel)
    assert panel.lines[-1] == "column 9 is out of range"
    assert menu.index == 3


def test_handle_input_new_and_quit(engine, panel):
    menu = ColumnMenu()
    handle_input("0", engine, menu, panel)
    assert handle_input("n", engine, menu, panel)
    assert engine.snapshot().moves == ()
    assert menu.index == 3
    assert handle_input("q", engine, menu, panel) is False


def test_render_screen(engine, ui, panel):
    screen = render_screen(engine, ui, ColumnMenu(), panel)
    assert screen.startswith(" connectFour")
    assert "Turn 1: Player X to move" in screen


# --------------------------
# Commands
# --------------------------

def test_simulate_win():
    result = runner.invoke(app, ["simulate", "--no-color", "0", "6", "1", "6", "2", "6", "3"])
    assert result.exit_code == 0
    assert " 7. Player X wins!" in result.output
    assert "Legal moves" not in result.output


def test_simulate_in_progress_lists_moves():
    result = runner.invoke(app, ["simulate", "--no-color", "3"])
    assert result.exit_code == 0
    assert "Turn 2: Player O to move" in result.output
    assert "Legal moves: [0, 1, 2, 3, 4, 5, 6]" in result.output


def test_simulate_strict_fails_on_rejection():
    result = runner.invoke(app, ["simulate", "--strict", "--no-color"] + ["0"] * 7)
    assert result.exit_code == 1
    assert " 7. column 0 is full" in result.output


def test_simulate_lenient_ignores_rejection():
    result = runner.invoke(app, ["simulate", "--no-color", "7"])
    assert result.exit_code == 0
    assert "column 7 is out of range" in result.output


def test_play_session():
    result = runner.invoke(app, ["play", "--no-color"], input="3\n3\nfoo\nq\n")
    assert result.exit_code == 0
    assert "Player X dropped into column 3" in result.output
    assert "Player O dropped into column 3" in result.output
    assert "Invalid input 'foo'" in result.output
    assert result.output.rstrip().endswith("Game quit.")


def test_play_until_win_then_game_over():
    moves = "0\n6\n1\n6\n2\n6\n3\n4\n"
    result = runner.invoke(app, ["play", "--no-color"], input=moves)
    assert result.exit_code == 0
    assert "Player X wins!" in result.output
    assert "game already finished" in result.output
    assert "Game quit." in result.output


def test_simulate_rejects_unknown_log_level():
    result = runner.invoke(app, ["simulate", "--log-level", "LOUD", "3"])
    assert result.exit_code == 2


def test_simulate_accepts_lowercase_log_level():
    result = runner.invoke(app, ["simulate", "--no-color", "--log-level", "debug", "3"])
    assert result.exit_code == 0
    assert " 1. Player X dropped into column 3" in result.output


def test_simulate_uses_configured_symbols(monkeypatch):
    monkeypatch.setenv("UI_SYMBOL_A", "R")
    result = runner.invoke(app, ["simulate", "--no-color", "0", "6", "1", "6", "2", "6", "3"])
    assert result.exit_code == 0
    assert " 2. Player O dropped into column 6" in result.output
    assert " 7. Player R wins!" in result.output
    assert "Player X" not in result.output


def test_describe_result(engine, play):
    ui = UISettings(use_color=False, symbol_a="R", symbol_b="Y")
    first, second = play(engine, [3, 9])
    assert describe_result(first, ui) == "Player R dropped into column 3"
    assert describe_result(second, ui) == "column 9 is out of range"
