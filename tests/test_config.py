import pytest
from pydantic import ValidationError

from connectfour.core.config import LogLevel, Settings, UISettings, get_settings, reset_settings


def test_defaults():
    settings = Settings()
    assert settings.ui.use_color is True
    assert settings.ui.clear_screen is False
    assert (settings.ui.symbol_a, settings.ui.symbol_b) == ("X", "O")
    assert settings.ui.message_lines == 8
    assert settings.log.level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("UI_USE_COLOR", "false")
    monkeypatch.setenv("UI_SYMBOL_A", "@")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings()

    assert settings.ui.use_color is False
    assert settings.ui.symbol_a == "@"
    assert settings.log.level == "DEBUG"


@pytest.mark.parametrize(
    "key,value",
    [
        ("UI_MESSAGE_LINES", "0"),
        ("UI_SYMBOL_B", "OO"),
        ("LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("UI_MESSAGE_LINES", "3")
    assert get_settings().ui.message_lines == 8

    reset_settings()
    assert get_settings().ui.message_lines == 3


def test_ui_settings_keyword_arguments():
    ui = UISettings(use_color=False, message_lines=2)
    assert ui.use_color is False
    assert ui.message_lines == 2


def test_dotenv_file_reaches_nested_settings(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text(
        "UI_USE_COLOR=false\nUI_SYMBOL_A=@\nLOG_LEVEL=DEBUG\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.ui.use_color is False
    assert settings.ui.symbol_a == "@"
    assert settings.log.level == LogLevel.DEBUG


def test_environment_beats_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("UI_MESSAGE_LINES=4\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UI_MESSAGE_LINES", "6")

    assert Settings().ui.message_lines == 6


def test_identical_symbols_rejected(monkeypatch):
    monkeypatch.setenv("UI_SYMBOL_A", "X")
    monkeypatch.setenv("UI_SYMBOL_B", "X")
    with pytest.raises(ValidationError, match="must differ"):
        Settings()


def test_symbols_may_swap():
    ui = UISettings(symbol_a="O", symbol_b="X")
    assert (ui.symbol_a, ui.symbol_b) == ("O", "X")
