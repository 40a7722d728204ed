"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation.
"""

from enum import Enum

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# MODE ENUMS
# ─────────────────────────────────────────────────────────────


class LogLevel(str, Enum):
    """Logging threshold."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class UISettings(BaseSettings):
    """Terminal presentation configuration."""

    model_config = SettingsConfigDict(
        env_prefix="UI_",
        env_file=".env",  # read directly: the parent only supplies defaults
        env_file_encoding="utf-8",
        extra="ignore",
    )

    use_color: bool = True
    clear_screen: bool = False
    symbol_a: str = Field(default="X", min_length=1, max_length=1)
    symbol_b: str = Field(default="O", min_length=1, max_length=1)
    message_lines: int = Field(
        default=8,
        ge=1,
        le=50,
        description="How many recent messages the message panel shows",
    )

    @model_validator(mode="after")
    def _distinct_symbols(self) -> "UISettings":
        if self.symbol_a == self.symbol_b:
            raise ValueError(f"symbol_a and symbol_b must differ (both {self.symbol_a!r})")
        return self


class LogSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",  # read directly: the parent only supplies defaults
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: LogLevel = LogLevel.WARNING
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    ui: UISettings = Field(default_factory=UISettings)
    log: LogSettings = Field(default_factory=LogSettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (cached)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings (for testing)."""
    global _settings
    _settings = None
