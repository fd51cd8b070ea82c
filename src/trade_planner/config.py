"""Configuration loading from environment variables and the .env file."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Log output format."""

    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """Calculator defaults and runtime settings.

    Values come from environment variables and the .env file. The multiples
    are only defaults for the CLI; the engine itself takes every value from
    the input record.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Account ====================
    default_account_size: float = Field(
        default=10_000.0,
        gt=0,
        description="Fallback account size when no preference is stored",
    )
    default_risk_percent: float = Field(
        default=1.0,
        gt=0,
        le=100.0,
        description="Default risk per trade (percent of account)",
    )
    default_fixed_dollar_risk: float = Field(
        default=100.0,
        gt=0,
        description="Default fixed dollar risk per trade",
    )

    # ==================== Multiples ====================
    default_stop_multiple: float = Field(
        default=2.0,
        ge=0.0,
        description="Stop distance in volatility units",
    )
    default_target_r_multiple: float = Field(
        default=2.0,
        gt=0.0,
        description="Target distance in multiples of risk per unit",
    )
    default_trailing_multiple: float = Field(
        default=1.0,
        ge=0.0,
        description="Trailing stop offset in volatility units",
    )
    default_entry_buffer: float = Field(
        default=0.05,
        ge=0.0,
        description="Dollar buffer between entry stop and limit price",
    )

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log output format",
    )

    # ==================== Storage ====================
    preferences_path: Path = Field(
        default=Path("data/preferences.json"),
        description="File holding the persisted account size preference",
    )

    @field_validator("preferences_path", mode="before")
    @classmethod
    def parse_preferences_path(cls, v: str | Path) -> Path:
        """Convert strings to Path objects."""
        return Path(v) if isinstance(v, str) else v


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from the environment."""
    global _settings
    _settings = Settings()
    return _settings
