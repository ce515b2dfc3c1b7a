"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MARKET_DATA_PROVIDERS = ("yahoo", "stub")


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / "Documents" / "Finance Dashboard Data"


class Settings(BaseSettings):
    """
    Application configuration.

    Every field can be set from the environment with a ``FINANCE_`` prefix
    (``FINANCE_DATA_DIR``, ``FINANCE_CRON_API_KEY``...) or from ``.env``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FINANCE_",
    )

    app_name: str = "Personal Finance Dashboard"
    app_version: str = "0.1.0"

    # finance.db lives here unless database_url is given
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    log_level: str = "INFO"

    # "Today", paydays and bill due dates are evaluated in this timezone
    timezone: str = "US/Eastern"

    market_data_provider: str = "yahoo"
    quote_cache_ttl_seconds: int = Field(default=120, ge=0)
    quote_fetch_timeout_seconds: float = Field(default=10.0, gt=0)

    # Shared secret for /cron/investment-snapshot; unset rejects every call
    cron_api_key: Optional[str] = None

    @field_validator("market_data_provider")
    @classmethod
    def validate_provider(cls, v: str) -> str:
        name = v.strip().lower()
        if name not in MARKET_DATA_PROVIDERS:
            raise ValueError(f"market_data_provider must be one of {', '.join(MARKET_DATA_PROVIDERS)}")
        return name

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        if v not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {v}")
        return v

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Explicit ``database_url``, else a SQLite file in the data directory."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.get_data_dir() / 'finance.db'}"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Replace the process settings (tests, alternate data directories)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop the cached settings so the next access reloads them."""
    global _settings
    _settings = None
