"""Application settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nifty_ticker.core.exceptions import ConfigurationError

QUOTE_SUMMARY_URL = "https://query1.finance.yahoo.com/v10/finance/quoteSummary/{symbol}"


def get_default_data_dir() -> Path:
    """Return the default data directory."""
    return Path.home() / ".nifty_ticker"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "Nifty 50 Tracker"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    # Instrument and upstream endpoints
    symbol: str = "^NSEI"
    display_name: str = "Nifty 50"
    live_quote_url: str = QUOTE_SUMMARY_URL + "?modules=price"
    historical_quote_url: str = QUOTE_SUMMARY_URL + "?modules=defaultKeyStatistics,financialData"
    request_timeout_seconds: float = 10.0

    # Refresh cadence
    refresh_interval_ms: int = 5000
    after_hours_interval_ms: Optional[int] = None

    history_capacity: int = 20

    # Market hours (minutes since local midnight)
    market_timezone: str = "Asia/Kolkata"
    market_open_minute: int = 9 * 60 + 15
    market_close_minute: int = 15 * 60 + 30

    # Single-slot cache of the last session quote
    cache_key: str = "lastTradingDayData"
    data_dir: Optional[Path] = None
    database_url: Optional[str] = None

    mock_seed: Optional[int] = Field(default=None)

    @model_validator(mode="after")
    def check_ranges(self) -> "Settings":
        if self.history_capacity < 1:
            raise ConfigurationError(f"history_capacity must be >= 1, got {self.history_capacity}")
        if self.refresh_interval_ms <= 0:
            raise ConfigurationError(f"refresh_interval_ms must be > 0, got {self.refresh_interval_ms}")
        if self.after_hours_interval_ms is not None and self.after_hours_interval_ms <= 0:
            raise ConfigurationError(
                f"after_hours_interval_ms must be > 0, got {self.after_hours_interval_ms}"
            )
        if not 0 <= self.market_open_minute < self.market_close_minute <= 24 * 60:
            raise ConfigurationError(
                "market window must satisfy 0 <= open < close <= 1440, "
                f"got {self.market_open_minute}..{self.market_close_minute}"
            )
        return self

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_database_url(self) -> str:
        """Get database URL, deriving from data_dir if not set."""
        if self.database_url:
            return self.database_url
        db_path = self.get_data_dir() / "ticker.db"
        return f"sqlite:///{db_path}"

    def live_url(self) -> str:
        return self.live_quote_url.format(symbol=self.symbol)

    def historical_url(self) -> str:
        return self.historical_quote_url.format(symbol=self.symbol)

    @property
    def refresh_interval_seconds(self) -> float:
        return self.refresh_interval_ms / 1000.0

    @property
    def after_hours_interval_seconds(self) -> float:
        if self.after_hours_interval_ms is None:
            return self.refresh_interval_seconds
        return self.after_hours_interval_ms / 1000.0


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
