"""Configuration and logging setup."""

from nifty_ticker.config.settings import (
    Settings,
    get_settings,
    set_settings,
    reset_settings,
)
from nifty_ticker.config.logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "set_settings",
    "reset_settings",
    "setup_logging",
]
