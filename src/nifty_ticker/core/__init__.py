"""Core utilities and shared functionality."""

from nifty_ticker.core.timezone import (
    resolve_timezone,
    now_in,
    to_market_time,
)
from nifty_ticker.core.exceptions import (
    TickerError,
    ConfigurationError,
    TickInProgressError,
)

__all__ = [
    "resolve_timezone",
    "now_in",
    "to_market_time",
    "TickerError",
    "ConfigurationError",
    "TickInProgressError",
]
