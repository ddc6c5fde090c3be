"""Timezone utilities for market-local time."""

from datetime import datetime

import pytz

from nifty_ticker.core.exceptions import ConfigurationError


def resolve_timezone(name: str) -> pytz.BaseTzInfo:
    """
    Look up a timezone by name.

    An unknown name is a fatal configuration error: silently defaulting
    would make every open/closed decision wrong.
    """
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as exc:
        raise ConfigurationError(f"Unknown market timezone: {name!r}") from exc


def now_in(tz: pytz.BaseTzInfo) -> datetime:
    """Return current time in the given timezone."""
    return datetime.now(tz)


def to_market_time(dt: datetime, tz: pytz.BaseTzInfo) -> datetime:
    """Convert a datetime to market-local time."""
    if dt.tzinfo is None:
        # Assume naive datetime is already market-local
        return tz.localize(dt)
    return dt.astimezone(tz)
