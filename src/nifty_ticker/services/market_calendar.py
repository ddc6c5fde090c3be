"""Market-hours calendar for a fixed weekly schedule."""

from datetime import datetime

from nifty_ticker.core.timezone import now_in, resolve_timezone, to_market_time

# datetime.weekday(): Monday == 0 ... Friday == 4
TRADING_WEEKDAYS = frozenset(range(0, 5))


class MarketCalendar:
    """
    Decides whether the market is open at a given instant.

    Open iff the market-local weekday is Monday..Friday and the
    minute-of-day falls in the half-open window [open_minute, close_minute).
    """

    def __init__(
        self,
        timezone_name: str = "Asia/Kolkata",
        open_minute: int = 9 * 60 + 15,
        close_minute: int = 15 * 60 + 30,
    ):
        self.tz = resolve_timezone(timezone_name)
        self.open_minute = open_minute
        self.close_minute = close_minute

    def now(self) -> datetime:
        """Current market-local time."""
        return now_in(self.tz)

    def is_open(self, now: datetime) -> bool:
        local = to_market_time(now, self.tz)
        if local.weekday() not in TRADING_WEEKDAYS:
            return False
        minutes = local.hour * 60 + local.minute
        return self.open_minute <= minutes < self.close_minute
