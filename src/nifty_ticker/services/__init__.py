"""Service layer - calendar, fallback chain, history and tick orchestration."""

from nifty_ticker.services.market_calendar import MarketCalendar
from nifty_ticker.services.price_history import PriceHistoryBuffer
from nifty_ticker.services.historical_record_store import (
    HistoricalRecordStore,
    DEFAULT_LAST_SESSION,
    DEFAULT_CACHE_KEY,
)
from nifty_ticker.services.quote_pipeline import QuotePipeline, TickResult
from nifty_ticker.services.scheduler import TickScheduler

__all__ = [
    "MarketCalendar",
    "PriceHistoryBuffer",
    "HistoricalRecordStore",
    "DEFAULT_LAST_SESSION",
    "DEFAULT_CACHE_KEY",
    "QuotePipeline",
    "TickResult",
    "TickScheduler",
]
