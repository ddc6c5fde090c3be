"""Market data providers module."""

from nifty_ticker.providers.market_data_provider import (
    LiveQuoteSource,
    HistoricalQuoteSource,
    LiveResult,
    HistoricalResult,
)
from nifty_ticker.providers.yahoo_provider import (
    YahooLiveQuoteSource,
    YahooHistoricalSource,
    HISTORICAL_DEFAULTS,
)
from nifty_ticker.providers.stub_provider import MockQuoteGenerator, DEFAULT_BASE_PRICE

__all__ = [
    "LiveQuoteSource",
    "HistoricalQuoteSource",
    "LiveResult",
    "HistoricalResult",
    "YahooLiveQuoteSource",
    "YahooHistoricalSource",
    "HISTORICAL_DEFAULTS",
    "MockQuoteGenerator",
    "DEFAULT_BASE_PRICE",
]
