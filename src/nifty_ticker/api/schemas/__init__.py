"""Pydantic schemas for API responses."""

from nifty_ticker.api.schemas.quote import (
    QuoteResponse,
    HistoryResponse,
    MarketStatusResponse,
    TickResponse,
)

__all__ = [
    "QuoteResponse",
    "HistoryResponse",
    "MarketStatusResponse",
    "TickResponse",
]
