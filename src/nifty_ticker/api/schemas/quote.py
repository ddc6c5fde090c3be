"""Pydantic schemas for quote endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from nifty_ticker.domain.models import Quote, QuoteOrigin


class QuoteResponse(BaseModel):
    """Response schema for the latest quote."""

    price: float
    change: float
    change_percent: float
    day_high: float
    day_low: float
    open: float
    previous_close: float
    close: Optional[float] = None
    is_stale: bool
    origin: QuoteOrigin
    observed_at: datetime

    @classmethod
    def from_quote(cls, quote: Quote) -> "QuoteResponse":
        return cls(
            price=quote.price,
            change=quote.change,
            change_percent=quote.change_percent,
            day_high=quote.day_high,
            day_low=quote.day_low,
            open=quote.open,
            previous_close=quote.previous_close,
            close=quote.close,
            is_stale=quote.is_stale,
            origin=quote.origin,
            observed_at=quote.observed_at,
        )


class HistoryResponse(BaseModel):
    """Response schema for the rolling price history."""

    prices: list[float]
    capacity: int


class MarketStatusResponse(BaseModel):
    """Response schema for market status."""

    is_open: bool
    status_text: str
    last_tick_open: Optional[bool] = None


class TickResponse(BaseModel):
    """Response schema for a manually triggered tick."""

    quote: QuoteResponse
    history: list[float]
