"""Quote, history and market status endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from nifty_ticker.api.deps import get_context
from nifty_ticker.api.schemas import (
    HistoryResponse,
    MarketStatusResponse,
    QuoteResponse,
    TickResponse,
)
from nifty_ticker.app_context import AppContext
from nifty_ticker.core.exceptions import TickInProgressError
from nifty_ticker.ui import formatting

router = APIRouter(tags=["quote"])


@router.get("/quote", response_model=QuoteResponse)
def get_quote(context: AppContext = Depends(get_context)) -> QuoteResponse:
    """Latest quote emitted by the pipeline."""
    quote = context.snapshot.quote
    if quote is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="No quote available yet",
        )
    return QuoteResponse.from_quote(quote)


@router.get("/history", response_model=HistoryResponse)
def get_history(context: AppContext = Depends(get_context)) -> HistoryResponse:
    """Recent prices, oldest first."""
    return HistoryResponse(
        prices=list(context.snapshot.history),
        capacity=context.pipeline.history.capacity,
    )


@router.get("/status", response_model=MarketStatusResponse)
def get_status(context: AppContext = Depends(get_context)) -> MarketStatusResponse:
    """Market open/closed right now, per the calendar."""
    is_open = context.calendar.is_open(context.calendar.now())
    return MarketStatusResponse(
        is_open=is_open,
        status_text=formatting.market_status_text(is_open),
        last_tick_open=context.snapshot.is_open,
    )


@router.post("/refresh", response_model=TickResponse)
def refresh(context: AppContext = Depends(get_context)) -> TickResponse:
    """Run a tick now. Rejected while another tick is in flight."""
    result = context.pipeline.tick(blocking=False)
    if result is None:
        raise TickInProgressError()
    return TickResponse(
        quote=QuoteResponse.from_quote(result.quote),
        history=list(result.history),
    )
