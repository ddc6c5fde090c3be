"""API routers."""

from nifty_ticker.api.routers.quote import router as quote_router

__all__ = [
    "quote_router",
]
