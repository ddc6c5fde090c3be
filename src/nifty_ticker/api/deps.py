"""Dependency injection for FastAPI."""

from fastapi import Request

from nifty_ticker.app_context import AppContext


def get_context(request: Request) -> AppContext:
    """Provide the AppContext created in the app lifespan."""
    return request.app.state.context
