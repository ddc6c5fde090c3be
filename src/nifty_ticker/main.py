"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nifty_ticker.app_context import AppContext
from nifty_ticker.config.settings import get_settings
from nifty_ticker.config.logging_config import setup_logging
from nifty_ticker.api.routers import quote_router
from nifty_ticker.core.exceptions import TickerError, TickInProgressError


def create_app(context: Optional[AppContext] = None, start_scheduler: bool = True) -> FastAPI:
    """Build the API around an AppContext (a default one if not given)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        setup_logging()
        ctx = context or AppContext()
        if not ctx.is_initialized:
            ctx.initialize()
        app.state.context = ctx
        if start_scheduler:
            ctx.start()
        yield
        # Shutdown
        ctx.close()

    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Nifty 50 quote ticker with market-hours aware fallback",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.include_router(quote_router)

    @app.exception_handler(TickerError)
    async def ticker_error_handler(request: Request, exc: TickerError) -> JSONResponse:
        """Global handler for application errors."""
        status_code = 409 if isinstance(exc, TickInProgressError) else 400
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "message": exc.message},
        )

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {
            "app": settings.app_name,
            "symbol": settings.symbol,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


app = create_app()
