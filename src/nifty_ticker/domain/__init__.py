"""Domain layer - pure quote models with no external dependencies."""

from nifty_ticker.domain.models import (
    Quote,
    CachedRecord,
    Failure,
    FailureKind,
    QuoteOrigin,
    is_failure,
)

__all__ = [
    "Quote",
    "CachedRecord",
    "Failure",
    "FailureKind",
    "QuoteOrigin",
    "is_failure",
]
