"""Domain models package."""

from nifty_ticker.domain.models.enums import FailureKind, QuoteOrigin
from nifty_ticker.domain.models.quote import Quote, CachedRecord
from nifty_ticker.domain.models.result import Failure, is_failure

__all__ = [
    "FailureKind",
    "QuoteOrigin",
    "Quote",
    "CachedRecord",
    "Failure",
    "is_failure",
]
