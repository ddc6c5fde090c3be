"""Market data source protocols and result types."""

from typing import Protocol, Union

from nifty_ticker.domain.models import CachedRecord, Failure, Quote

LiveResult = Union[Quote, Failure]
HistoricalResult = Union[CachedRecord, Failure]


class LiveQuoteSource(Protocol):
    """
    Protocol for the current-session quote provider.

    Implementations make one upstream request with no retry and never
    raise: transport errors and malformed payloads come back as Failure.
    """

    def fetch_live(self) -> LiveResult:
        """Return the live quote (is_stale=False) or a Failure."""
        ...


class HistoricalQuoteSource(Protocol):
    """Protocol for a remote lookup of the last completed session."""

    def fetch_last_session(self) -> HistoricalResult:
        """Return the last-session record or a Failure."""
        ...
