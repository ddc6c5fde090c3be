"""Per-tick orchestration of the quote fallback pipeline."""

import logging
import threading
from datetime import datetime
from typing import Callable, NamedTuple, Optional

from nifty_ticker.domain.models import Quote, is_failure
from nifty_ticker.providers.market_data_provider import LiveQuoteSource
from nifty_ticker.providers.stub_provider import MockQuoteGenerator
from nifty_ticker.services.historical_record_store import HistoricalRecordStore
from nifty_ticker.services.market_calendar import MarketCalendar
from nifty_ticker.services.price_history import PriceHistoryBuffer
from nifty_ticker.ui.presenter import Presenter

logger = logging.getLogger(__name__)


class TickResult(NamedTuple):
    """What one tick emitted: the quote and the history after appending it."""

    quote: Quote
    history: tuple[float, ...]


class QuotePipeline:
    """
    Decides each tick which source to ask, applies the fallback policy and
    notifies the presenter.

    Market open: live source, falling back to a mock quote on Failure.
    Market closed: last-session record (stale), which always resolves.
    Every tick ends in exactly one quote emission.

    Ticks are serialized by a lock; a tick requested while another is in
    flight can be skipped with blocking=False.
    """

    def __init__(
        self,
        calendar: MarketCalendar,
        live_source: LiveQuoteSource,
        record_store: HistoricalRecordStore,
        history: Optional[PriceHistoryBuffer] = None,
        mock_generator: Optional[MockQuoteGenerator] = None,
        presenter: Optional[Presenter] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._calendar = calendar
        self._live_source = live_source
        self._record_store = record_store
        self._history = history if history is not None else PriceHistoryBuffer()
        self._mock_generator = mock_generator or MockQuoteGenerator()
        self._presenter = presenter
        self._clock = clock or calendar.now
        self._lock = threading.Lock()
        self._last_quote: Optional[Quote] = None
        self._market_open: Optional[bool] = None

    @property
    def history(self) -> PriceHistoryBuffer:
        return self._history

    @property
    def last_quote(self) -> Optional[Quote]:
        return self._last_quote

    @property
    def market_open(self) -> Optional[bool]:
        """Market state seen by the most recent tick (None before the first)."""
        return self._market_open

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    def set_presenter(self, presenter: Optional[Presenter]) -> None:
        self._presenter = presenter

    def tick(self, now: Optional[datetime] = None, blocking: bool = True) -> Optional[TickResult]:
        """
        Run one fetch-and-render cycle.

        Returns None only when blocking is False and another tick holds
        the lock; that tick is dropped rather than queued.
        """
        if not self._lock.acquire(blocking=blocking):
            logger.debug("Tick skipped: previous tick still in flight")
            return None
        try:
            # An explicit time pins every calendar decision of this tick
            pinned = now is not None
            now = now or self._clock()
            is_open = self._calendar.is_open(now)
            if is_open:
                quote = self._open_market_quote(now, pinned)
            else:
                quote = self._closed_market_quote(now)

            self._history.append(quote.price)
            self._last_quote = quote
            # Status follows the quote that was actually emitted
            self._market_open = not quote.is_stale
            result = TickResult(quote, self._history.snapshot())
            self._notify(result)
            return result
        finally:
            self._lock.release()

    def _open_market_quote(self, now: datetime, pinned: bool = False) -> Quote:
        try:
            result = self._live_source.fetch_live()
            if not is_failure(result):
                logger.debug("Live quote %.2f", result.price)
                return result
            logger.warning("Live quote unavailable (%s); substituting mock data", result)
            return self._mock_generator.generate(self._last_quote, now)
        except Exception:
            logger.exception("Unexpected error on the live path")
            # The session may have closed while we were waiting on the network
            if not self._calendar.is_open(now if pinned else self._clock()):
                return self._closed_market_quote(now)
            return self._mock_generator.generate(self._last_quote, now)

    def _closed_market_quote(self, now: datetime) -> Quote:
        record, origin = self._record_store.resolve()
        logger.debug("Market closed; last-session quote from %s", origin.value)
        return record.to_quote(observed_at=now, origin=origin)

    def _notify(self, result: TickResult) -> None:
        if self._presenter is None:
            return
        self._presenter.render_market_status(self._market_open)
        self._presenter.render(result.quote)
        self._presenter.render_history(result.history)
