"""Presenter protocol and headless presenters."""

import logging
import queue
import threading
from typing import Optional, Protocol, Sequence

from nifty_ticker.domain.models import Quote
from nifty_ticker.ui import formatting

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    """
    Display surface notified at the end of every tick.

    All three calls are idempotent and may be invoked indefinitely at the
    refresh cadence.
    """

    def render(self, quote: Quote) -> None:
        ...

    def render_history(self, prices: Sequence[float]) -> None:
        ...

    def render_market_status(self, is_open: bool) -> None:
        ...


class LoggingPresenter:
    """Writes each tick to the log; used when running without a UI."""

    def __init__(self, display_name: str = "Nifty 50"):
        self._display_name = display_name

    def render(self, quote: Quote) -> None:
        logger.info(
            "%s %s %s (%s) H %s L %s O %s C %s at %s",
            self._display_name,
            formatting.format_price(quote.price),
            formatting.format_change(quote.change),
            formatting.format_change_percent(quote.change_percent),
            formatting.format_price(quote.day_high),
            formatting.format_price(quote.day_low),
            formatting.format_price(quote.open),
            formatting.format_close(quote),
            formatting.format_timestamp(quote),
        )

    def render_history(self, prices: Sequence[float]) -> None:
        logger.debug("History (%d): %s", len(prices), list(prices))

    def render_market_status(self, is_open: bool) -> None:
        logger.info(formatting.market_status_text(is_open))


class SnapshotPresenter:
    """Keeps the most recent render state for readers on other threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._quote: Optional[Quote] = None
        self._history: tuple[float, ...] = ()
        self._is_open: Optional[bool] = None

    def render(self, quote: Quote) -> None:
        with self._lock:
            self._quote = quote

    def render_history(self, prices: Sequence[float]) -> None:
        with self._lock:
            self._history = tuple(prices)

    def render_market_status(self, is_open: bool) -> None:
        with self._lock:
            self._is_open = is_open

    @property
    def quote(self) -> Optional[Quote]:
        with self._lock:
            return self._quote

    @property
    def history(self) -> tuple[float, ...]:
        with self._lock:
            return self._history

    @property
    def is_open(self) -> Optional[bool]:
        with self._lock:
            return self._is_open


class CompositePresenter:
    """Fans every call out to several presenters in order."""

    def __init__(self, *presenters: Presenter):
        self._presenters = list(presenters)

    def add(self, presenter: Presenter) -> None:
        self._presenters.append(presenter)

    def render(self, quote: Quote) -> None:
        for presenter in self._presenters:
            presenter.render(quote)

    def render_history(self, prices: Sequence[float]) -> None:
        for presenter in self._presenters:
            presenter.render_history(prices)

    def render_market_status(self, is_open: bool) -> None:
        for presenter in self._presenters:
            presenter.render_market_status(is_open)


class QueuedPresenter:
    """
    Hands render calls from worker threads to a UI thread.

    The render methods only enqueue and never block; drain() replays the
    queued calls on the target and must be called from the thread that
    owns it. After close() further calls are discarded.
    """

    def __init__(self, target: Presenter):
        self._target = target
        self._calls: queue.Queue = queue.Queue()
        self._closed = threading.Event()

    def render(self, quote: Quote) -> None:
        self._put("render", quote)

    def render_history(self, prices: Sequence[float]) -> None:
        self._put("render_history", tuple(prices))

    def render_market_status(self, is_open: bool) -> None:
        self._put("render_market_status", is_open)

    def _put(self, name: str, arg) -> None:
        if not self._closed.is_set():
            self._calls.put((name, arg))

    def drain(self) -> int:
        """Replay every queued call on the target; returns how many ran."""
        count = 0
        while not self._closed.is_set():
            try:
                name, arg = self._calls.get_nowait()
            except queue.Empty:
                break
            getattr(self._target, name)(arg)
            count += 1
        return count

    @property
    def pending(self) -> int:
        return self._calls.qsize()

    def close(self) -> None:
        self._closed.set()
