"""Single periodic timer driving the pipeline."""

import logging
import threading
from typing import Optional

from nifty_ticker.services.quote_pipeline import QuotePipeline

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Runs pipeline ticks on one background thread at a fixed period.

    A tick is attempted immediately on start, then every interval. Ticks
    never overlap: if a manual tick holds the pipeline when the timer
    fires, the timer's tick is skipped. stop() cancels the timer.
    """

    def __init__(
        self,
        pipeline: QuotePipeline,
        interval_seconds: float = 5.0,
        after_hours_interval_seconds: Optional[float] = None,
    ):
        self._pipeline = pipeline
        self._interval = interval_seconds
        self._after_hours_interval = after_hours_interval_seconds or interval_seconds
        self._stop = threading.Event()
        self._wake = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="tick-scheduler", daemon=True)
        self._thread.start()
        logger.info("Tick scheduler started (every %.1fs)", self._interval)

    def refresh_now(self) -> None:
        """Wake the timer thread to tick immediately."""
        self._wake.set()

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop.set()
        self._wake.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Tick scheduler stopped")

    def next_interval(self) -> float:
        if self._pipeline.market_open is False:
            return self._after_hours_interval
        return self._interval

    def run_once(self) -> None:
        try:
            self._pipeline.tick(blocking=False)
        except Exception:
            # Keep the timer alive; the next tick starts clean
            logger.exception("Tick failed")

    def _run(self) -> None:
        while not self._stop.is_set():
            self.run_once()
            self._wake.wait(self.next_interval())
            self._wake.clear()
