"""
Unit tests for TickScheduler.

Tests cover:
- Immediate tick on start and periodic ticks after
- Manual refresh wake-up
- Cancellation on stop
- Errors in a tick do not kill the timer
- After-hours interval selection
"""

import time
from unittest.mock import MagicMock

from nifty_ticker.services import TickScheduler

from tests.conftest import CLOSED_NOW, OPEN_NOW


def wait_for(condition, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.01)
    return condition()


class TestTickScheduler:

    def test_ticks_immediately_and_periodically(self, make_pipeline):
        pipeline, _ = make_pipeline(CLOSED_NOW)
        scheduler = TickScheduler(pipeline, interval_seconds=0.02)

        scheduler.start()
        try:
            assert wait_for(lambda: len(pipeline.history) >= 3)
        finally:
            scheduler.stop()

        assert not scheduler.running

    def test_stop_cancels_timer(self, make_pipeline):
        pipeline, _ = make_pipeline(CLOSED_NOW)
        scheduler = TickScheduler(pipeline, interval_seconds=60)

        scheduler.start()
        assert wait_for(lambda: len(pipeline.history) == 1)
        scheduler.stop()
        count = len(pipeline.history)

        time.sleep(0.05)
        assert len(pipeline.history) == count

    def test_refresh_now_wakes_timer(self, make_pipeline):
        pipeline, _ = make_pipeline(CLOSED_NOW)
        scheduler = TickScheduler(pipeline, interval_seconds=60)

        scheduler.start()
        try:
            assert wait_for(lambda: len(pipeline.history) == 1)
            scheduler.refresh_now()
            assert wait_for(lambda: len(pipeline.history) == 2)
        finally:
            scheduler.stop()

    def test_tick_errors_do_not_stop_timer(self):
        pipeline = MagicMock()
        pipeline.market_open = True
        pipeline.tick.side_effect = RuntimeError("presenter exploded")
        scheduler = TickScheduler(pipeline, interval_seconds=0.01)

        scheduler.start()
        try:
            assert wait_for(lambda: pipeline.tick.call_count >= 3)
        finally:
            scheduler.stop()

    def test_timer_ticks_are_non_blocking(self):
        pipeline = MagicMock()
        scheduler = TickScheduler(pipeline)

        scheduler.run_once()

        pipeline.tick.assert_called_once_with(blocking=False)

    def test_after_hours_interval(self, make_pipeline):
        pipeline, clock = make_pipeline(OPEN_NOW)
        scheduler = TickScheduler(pipeline, interval_seconds=5, after_hours_interval_seconds=60)

        assert scheduler.next_interval() == 5
        pipeline.tick()
        assert scheduler.next_interval() == 5
        clock.now = CLOSED_NOW
        pipeline.tick()
        assert scheduler.next_interval() == 60

    def test_single_interval_by_default(self, make_pipeline):
        pipeline, _ = make_pipeline(CLOSED_NOW)
        scheduler = TickScheduler(pipeline, interval_seconds=5)

        pipeline.tick()

        assert scheduler.next_interval() == 5
