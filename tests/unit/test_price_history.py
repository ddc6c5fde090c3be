"""Unit tests for PriceHistoryBuffer."""

import pytest

from nifty_ticker.services import PriceHistoryBuffer


class TestPriceHistoryBuffer:

    def test_starts_empty(self):
        buffer = PriceHistoryBuffer()

        assert buffer.snapshot() == ()
        assert len(buffer) == 0
        assert buffer.capacity == 20

    def test_keeps_append_order(self):
        buffer = PriceHistoryBuffer(5)
        for price in (1.0, 2.0, 3.0):
            buffer.append(price)

        assert buffer.snapshot() == (1.0, 2.0, 3.0)

    def test_never_exceeds_capacity(self):
        """
        GIVEN capacity 20
        WHEN 25 prices are appended
        THEN exactly the last 20 are kept, oldest first
        """
        buffer = PriceHistoryBuffer(20)
        values = [float(i) for i in range(25)]
        for value in values:
            buffer.append(value)

        assert len(buffer) == 20
        assert buffer.snapshot() == tuple(values[-20:])

    def test_capacity_one(self):
        buffer = PriceHistoryBuffer(1)
        buffer.append(10.0)
        buffer.append(11.0)

        assert buffer.snapshot() == (11.0,)

    def test_snapshot_is_a_copy(self):
        buffer = PriceHistoryBuffer(3)
        buffer.append(1.0)
        snap = buffer.snapshot()
        buffer.append(2.0)

        assert snap == (1.0,)

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            PriceHistoryBuffer(0)
