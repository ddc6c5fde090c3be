"""Mock quote generation used when the live source fails during market hours."""

import random
from datetime import datetime
from typing import Optional

from nifty_ticker.domain.models import Quote, QuoteOrigin

DEFAULT_BASE_PRICE = 24250.0
MAX_VARIATION = 100.0


class MockQuoteGenerator:
    """
    Synthesizes a plausible live quote around the last known price.

    change and change_percent are derived from the rounded synthesized
    price and the previous close, so they are consistent by construction.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """Initialize with optional random seed for reproducibility."""
        self._rng = rng or random.Random(seed)

    def generate(self, last: Optional[Quote], observed_at: datetime) -> Quote:
        base_price = last.price if last and last.price else DEFAULT_BASE_PRICE
        previous_close = last.previous_close if last and last.previous_close else base_price

        raw_price = base_price + (self._rng.random() - 0.5) * 2 * MAX_VARIATION
        price = round(raw_price, 2)
        change = price - previous_close

        return Quote(
            price=price,
            change=change,
            change_percent=change / previous_close * 100,
            day_high=round(raw_price + 100 + self._rng.random() * 50, 2),
            day_low=round(raw_price - 100 - self._rng.random() * 50, 2),
            open=round(raw_price + (self._rng.random() - 0.5) * 150, 2),
            previous_close=previous_close,
            observed_at=observed_at,
            is_stale=False,
            origin=QuoteOrigin.MOCK,
        )
