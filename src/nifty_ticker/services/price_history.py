"""Bounded rolling buffer of recent prices for the chart."""

from collections import deque


class PriceHistoryBuffer:
    """FIFO buffer that keeps at most `capacity` prices, evicting the oldest."""

    def __init__(self, capacity: int = 20):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._prices: deque[float] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._prices.maxlen

    def append(self, price: float) -> None:
        self._prices.append(price)

    def snapshot(self) -> tuple[float, ...]:
        """Read-only copy in append order (oldest first)."""
        return tuple(self._prices)

    def __len__(self) -> int:
        return len(self._prices)
