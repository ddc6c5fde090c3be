"""Repository layer - data access abstractions and implementations."""

from nifty_ticker.repositories.protocols import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
