"""Repository protocols (interfaces)."""

from nifty_ticker.repositories.protocols.kv_repo import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
