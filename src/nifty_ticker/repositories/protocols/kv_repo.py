"""Key-value repository protocol for the persistent local store."""

from typing import Optional, Protocol


class KeyValueRepository(Protocol):
    """Interface for a string-keyed, string-valued persistent store."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Insert or overwrite the value for a key."""
        ...
