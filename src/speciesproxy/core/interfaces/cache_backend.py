"""Cache backend interface."""

from datetime import timedelta
from typing import Any, Protocol


class ICacheBackend(Protocol):
    """Contract for cache storage backends.

    Backends store opaque values with an optional per-entry TTL.
    An entry whose TTL has elapsed must read as absent even if it
    has not been physically removed yet.
    """

    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        ...

    async def set(
        self,
        key: str,
        value: Any,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The cache key.
            value: The value to store.
            ttl: Optional time-to-live. If None, the entry never expires.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...

    async def exists(self, key: str) -> bool:
        """Check if a live entry exists for key."""
        ...

    async def clear(self) -> None:
        """Clear all cached values."""
        ...

    def expire(self) -> int:
        """Physically remove expired entries.

        Returns:
            Number of entries removed.
        """
        ...

    def __len__(self) -> int:
        """Return the number of live entries."""
        ...
