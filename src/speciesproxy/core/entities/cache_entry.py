"""Cache entry entity."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Represents a cached value together with the moment it was stored
    and its time-to-live. Times are expressed on the clock of the
    backend that created the entry (monotonic seconds by default).
    """

    key: str
    value: Any
    created_at: float
    ttl: timedelta | None = None

    @property
    def expires_at(self) -> float | None:
        """Calculate expiration time.

        Returns:
            The clock reading at which this entry expires, or None if
            the entry never expires by TTL.
        """
        if not self.ttl:
            return None
        return self.created_at + self.ttl.total_seconds()

    def is_expired(self, now: float) -> bool:
        """Check if entry has expired.

        Args:
            now: Current clock reading.

        Returns:
            True if the entry has expired, False otherwise.
        """
        if self.expires_at is None:
            return False
        return now >= self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        value: Any,
        now: float,
        ttl: timedelta | None = None,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The value to cache.
            now: Current clock reading.
            ttl: Optional time-to-live. None or zero never expires.

        Returns:
            A new CacheEntry instance.
        """
        return cls(key=key, value=value, created_at=now, ttl=ttl)
