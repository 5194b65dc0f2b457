"""In-memory cache backend implementation."""

import math
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any

from cachetools import TLRUCache  # type: ignore[import-untyped]

from speciesproxy.core.entities.cache_entry import CacheEntry


class InMemoryCacheBackend:
    """In-memory cache backend with per-entry TTL.

    Suitable for single-process deployments. Uses cachetools
    ``TLRUCache`` so each entry expires according to its own TTL;
    expired entries read as absent until :meth:`expire` removes them.
    """

    def __init__(
        self,
        maxsize: float = math.inf,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache backend.

        Args:
            maxsize: Maximum number of items in the cache. Unbounded by
                default, so entries only leave by TTL, deletion or clear.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._timer = timer
        self._cache: TLRUCache[str, CacheEntry] = TLRUCache(
            maxsize=maxsize,
            ttu=self._time_to_use,
            timer=timer,
        )

    @staticmethod
    def _time_to_use(key: str, entry: CacheEntry, now: float) -> float:
        expires_at = entry.expires_at
        return math.inf if expires_at is None else expires_at

    async def get(self, key: str) -> Any | None:
        """Retrieve cached value by key.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        entry = self._cache.get(key)
        return None if entry is None else entry.value

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
            ttl: Optional time-to-live. None or zero never expires.
        """
        self._cache[key] = CacheEntry.create(key, value, now=self._timer(), ttl=ttl)

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if a live entry existed and was deleted, False otherwise.
        """
        if key not in self._cache:
            return False
        try:
            del self._cache[key]
            return True
        except KeyError:
            return False

    async def exists(self, key: str) -> bool:
        """Check if key exists in cache.

        Args:
            key: The cache key to check.

        Returns:
            True if a live entry exists, False otherwise.
        """
        return key in self._cache

    async def clear(self) -> None:
        """Clear all cached values."""
        self._cache.clear()

    def expire(self) -> int:
        """Remove expired entries.

        Returns:
            Number of entries removed.
        """
        return len(self._cache.expire())

    def __len__(self) -> int:
        """Return the number of live items in the cache."""
        self._cache.expire()
        return len(self._cache)

    @property
    def maxsize(self) -> float:
        """Return the maximum size of the cache."""
        return self._maxsize
