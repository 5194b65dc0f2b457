"""Cache service - process-wide read-through cache."""

import asyncio
import contextlib
import logging
from datetime import timedelta
from typing import Any

from speciesproxy.core.entities.config import ProxyConfig
from speciesproxy.core.entities.cache_stats import CacheStats
from speciesproxy.core.interfaces.cache_backend import ICacheBackend

logger = logging.getLogger(__name__)


class CacheService:
    """Domain service that fronts the cache backend.

    This is the single cache instance shared by the fetchers. It keeps
    hit, miss and set counters and owns the background sweeper that
    reclaims memory held by expired entries.

    Counters are cumulative for the lifetime of the service; ``flush``
    empties the backend without resetting them.
    """

    def __init__(
        self,
        backend: ICacheBackend,
        config: ProxyConfig | None = None,
    ) -> None:
        """Initialize the cache service.

        Args:
            backend: The cache backend to use for storage.
            config: Optional configuration. Uses defaults if not provided.
        """
        self._backend = backend
        self._config = config or ProxyConfig()
        self._sweeper: asyncio.Task[None] | None = None

        # Statistics
        self._hits = 0
        self._misses = 0
        self._sets = 0

    @property
    def config(self) -> ProxyConfig:
        """Get the proxy configuration."""
        return self._config

    @property
    def stats(self) -> CacheStats:
        """Get cache statistics.

        Returns:
            Snapshot with hits, misses, sets and the live key count.
        """
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            keys=len(self._backend),
            sets=self._sets,
        )

    async def get(self, key: str) -> Any | None:
        """Look up a key, counting the hit or miss.

        Args:
            key: The cache key.

        Returns:
            The cached value, or None if absent or expired.
        """
        value = await self._backend.get(key)

        if value is None:
            self._misses += 1
            logger.debug("Cache MISS: %s", key)
            return None

        self._hits += 1
        logger.debug("Cache HIT: %s", key)
        return value

    async def set(
        self,
        key: str,
        value: Any,
        ttl: timedelta | None = None,
    ) -> bool:
        """Store a value, replacing any existing entry.

        Args:
            key: The cache key.
            value: The value to cache.
            ttl: Optional time-to-live. None never expires.

        Returns:
            True once stored.
        """
        await self._backend.set(key, value, ttl)
        self._sets += 1
        logger.debug("Cache SET: %s", key)
        return True

    async def delete(self, key: str) -> bool:
        """Delete a key.

        Returns:
            True if a live entry was removed.
        """
        return await self._backend.delete(key)

    async def flush(self) -> None:
        """Remove every entry. Counters are kept."""
        await self._backend.clear()
        logger.info("Cache flushed")

    def sweep(self) -> int:
        """Physically remove expired entries.

        Returns:
            Number of entries removed.
        """
        purged = self._backend.expire()
        if purged:
            logger.debug("Cache EXPIRED: %d entries", purged)
        return purged

    @property
    def sweeper_running(self) -> bool:
        return self._sweeper is not None and not self._sweeper.done()

    def start_sweeper(self) -> None:
        """Start the periodic sweep task on the running event loop."""
        if self.sweeper_running:
            return
        period = self._config.cache_check_period or timedelta(minutes=10)
        self._sweeper = asyncio.create_task(self._sweep_forever(period.total_seconds()))
        logger.info("Cache sweeper started (every %ss)", period.total_seconds())

    async def stop_sweeper(self) -> None:
        """Cancel the sweep task and wait for it to finish."""
        if self._sweeper is None:
            return
        self._sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._sweeper
        self._sweeper = None
        logger.info("Cache sweeper stopped")

    async def _sweep_forever(self, period: float) -> None:
        while True:
            await asyncio.sleep(period)
            try:
                self.sweep()
            except Exception:
                logger.exception("Cache sweep failed")
