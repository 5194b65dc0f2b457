"""Cache statistics entity."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of cache counters.

    ``hits``, ``misses`` and ``sets`` are cumulative for the lifetime of
    the cache; ``keys`` is the number of live entries at snapshot time.
    """

    hits: int
    misses: int
    keys: int
    sets: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
