"""Core interfaces (Protocol classes) for speciesproxy."""

from speciesproxy.core.interfaces.cache_backend import ICacheBackend
from speciesproxy.core.interfaces.key_builder import IKeyBuilder

__all__ = [
    "ICacheBackend",
    "IKeyBuilder",
]
