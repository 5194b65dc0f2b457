"""Infrastructure layer implementations for speciesproxy."""

from speciesproxy.infrastructure.backends import InMemoryCacheBackend
from speciesproxy.infrastructure.key_builders import DefaultKeyBuilder
from speciesproxy.infrastructure.retry import RetryPolicy, is_transient

__all__ = [
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "RetryPolicy",
    "is_transient",
]
