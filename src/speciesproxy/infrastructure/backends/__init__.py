"""Cache backend implementations."""

from speciesproxy.infrastructure.backends.memory import InMemoryCacheBackend

__all__ = ["InMemoryCacheBackend"]
