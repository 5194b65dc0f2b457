"""Cache key builder implementations."""

from speciesproxy.infrastructure.key_builders.default import DefaultKeyBuilder

__all__ = ["DefaultKeyBuilder"]
