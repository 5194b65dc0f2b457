"""Core domain layer for speciesproxy."""

from speciesproxy.core.entities import (
    AppError,
    CacheEntry,
    CacheStats,
    ErrorKind,
    ProxyConfig,
    SpeciesRecord,
    TranslationStyle,
    select_translation_style,
)
from speciesproxy.core.interfaces import ICacheBackend, IKeyBuilder
from speciesproxy.core.services import (
    CacheService,
    SpeciesFetcher,
    TranslatedSpeciesService,
    TranslationFetcher,
)

__all__ = [
    # Entities
    "AppError",
    "CacheEntry",
    "CacheStats",
    "ErrorKind",
    "ProxyConfig",
    "SpeciesRecord",
    "TranslationStyle",
    "select_translation_style",
    # Interfaces
    "ICacheBackend",
    "IKeyBuilder",
    # Services
    "CacheService",
    "SpeciesFetcher",
    "TranslatedSpeciesService",
    "TranslationFetcher",
]
