"""Domain entities for speciesproxy."""

from speciesproxy.core.entities.config import ProxyConfig
from speciesproxy.core.entities.cache_entry import CacheEntry
from speciesproxy.core.entities.cache_stats import CacheStats
from speciesproxy.core.entities.errors import AppError, ErrorKind
from speciesproxy.core.entities.species import SpeciesRecord
from speciesproxy.core.entities.translation import (
    TranslationStyle,
    select_translation_style,
)

__all__ = [
    "AppError",
    "CacheEntry",
    "CacheStats",
    "ErrorKind",
    "ProxyConfig",
    "SpeciesRecord",
    "TranslationStyle",
    "select_translation_style",
]
