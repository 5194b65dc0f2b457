"""Domain services for speciesproxy."""

from speciesproxy.core.services.cache_service import CacheService
from speciesproxy.core.services.species_fetcher import SpeciesFetcher
from speciesproxy.core.services.translated_species import TranslatedSpeciesService
from speciesproxy.core.services.translation_fetcher import TranslationFetcher

__all__ = [
    "CacheService",
    "SpeciesFetcher",
    "TranslatedSpeciesService",
    "TranslationFetcher",
]
