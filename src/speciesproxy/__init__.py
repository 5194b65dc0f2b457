"""speciesproxy - read-through caching proxy for species data.

Fronts a species-data upstream and a text-translation upstream with a
process-wide TTL cache. Species records are normalized into a stable
shape; translated descriptions are best-effort and fall back to the
original text when the translation upstream fails.

Example:
    import httpx
    from speciesproxy import (
        CacheService,
        InMemoryCacheBackend,
        ProxyConfig,
        SpeciesFetcher,
        TranslatedSpeciesService,
        TranslationFetcher,
    )

    config = ProxyConfig()
    cache = CacheService(backend=InMemoryCacheBackend(), config=config)

    async with httpx.AsyncClient() as client:
        service = TranslatedSpeciesService(
            SpeciesFetcher(client, cache),
            TranslationFetcher(client, cache),
        )
        record = await service.get_translated_species("mewtwo")
        print(record.description, cache.stats)

Or let ``create_services`` do the wiring:
    from speciesproxy import create_services

    services = create_services()
    record = await services.species_fetcher.fetch_by_name("Pikachu")
    await services.aclose()
"""

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
from speciesproxy.factory import ProxyServices, create_services
from speciesproxy.infrastructure import (
    DefaultKeyBuilder,
    InMemoryCacheBackend,
    RetryPolicy,
    is_transient,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "AppError",
    "CacheEntry",
    "CacheStats",
    "ErrorKind",
    "ProxyConfig",
    "SpeciesRecord",
    "TranslationStyle",
    "select_translation_style",
    # Core interfaces
    "ICacheBackend",
    "IKeyBuilder",
    # Core services
    "CacheService",
    "SpeciesFetcher",
    "TranslationFetcher",
    "TranslatedSpeciesService",
    # Infrastructure implementations
    "InMemoryCacheBackend",
    "DefaultKeyBuilder",
    "RetryPolicy",
    "is_transient",
    # Wiring
    "ProxyServices",
    "create_services",
]
