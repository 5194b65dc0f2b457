"""Wiring of the proxy's collaborators."""

from dataclasses import dataclass

import httpx

from speciesproxy.core.entities.config import ProxyConfig
from speciesproxy.core.interfaces.cache_backend import ICacheBackend
from speciesproxy.core.services.cache_service import CacheService
from speciesproxy.core.services.species_fetcher import SpeciesFetcher
from speciesproxy.core.services.translated_species import TranslatedSpeciesService
from speciesproxy.core.services.translation_fetcher import TranslationFetcher
from speciesproxy.infrastructure.backends.memory import InMemoryCacheBackend
from speciesproxy.infrastructure.key_builders.default import DefaultKeyBuilder
from speciesproxy.infrastructure.retry import RetryPolicy


@dataclass
class ProxyServices:
    """The process-wide set of services, sharing one cache."""

    config: ProxyConfig
    client: httpx.AsyncClient
    cache: CacheService
    species_fetcher: SpeciesFetcher
    translation_fetcher: TranslationFetcher
    translated_species: TranslatedSpeciesService
    owns_client: bool = False

    async def aclose(self) -> None:
        """Stop the sweeper and close the HTTP client if we created it."""
        await self.cache.stop_sweeper()
        if self.owns_client:
            await self.client.aclose()


def create_services(
    config: ProxyConfig | None = None,
    client: httpx.AsyncClient | None = None,
    backend: ICacheBackend | None = None,
) -> ProxyServices:
    """Build the cache, both fetchers and the translated species service.

    Args:
        config: Optional configuration. Uses defaults if not provided.
        client: Optional HTTP client. One is created (and owned) if not
            provided.
        backend: Optional cache backend. An unbounded in-memory backend
            is created if not provided.

    Returns:
        The wired ProxyServices.
    """
    config = config or ProxyConfig()
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=config.http_timeout)

    cache = CacheService(
        backend=backend or InMemoryCacheBackend(maxsize=config.cache_max_size),
        config=config,
    )
    key_builder = DefaultKeyBuilder(prefix=config.cache_key_prefix)
    retry_policy = RetryPolicy(
        max_attempts=config.retry_attempts,
        backoff_multiplier=config.retry_backoff_multiplier,
        backoff_max=config.retry_backoff_max,
    )

    species_fetcher = SpeciesFetcher(
        client=client,
        cache=cache,
        key_builder=key_builder,
        config=config,
        retry_policy=retry_policy,
    )
    translation_fetcher = TranslationFetcher(
        client=client,
        cache=cache,
        key_builder=key_builder,
        config=config,
        retry_policy=retry_policy,
    )

    return ProxyServices(
        config=config,
        client=client,
        cache=cache,
        species_fetcher=species_fetcher,
        translation_fetcher=translation_fetcher,
        translated_species=TranslatedSpeciesService(species_fetcher, translation_fetcher),
        owns_client=owns_client,
    )
