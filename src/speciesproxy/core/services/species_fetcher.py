"""Species fetcher - cached access to the species upstream."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from speciesproxy.core.entities.config import ProxyConfig
from speciesproxy.core.entities.errors import AppError
from speciesproxy.core.entities.species import SpeciesRecord
from speciesproxy.core.interfaces.key_builder import IKeyBuilder
from speciesproxy.core.services.cache_service import CacheService
from speciesproxy.infrastructure.key_builders.default import DefaultKeyBuilder
from speciesproxy.infrastructure.retry import RetryPolicy
from speciesproxy.utils.text import flatten_line_breaks, normalize_name

logger = logging.getLogger(__name__)

NOT_FOUND_STATUSES = frozenset({400, 404})
DOT_SEGMENTS = frozenset({".", ".."})
SERVICE_UNAVAILABLE = 503


class SpeciesFetcher:
    """Fetches and normalizes species records.

    Lookups are cache-first. On a miss the upstream is queried under the
    retry policy, the payload is normalized into a SpeciesRecord and the
    record is cached for ``config.species_ttl``. Upstream failures are
    classified into AppError here and nowhere else.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: CacheService,
        key_builder: IKeyBuilder | None = None,
        config: ProxyConfig | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize the species fetcher.

        Args:
            client: HTTP client used for upstream calls.
            cache: The shared cache service.
            key_builder: Key builder. Defaults to DefaultKeyBuilder.
            config: Optional configuration. Defaults to the cache's.
            retry_policy: Retry policy. Built from config if not provided.
        """
        self._client = client
        self._cache = cache
        self._key_builder = key_builder or DefaultKeyBuilder()
        self._config = config or cache.config
        self._retry_policy = retry_policy or RetryPolicy(
            max_attempts=self._config.retry_attempts,
            backoff_multiplier=self._config.retry_backoff_multiplier,
            backoff_max=self._config.retry_backoff_max,
        )

    async def fetch_by_name(self, name: str) -> SpeciesRecord:
        """Get the normalized record for a species.

        Args:
            name: Species name; surrounding whitespace and casing are
                ignored.

        Returns:
            The SpeciesRecord, from cache when available.

        Raises:
            AppError: MANDATORY_PARAM for a blank name, NOT_FOUND when
                the upstream does not know the species,
                SERVICE_UNAVAILABLE when it cannot be reached, GENERIC
                otherwise.
        """
        normalized = normalize_name(name)
        if not normalized:
            raise AppError.mandatory("name")

        if normalized in DOT_SEGMENTS:
            raise AppError.not_found("species")

        key = self._key_builder.build_species_key(normalized)
        cached = await self._cache.get(key)
        if cached is not None:
            return cached

        url = f"{self._config.species_base_url}/{quote(normalized, safe='')}"
        try:
            response = await self._retry_policy.call(self._request, url)
            record = self._to_record(response.json(), normalized)
        except httpx.HTTPStatusError as e:
            raise self._classify_status(e, normalized) from e
        except httpx.TransportError as e:
            logger.warning("Species upstream unreachable for %s: %s", normalized, e)
            raise AppError.service_unavailable(cause=e) from e
        except httpx.InvalidURL as e:
            logger.error("Invalid species upstream URL for %r: %s", normalized, e)
            raise AppError.generic(cause=e) from e
        except (httpx.HTTPError, ValueError, TypeError, AttributeError) as e:
            logger.error("Error fetching species %s", normalized, exc_info=True)
            raise AppError.generic(cause=e) from e

        await self._cache.set(key, record, self._config.species_ttl)
        return record

    async def _request(self, url: str) -> httpx.Response:
        logger.debug("Fetching species data from %s", url)
        response = await self._client.get(url)
        response.raise_for_status()
        return response

    def _classify_status(self, error: httpx.HTTPStatusError, name: str) -> AppError:
        status = error.response.status_code
        if status in NOT_FOUND_STATUSES:
            logger.warning("Species %s not found upstream (%d)", name, status)
            return AppError.not_found("species")
        if status == SERVICE_UNAVAILABLE:
            logger.warning("Species upstream unavailable for %s (503)", name)
            return AppError.service_unavailable(cause=error)
        logger.error("Unexpected species upstream status %d for %s", status, name)
        return AppError.generic(cause=error)

    @staticmethod
    def _to_record(payload: dict[str, Any], name: str) -> SpeciesRecord:
        """Build a SpeciesRecord from an upstream payload.

        Missing optional fields default to "" or False.

        Args:
            payload: Decoded upstream JSON.
            name: Normalized lookup name, used when the payload has none.

        Returns:
            A new SpeciesRecord instance.
        """
        description = ""
        for entry in payload.get("flavor_text_entries") or []:
            if entry.get("flavor_text") is not None:
                description = flatten_line_breaks(entry["flavor_text"])
                break

        habitat = payload.get("habitat") or {}

        return SpeciesRecord(
            name=payload.get("name") or name,
            description=description,
            habitat=habitat.get("name") or "",
            is_legendary=payload.get("is_legendary") is True,
        )
