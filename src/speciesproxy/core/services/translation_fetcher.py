"""Translation fetcher - cached access to the translation upstream."""

import logging

import httpx

from speciesproxy.core.entities.config import ProxyConfig
from speciesproxy.core.entities.errors import AppError
from speciesproxy.core.entities.translation import TranslationStyle
from speciesproxy.core.interfaces.key_builder import IKeyBuilder
from speciesproxy.core.services.cache_service import CacheService
from speciesproxy.infrastructure.key_builders.default import DefaultKeyBuilder
from speciesproxy.infrastructure.retry import RetryPolicy

logger = logging.getLogger(__name__)

TOO_MANY_REQUESTS = 429


class TranslationFetcher:
    """Fetches translated text, cache-first.

    Translations are keyed on the style and the exact source text and
    cached for ``config.translation_ttl``. Every failure surfaces as a
    GENERIC AppError: a degraded translation service is never the
    caller's fault.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: CacheService,
        key_builder: IKeyBuilder | None = None,
        config: ProxyConfig | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._client = client
        self._cache = cache
        self._key_builder = key_builder or DefaultKeyBuilder()
        self._config = config or cache.config
        self._retry_policy = retry_policy or RetryPolicy(
            max_attempts=self._config.retry_attempts,
            backoff_multiplier=self._config.retry_backoff_multiplier,
            backoff_max=self._config.retry_backoff_max,
        )

    async def translate(self, style: TranslationStyle, text: str) -> str:
        """Translate text in the given style.

        Args:
            style: The translation style.
            text: Source text, used verbatim.

        Returns:
            The translated text.

        Raises:
            AppError: GENERIC on any failure; rate limiting is reported
                as "Translation rate limit exceeded".
        """
        key = self._key_builder.build_translation_key(style, text)
        cached = await self._cache.get(key)
        if cached is not None:
            return cached

        url = f"{self._config.translation_base_url}/{style.value}"
        try:
            response = await self._retry_policy.call(self._request, url, text)
            translated = response.json()["contents"]["translated"]
        except httpx.HTTPStatusError as e:
            if e.response.status_code == TOO_MANY_REQUESTS:
                logger.warning("Translation API rate limit exceeded (429)")
                raise AppError.generic(cause=e, message="Translation rate limit exceeded") from e
            logger.error("Error fetching translation: upstream status %d", e.response.status_code)
            raise AppError.generic(cause=e) from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError, KeyError, TypeError) as e:
            logger.error("Error fetching translation", exc_info=True)
            raise AppError.generic(cause=e) from e

        if not isinstance(translated, str):
            logger.error("Unexpected translation payload type %s", type(translated).__name__)
            raise AppError.generic(message="Unexpected translation response")

        await self._cache.set(key, translated, self._config.translation_ttl)
        return translated

    async def _request(self, url: str, text: str) -> httpx.Response:
        logger.debug("Requesting translation from %s", url)
        response = await self._client.post(url, json={"text": text})
        response.raise_for_status()
        return response
