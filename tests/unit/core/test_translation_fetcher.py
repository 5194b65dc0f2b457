"""Tests for TranslationFetcher."""

import httpx
import pytest

from speciesproxy import (
    AppError,
    CacheService,
    ErrorKind,
    ProxyConfig,
    RetryPolicy,
    TranslationFetcher,
    TranslationStyle,
)

YODA = TranslationStyle.INVERTED_SYNTAX
SHAKESPEARE = TranslationStyle.FORMAL_ARCHAIC


def translated(text: str) -> dict:
    return {
        "success": {"total": 1},
        "contents": {"translated": text, "text": "source", "translation": "yoda"},
    }


@pytest.fixture
def fetcher(
    http_client: httpx.AsyncClient,
    cache: CacheService,
    config: ProxyConfig,
    retry_policy: RetryPolicy,
) -> TranslationFetcher:
    return TranslationFetcher(http_client, cache, config=config, retry_policy=retry_policy)


class TestTranslate:
    @pytest.mark.asyncio
    async def test_returns_translated_text(self, fetcher, upstreams, config) -> None:
        upstreams.translation.reply(200, translated("Created by a scientist, it was."))

        result = await fetcher.translate(YODA, "It was created by a scientist.")

        assert result == "Created by a scientist, it was."
        request = upstreams.translation.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{config.translation_base_url}/yoda"
        assert upstreams.translation.json_body() == {"text": "It was created by a scientist."}

    @pytest.mark.asyncio
    async def test_style_selects_endpoint(self, fetcher, upstreams) -> None:
        upstreams.translation.reply(200, translated("Thee"))

        await fetcher.translate(SHAKESPEARE, "You")

        assert upstreams.translation.requests[0].url.path.endswith("/shakespeare")

    @pytest.mark.asyncio
    async def test_second_call_uses_cache(self, fetcher, upstreams, cache) -> None:
        upstreams.translation.reply(200, translated("Translated"))

        first = await fetcher.translate(YODA, "Some text")
        second = await fetcher.translate(YODA, "Some text")

        assert first == second == "Translated"
        assert upstreams.translation.calls == 1
        assert await cache.get("translation:yoda:Some text") == "Translated"

    @pytest.mark.asyncio
    async def test_source_text_is_not_normalized(self, fetcher, upstreams) -> None:
        """Test case and whitespace differences are separate cache entries."""
        upstreams.translation.reply(200, translated("Translated"))

        await fetcher.translate(YODA, "Some text")
        await fetcher.translate(YODA, "some text")
        await fetcher.translate(YODA, " Some text")

        assert upstreams.translation.calls == 3

    @pytest.mark.asyncio
    async def test_styles_do_not_share_entries(self, fetcher, upstreams) -> None:
        upstreams.translation.reply(200, translated("Translated"))

        await fetcher.translate(YODA, "Some text")
        await fetcher.translate(SHAKESPEARE, "Some text")

        assert upstreams.translation.calls == 2


class TestErrorMapping:
    @pytest.mark.asyncio
    async def test_rate_limit(self, fetcher, upstreams) -> None:
        """Test 429 is a GENERIC failure and is not retried."""
        upstreams.translation.reply(429, {"error": {"code": 429, "message": "Too Many Requests"}})

        with pytest.raises(AppError) as exc_info:
            await fetcher.translate(YODA, "text")

        error = exc_info.value
        assert error.kind is ErrorKind.GENERIC
        assert error.http_status == 500
        assert error.message == "Translation rate limit exceeded"
        assert isinstance(error.cause, httpx.HTTPStatusError)
        assert upstreams.translation.calls == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500])
    async def test_other_statuses_are_generic(self, fetcher, upstreams, status) -> None:
        upstreams.translation.reply(status)

        with pytest.raises(AppError) as exc_info:
            await fetcher.translate(YODA, "text")

        assert exc_info.value.kind is ErrorKind.GENERIC
        assert exc_info.value.message == "Generic error"
        assert upstreams.translation.calls == 1

    @pytest.mark.asyncio
    async def test_service_unavailable_is_retried(self, fetcher, upstreams) -> None:
        upstreams.translation.reply(503)

        with pytest.raises(AppError) as exc_info:
            await fetcher.translate(YODA, "text")

        assert exc_info.value.kind is ErrorKind.GENERIC
        assert upstreams.translation.calls == 3

    @pytest.mark.asyncio
    async def test_network_error_is_retried(self, fetcher, upstreams) -> None:
        upstreams.translation.fail_network().reply(200, translated("Recovered"))

        assert await fetcher.translate(YODA, "text") == "Recovered"
        assert upstreams.translation.calls == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [{"success": {"total": 1}}, {"contents": {}}, {"contents": {"translated": None}}, []],
    )
    async def test_malformed_payload_is_generic(self, fetcher, upstreams, cache, payload) -> None:
        upstreams.translation.reply(200, payload)

        with pytest.raises(AppError) as exc_info:
            await fetcher.translate(YODA, "text")

        assert exc_info.value.kind is ErrorKind.GENERIC
        assert cache.stats.sets == 0

    @pytest.mark.asyncio
    async def test_invalid_base_url_is_generic(self, http_client, cache, retry_policy) -> None:
        config = ProxyConfig(translation_base_url="https://translate.test/\x00")
        fetcher = TranslationFetcher(http_client, cache, config=config, retry_policy=retry_policy)

        with pytest.raises(AppError) as exc_info:
            await fetcher.translate(YODA, "text")

        assert exc_info.value.kind is ErrorKind.GENERIC
        assert isinstance(exc_info.value.cause, httpx.InvalidURL)
