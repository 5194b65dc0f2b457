"""Pytest configuration for speciesproxy tests."""

import json
from collections.abc import Callable
from datetime import timedelta
from typing import Any

import httpx
import pytest
import pytest_asyncio

from speciesproxy import (
    CacheService,
    InMemoryCacheBackend,
    ProxyConfig,
    RetryPolicy,
)

SPECIES_BASE_URL = "https://species.test/api/v2/pokemon-species"
TRANSLATION_BASE_URL = "https://translate.test/translate"

Responder = Callable[[httpx.Request], httpx.Response]


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, delta: timedelta | float) -> None:
        if isinstance(delta, timedelta):
            delta = delta.total_seconds()
        self.now += delta


class Upstream:
    """Scripted upstream behind an httpx.MockTransport.

    Each queued responder handles one request; the last one keeps
    answering once the queue is down to it. Requests are recorded.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responders: list[Responder] = []

    def reply(self, status: int = 200, payload: Any = None) -> "Upstream":
        def responder(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status, json=payload)

        self._responders.append(responder)
        return self

    def reply_raw(self, status: int, content: bytes) -> "Upstream":
        self._responders.append(lambda request: httpx.Response(status, content=content))
        return self

    def fail_network(self) -> "Upstream":
        def responder(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        self._responders.append(responder)
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responders:
            raise AssertionError(f"Unexpected upstream call: {request.method} {request.url}")
        responder = self._responders[0] if len(self._responders) == 1 else self._responders.pop(0)
        return responder(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


class Upstreams:
    """Routes requests to the species or translation upstream by host."""

    def __init__(self) -> None:
        self.species = Upstream()
        self.translation = Upstream()

    def handle(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "species.test":
            return self.species.handle(request)
        return self.translation.handle(request)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> ProxyConfig:
    """Configuration pointing at fake upstreams, with no backoff wait."""
    return ProxyConfig(
        species_base_url=SPECIES_BASE_URL,
        translation_base_url=TRANSLATION_BASE_URL,
        retry_backoff_multiplier=0.0,
    )


@pytest.fixture
def retry_policy(config: ProxyConfig) -> RetryPolicy:
    return RetryPolicy(max_attempts=config.retry_attempts, backoff_multiplier=0.0)


@pytest.fixture
def backend(clock: FakeClock) -> InMemoryCacheBackend:
    return InMemoryCacheBackend(timer=clock)


@pytest.fixture
def cache(backend: InMemoryCacheBackend, config: ProxyConfig) -> CacheService:
    return CacheService(backend=backend, config=config)


@pytest.fixture
def upstreams() -> Upstreams:
    return Upstreams()


@pytest_asyncio.fixture
async def http_client(upstreams: Upstreams):
    async with upstreams.client() as client:
        yield client
