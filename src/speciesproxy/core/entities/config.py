"""Proxy configuration entity."""

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta

DEFAULT_SPECIES_BASE_URL = "https://pokeapi.co/api/v2/pokemon-species"
DEFAULT_TRANSLATION_BASE_URL = "https://api.funtranslations.com/translate"


@dataclass
class ProxyConfig:
    """Proxy configuration.

    Groups the upstream endpoints, cache lifetimes, retry settings
    and server binding used to wire the proxy together.

    Cache TTLs:
        Species records are near-static reference data and translations
        are deterministic for a given style and text, so both default to
        24 hours. A TTL of ``None`` means entries only leave the cache
        through deletion or a flush.

    Retry:
        Upstream calls are attempted ``retry_attempts`` times in total,
        waiting ``retry_backoff_multiplier * 2**n`` seconds between
        attempts, capped at ``retry_backoff_max``.
    """

    species_base_url: str = DEFAULT_SPECIES_BASE_URL
    translation_base_url: str = DEFAULT_TRANSLATION_BASE_URL

    # Cache settings
    species_ttl: timedelta | None = None
    translation_ttl: timedelta | None = None
    cache_check_period: timedelta | None = None
    cache_max_size: float = math.inf
    cache_key_prefix: str | None = None

    # Retry settings
    retry_attempts: int = 3
    retry_backoff_multiplier: float = 0.1
    retry_backoff_max: float = 10.0

    # Transport
    http_timeout: float = 5.0

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    def __post_init__(self) -> None:
        """Fill in default durations and strip trailing slashes."""
        if self.species_ttl is None:
            self.species_ttl = timedelta(hours=24)
        if self.translation_ttl is None:
            self.translation_ttl = timedelta(hours=24)
        if self.cache_check_period is None:
            self.cache_check_period = timedelta(minutes=10)
        self.species_base_url = self.species_base_url.rstrip("/")
        self.translation_base_url = self.translation_base_url.rstrip("/")
        if self.retry_attempts < 1:
            raise ValueError("retry_attempts must be at least 1")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ProxyConfig":
        """Build a configuration from environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            A new ProxyConfig instance.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}

        if "SPECIES_API_URL" in env:
            kwargs["species_base_url"] = env["SPECIES_API_URL"]
        if "TRANSLATION_API_URL" in env:
            kwargs["translation_base_url"] = env["TRANSLATION_API_URL"]
        if "CACHE_TTL_SECONDS" in env:
            ttl = timedelta(seconds=_parse_number(env, "CACHE_TTL_SECONDS", float))
            kwargs["species_ttl"] = ttl
            kwargs["translation_ttl"] = ttl
        if "CACHE_KEY_PREFIX" in env:
            kwargs["cache_key_prefix"] = env["CACHE_KEY_PREFIX"] or None
        if "CACHE_CHECK_PERIOD_SECONDS" in env:
            kwargs["cache_check_period"] = timedelta(
                seconds=_parse_number(env, "CACHE_CHECK_PERIOD_SECONDS", float)
            )
        if "RETRY_ATTEMPTS" in env:
            kwargs["retry_attempts"] = _parse_number(env, "RETRY_ATTEMPTS", int)
        if "HTTP_TIMEOUT_SECONDS" in env:
            kwargs["http_timeout"] = _parse_number(env, "HTTP_TIMEOUT_SECONDS", float)
        if "SERVER_HOST" in env:
            kwargs["host"] = env["SERVER_HOST"]
        if "SERVER_PORT" in env:
            kwargs["port"] = _parse_number(env, "SERVER_PORT", int)

        return cls(**kwargs)  # type: ignore[arg-type]


def _parse_number(env: Mapping[str, str], name: str, kind: type) -> int | float:
    raw = env[name]
    try:
        return kind(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e
