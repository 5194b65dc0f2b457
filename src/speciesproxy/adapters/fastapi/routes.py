"""HTTP routes exposing the proxy's public operations."""

import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Request

from speciesproxy.factory import ProxyServices

SERVICE_NAME = "species-proxy"

router = APIRouter()


def _services(request: Request) -> ProxyServices:
    return request.app.state.services


@router.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    return {"status": "ok", "message": "Species API is running"}


@router.get("/health", tags=["Health"])
async def health(request: Request) -> dict[str, Any]:
    """Service health with uptime and cache statistics."""
    stats = _services(request).cache.stats
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - request.app.state.started_at,
        "service": SERVICE_NAME,
        "cache": {
            "hits": stats.hits,
            "misses": stats.misses,
            "keys": stats.keys,
        },
    }


@router.get("/pokemon/translated/{name}", tags=["Species"])
async def get_translated_species(name: str, request: Request) -> dict[str, Any]:
    """Species record with its description translated when possible."""
    record = await _services(request).translated_species.get_translated_species(name)
    return record.to_dict()


@router.get("/pokemon/{name}", tags=["Species"])
async def get_species(name: str, request: Request) -> dict[str, Any]:
    """Species record with its standard description."""
    record = await _services(request).species_fetcher.fetch_by_name(name)
    return record.to_dict()
