"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import cast

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from speciesproxy.adapters.fastapi.routes import router
from speciesproxy.core.entities.config import ProxyConfig
from speciesproxy.core.entities.errors import AppError
from speciesproxy.factory import ProxyServices, create_services

logger = logging.getLogger(__name__)


def create_app(
    config: ProxyConfig | None = None,
    services: ProxyServices | None = None,
) -> FastAPI:
    """Create the ASGI application.

    Args:
        config: Optional configuration, used when ``services`` is not given.
        services: Pre-wired services (e.g. with a mocked HTTP client).

    Returns:
        The FastAPI application.
    """
    services = services or create_services(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        services.cache.start_sweeper()
        yield
        await services.aclose()

    app = FastAPI(
        title="Species Proxy API",
        description="Cached species data with best-effort translated descriptions",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.services = services
    app.state.started_at = time.monotonic()

    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
    app.include_router(router)
    return app


async def _app_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = cast(AppError, exc)
    if error.cause is not None:
        logger.error(
            "%s %s failed: %r",
            request.method,
            request.url.path,
            error,
            exc_info=(type(error.cause), error.cause, error.cause.__traceback__),
        )
    else:
        logger.warning("%s %s failed: %r", request.method, request.url.path, error)
    return JSONResponse(status_code=error.http_status, content={"error": error.message})


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def main() -> None:
    """Run the proxy with uvicorn, configured from the environment."""
    import uvicorn

    config = ProxyConfig.from_env()
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == "__main__":
    main()
