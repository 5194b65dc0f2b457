"""FastAPI adapter for speciesproxy.

Example:
    from speciesproxy import ProxyConfig
    from speciesproxy.adapters.fastapi import create_app

    app = create_app(ProxyConfig(port=8080))
"""

from speciesproxy.adapters.fastapi.app import create_app, main
from speciesproxy.adapters.fastapi.routes import router

__all__ = ["create_app", "main", "router"]
