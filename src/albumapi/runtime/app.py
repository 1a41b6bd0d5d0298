from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import AlbumRegistry
from .config import Settings
from .logging_config import setup_logging


def create_app(registry: AlbumRegistry | None = None, settings: Settings | None = None) -> FastAPI:
    """Create the app and the registry it owns.

    Pass `registry` to share one with the caller (tests, an embedding process).
    """

    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    if registry is None:
        registry = AlbumRegistry() if settings.seed else AlbumRegistry(albums=())

    return create_api_app(registry)
