from __future__ import annotations

from fastapi import FastAPI

from ..core.registry import AlbumRegistry
from .errors import install_error_handlers
from .responses import IndentedJSONResponse
from .routes import mount_albums_api


def create_api_app(registry: AlbumRegistry) -> FastAPI:
    app = FastAPI(title="albumapi", version="0.1.0", default_response_class=IndentedJSONResponse)
    app.state.registry = registry

    install_error_handlers(app)
    mount_albums_api(app)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app
