from __future__ import annotations

from typing import Any

from fastapi import Body, Depends, FastAPI, Request

from ...core.albums import Album
from ...core.registry import AlbumRegistry
from ..errors import RequestBodyInvalidError
from ..parsing import parse_album_body
from ..serializers import album_to_item, albums_to_items, message


def get_registry(request: Request) -> AlbumRegistry:
    return request.app.state.registry


def _decode_album(body: Any) -> Album:
    try:
        return parse_album_body(body)
    except ValueError as ex:
        raise RequestBodyInvalidError(str(ex)) from ex


def mount_albums_api(app: FastAPI) -> None:
    """Mount the album CRUD endpoints.

    PUT and PATCH decode the body before looking up the id, so a bad body is
    reported as 400 even when the id is unknown.
    """

    @app.get("/albums")
    def list_albums(registry: AlbumRegistry = Depends(get_registry)) -> list[dict[str, Any]]:
        return albums_to_items(registry.list_albums())

    @app.get("/albums/{album_id:path}")
    def get_album(album_id: str, registry: AlbumRegistry = Depends(get_registry)) -> dict[str, Any]:
        return album_to_item(registry.get_album(album_id))

    @app.post("/albums", status_code=201)
    def create_album(body: Any = Body(...), registry: AlbumRegistry = Depends(get_registry)) -> dict[str, Any]:
        album = registry.create_album(_decode_album(body))
        return album_to_item(album)

    @app.put("/albums/{album_id:path}")
    def replace_album(
        album_id: str,
        body: Any = Body(...),
        registry: AlbumRegistry = Depends(get_registry),
    ) -> dict[str, Any]:
        album = registry.replace_album(album_id, _decode_album(body))
        return album_to_item(album)

    @app.patch("/albums/{album_id:path}")
    def update_album(
        album_id: str,
        body: Any = Body(...),
        registry: AlbumRegistry = Depends(get_registry),
    ) -> dict[str, Any]:
        patch = _decode_album(body)
        registry.update_album(album_id, patch)
        # Echo the decoded input rather than the merged record.
        return album_to_item(patch)

    @app.delete("/albums/{album_id:path}")
    def delete_album(album_id: str, registry: AlbumRegistry = Depends(get_registry)) -> dict[str, Any]:
        registry.delete_album(album_id)
        return message("album deleted")
