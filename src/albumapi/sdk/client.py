from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from ..core.albums import Album
from ..core.registry import AlbumNotFoundError


def _album_from_json(data: dict[str, Any]) -> Album:
    return Album(
        id=str(data.get("id", "")),
        title=str(data.get("title", "")),
        artist=str(data.get("artist", "")),
        price=float(data.get("price", 0.0)),
    )


def _album_path(album_id: str) -> str:
    return f"/albums/{quote(album_id, safe='')}"


def _album_to_json(album: Album) -> dict[str, Any]:
    return {"id": album.id, "title": album.title, "artist": album.artist, "price": float(album.price)}


class AlbumClient:
    """HTTP client for a running albumapi server.

    Contract:
    - GET    /albums
    - GET    /albums/{id}
    - POST   /albums          (JSON album)
    - PUT    /albums/{id}     (JSON album)
    - PATCH  /albums/{id}     (partial JSON album)
    - DELETE /albums/{id}
    """

    def __init__(self, base_url: str = "http://localhost:8080", *, timeout_s: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s

    def _request(self, method: str, path: str, *, album_id: str | None = None, **kwargs: Any) -> Any:
        with httpx.Client(base_url=self.base_url, timeout=self.timeout_s) as client:
            res = client.request(method, path, **kwargs)
        if res.status_code == 404 and album_id is not None:
            raise AlbumNotFoundError(album_id)
        if res.status_code >= 400:
            raise RuntimeError(f"{method} {path} failed: {res.status_code} {res.text}")
        return res.json()

    def health(self) -> bool:
        return bool(self._request("GET", "/healthz").get("ok"))

    def list_albums(self) -> list[Album]:
        return [_album_from_json(item) for item in self._request("GET", "/albums")]

    def get_album(self, album_id: str) -> Album:
        return _album_from_json(self._request("GET", _album_path(album_id), album_id=album_id))

    def create_album(self, album: Album) -> Album:
        return _album_from_json(self._request("POST", "/albums", json=_album_to_json(album)))

    def replace_album(self, album_id: str, album: Album) -> Album:
        data = self._request("PUT", _album_path(album_id), album_id=album_id, json=_album_to_json(album))
        return _album_from_json(data)

    def update_album(
        self,
        album_id: str,
        *,
        title: str | None = None,
        artist: str | None = None,
        price: float | None = None,
    ) -> Album:
        """Send a partial update. Returns the server's echo of the request, not the merged album."""

        body: dict[str, Any] = {}
        if title is not None:
            body["title"] = title
        if artist is not None:
            body["artist"] = artist
        if price is not None:
            body["price"] = float(price)
        return _album_from_json(self._request("PATCH", _album_path(album_id), album_id=album_id, json=body))

    def delete_album(self, album_id: str) -> None:
        self._request("DELETE", _album_path(album_id), album_id=album_id)
