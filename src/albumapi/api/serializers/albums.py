from __future__ import annotations

from typing import Any

from ...core.albums import Album


def album_to_item(a: Album) -> dict[str, Any]:
    return {
        "id": a.id,
        "title": a.title,
        "artist": a.artist,
        "price": float(a.price),
    }


def albums_to_items(albums: list[Album]) -> list[dict[str, Any]]:
    return [album_to_item(a) for a in albums]


def message(text: str) -> dict[str, Any]:
    return {"message": text}
