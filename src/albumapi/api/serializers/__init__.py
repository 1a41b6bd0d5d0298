from __future__ import annotations

from .albums import album_to_item, albums_to_items, message

__all__ = [
    "album_to_item",
    "albums_to_items",
    "message",
]
