from __future__ import annotations

from .albums import SEED_ALBUMS, Album
from .registry import AlbumNotFoundError, AlbumRegistry

__all__ = ["Album", "SEED_ALBUMS", "AlbumRegistry", "AlbumNotFoundError"]
