from __future__ import annotations

from .core import SEED_ALBUMS, Album, AlbumNotFoundError, AlbumRegistry
from .runtime import AlbumServer, Settings, create_app, run
from .sdk import AlbumClient

__version__ = "0.1.0"

__all__ = [
    "Album",
    "SEED_ALBUMS",
    "AlbumRegistry",
    "AlbumNotFoundError",
    "AlbumClient",
    "AlbumServer",
    "Settings",
    "create_app",
    "run",
]
