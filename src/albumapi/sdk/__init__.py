from __future__ import annotations

from .client import AlbumClient

__all__ = ["AlbumClient"]
