from __future__ import annotations

from .albums import get_registry, mount_albums_api

__all__ = ["get_registry", "mount_albums_api"]
