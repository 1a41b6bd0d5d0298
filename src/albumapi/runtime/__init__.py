from __future__ import annotations

from .app import create_app
from .config import Settings
from .server import AlbumServer, run

__all__ = ["create_app", "Settings", "AlbumServer", "run"]
