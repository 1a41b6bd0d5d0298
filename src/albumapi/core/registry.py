from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import replace

from .albums import SEED_ALBUMS, Album

logger = logging.getLogger(__name__)


class AlbumNotFoundError(KeyError):
    """No stored album matches the requested id."""

    def __init__(self, album_id: str) -> None:
        super().__init__(album_id)
        self.album_id = album_id

    def __str__(self) -> str:
        return f"album not found: {self.album_id!r}"


class AlbumRegistry:
    """Ordered in-memory album collection.

    Every operation holds the lock for its whole scan, so concurrent handlers
    never observe or produce a half-applied change.
    """

    def __init__(self, albums: Iterable[Album] | None = None) -> None:
        self._lock = threading.RLock()
        self._albums: list[Album] = list(SEED_ALBUMS if albums is None else albums)

    def __len__(self) -> int:
        return self.count()

    def _index_locked(self, album_id: str) -> int:
        for i, a in enumerate(self._albums):
            if a.id == album_id:
                return i
        raise AlbumNotFoundError(album_id)

    def count(self) -> int:
        with self._lock:
            return len(self._albums)

    def reset(self, *, seed: bool = True) -> None:
        with self._lock:
            self._albums = list(SEED_ALBUMS) if seed else []

    def list_albums(self) -> list[Album]:
        with self._lock:
            return list(self._albums)

    def get_album(self, album_id: str) -> Album:
        with self._lock:
            return self._albums[self._index_locked(album_id)]

    def create_album(self, album: Album) -> Album:
        # Duplicate ids are accepted; lookups return the first match.
        with self._lock:
            self._albums.append(album)
        logger.debug("Created album %r", album.id)
        return album

    def replace_album(self, album_id: str, album: Album) -> Album:
        """Overwrite the album stored under `album_id` with `album`.

        The stored record takes the body's id, which may differ from `album_id`.
        """
        with self._lock:
            i = self._index_locked(album_id)
            self._albums[i] = album
        logger.debug("Replaced album %r with %r", album_id, album.id)
        return album

    def update_album(self, album_id: str, patch: Album) -> Album:
        """Merge the non-empty fields of `patch` into the stored album.

        Empty strings and a zero price mean "leave unchanged", so a price cannot
        be updated to 0 this way. The id is never changed.
        """
        with self._lock:
            i = self._index_locked(album_id)
            current = self._albums[i]
            changes: dict[str, object] = {}
            if patch.title != "":
                changes["title"] = patch.title
            if patch.artist != "":
                changes["artist"] = patch.artist
            if patch.price != 0:
                changes["price"] = patch.price
            updated = replace(current, **changes)
            self._albums[i] = updated
        logger.debug("Updated album %r fields=%s", album_id, sorted(changes))
        return updated

    def delete_album(self, album_id: str) -> Album:
        with self._lock:
            removed = self._albums.pop(self._index_locked(album_id))
        logger.debug("Deleted album %r", album_id)
        return removed
