from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Album:
    """A record album.

    Notes:
    - `id` is supplied by the caller. Uniqueness is expected but not enforced.
    - `price` carries no currency and is never validated.
    """

    id: str = ""
    title: str = ""
    artist: str = ""
    price: float = 0.0


SEED_ALBUMS: tuple[Album, ...] = (
    Album(id="1", title="Blue Train", artist="John Coltrane", price=56.99),
    Album(id="2", title="Jeru", artist="Gerry Mulligan", price=17.99),
    Album(id="3", title="Sarah Vaughan and Clifford Brown", artist="Sarah Vaughan", price=39.99),
)
