from __future__ import annotations

from .albums import lookup_field, parse_album_body, parse_price, parse_str

__all__ = [
    "lookup_field",
    "parse_album_body",
    "parse_price",
    "parse_str",
]
