from __future__ import annotations

import math
from typing import Any

from ...core.albums import Album

_STRING_FIELDS = ("id", "title", "artist")


def parse_str(value: Any, *, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"Invalid {field}: expected a string")
    return value


def parse_price(value: Any) -> float:
    if value is None:
        return 0.0
    # bool is an int subclass, but JSON true/false is not a number.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("Invalid price: expected a number")
    try:
        price = float(value)
    except OverflowError as ex:
        raise ValueError("Invalid price: expected a finite number") from ex
    if not math.isfinite(price):
        raise ValueError("Invalid price: expected a finite number")
    return price


def lookup_field(body: dict[str, Any], name: str) -> Any:
    """Return the value for `name`, preferring an exact key over a case-insensitive one."""
    if name in body:
        return body[name]
    for key, value in body.items():
        if isinstance(key, str) and key.lower() == name:
            return value
    return None


def parse_album_body(body: Any) -> Album:
    """Decode a JSON album object.

    Missing or null fields take their zero value and unknown keys are ignored,
    so the same decoder serves full (POST/PUT) and partial (PATCH) bodies.
    Keys match case-insensitively when no exact key is present.
    """
    if not isinstance(body, dict):
        raise ValueError("Album body must be a JSON object")

    fields = {name: parse_str(lookup_field(body, name), field=name) for name in _STRING_FIELDS}
    return Album(price=parse_price(lookup_field(body, "price")), **fields)
