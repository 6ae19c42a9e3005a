"""Constants shared by the core and report layers.

Centralised here so that the sentinel and the visibility levels are
well-known, tested values rather than magic integers.
"""

from __future__ import annotations

NOT_COUNTABLE: int = -1
"""Returned by the counter when the input has no own properties to count."""

LEVEL_ENUMERABLE: int = 0
"""Count public string keys only."""

LEVEL_NAMED: int = 1
"""Count every string key, public or underscore-prefixed."""

LEVEL_ALL: int = 2
"""Count every string key plus non-string keys."""

PRIVATE_PREFIX: str = "_"
"""String keys starting with this prefix are hidden from enumeration."""

SCALAR_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    bytearray,
)
"""Types (and their subclasses) that never carry countable properties."""
