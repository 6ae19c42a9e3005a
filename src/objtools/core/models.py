"""Domain models for objtools.

:class:`ValueKind` is the closed set of categories every inspected value
falls into.  :class:`PropertyCensus` is a frozen snapshot of the own keys
of one object, split by visibility.  Neither carries any I/O.
"""

from __future__ import annotations

import enum
from collections.abc import Hashable
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Value classification
# ---------------------------------------------------------------------------

class ValueKind(enum.Enum):
    """Category of a value, resolved once on entry to every helper."""

    STRUCTURED = "structured"
    """A mapping or an object owning an instance namespace."""

    CONSTRUCTOR = "constructor"
    """A class, or a callable carrying a structured ``prototype``."""

    OTHER = "other"
    """Anything else: scalars, ``None``, plain callables, builtin containers."""


# ---------------------------------------------------------------------------
# Own-key snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PropertyCensus:
    """Own keys of a single object, grouped by visibility.

    Every key appears in exactly one group, in the order the object
    stores it.
    """

    enumerable: tuple[str, ...]
    """Mapping entries with string keys, and attribute names without ``_``."""

    hidden: tuple[str, ...]
    """Attribute names that start with ``_``."""

    symbolic: tuple[Hashable, ...]
    """Keys that are not strings."""

    @property
    def named(self) -> tuple[str, ...]:
        """All string keys, enumerable first."""
        return self.enumerable + self.hidden

    def keys(self, level: object = 0) -> list[Hashable]:
        """Return the keys visible at *level*.

        ``level == 0`` selects enumerable keys; any other level selects all
        string keys, and a level greater than ``1`` adds the symbolic
        keys.  Levels are not validated.
        """
        if level == 0:
            return list(self.enumerable)
        selected: list[Hashable] = list(self.named)
        if _greater_than(level, 1):
            selected.extend(self.symbolic)
        return selected

    def count(self, level: object = 0) -> int:
        """Return ``len(self.keys(level))``."""
        return len(self.keys(level))

    def __len__(self) -> int:
        return len(self.enumerable) + len(self.hidden) + len(self.symbolic)


def _greater_than(level: object, threshold: int) -> bool:
    """Loose ``level > threshold`` that treats unorderable levels as ``False``."""
    try:
        return bool(level > threshold)  # type: ignore[operator]
    except TypeError:
        return False
