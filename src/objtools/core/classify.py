"""Explicit classification of inspected values.

Every helper in :mod:`objtools.core` resolves its input once, on entry,
into one of the three :class:`~objtools.core.models.ValueKind` tags and
never relies on duck-typed dispatch afterwards.

Checks run in a fixed order:

1. **Scalar** — ``None`` and :data:`~objtools.utils.constants.SCALAR_TYPES`
   are ``OTHER``.
2. **Class** — a class is a ``CONSTRUCTOR``; its prototype is its own
   namespace (``vars(cls)``).
3. **Callable** — a callable is a ``CONSTRUCTOR`` only when it carries a
   structured ``prototype`` attribute, otherwise ``OTHER``.  Class-level
   descriptors (``property``, ``cached_property``) are never evaluated and
   never count as a prototype.
4. **Mapping** — any :class:`~collections.abc.Mapping` is ``STRUCTURED``.
5. **Namespace** — an object with ``__dict__`` or set-able ``__slots__``
   is ``STRUCTURED``.  Everything left is ``OTHER``.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping

from objtools.core.models import ValueKind
from objtools.utils.constants import SCALAR_TYPES

logger = logging.getLogger(__name__)

_SPECIAL_SLOTS: frozenset[str] = frozenset({"__dict__", "__weakref__"})
_MISSING = object()


# ---------------------------------------------------------------------------
# Namespace helpers
# ---------------------------------------------------------------------------

def instance_namespace(value: object) -> Mapping[object, object] | None:
    """Return ``vars(value)`` or ``None`` when *value* has no namespace."""
    try:
        namespace = vars(value)
    except TypeError:
        return None
    return namespace if isinstance(namespace, Mapping) else None


def _mangle(owner: type, name: str) -> str:
    """Return the attribute name Python stores a private slot under."""
    if not name.startswith("__") or name.endswith("__"):
        return name
    stripped = owner.__name__.lstrip("_")
    return f"_{stripped}{name}" if stripped else name


def declared_slots(cls: type) -> list[tuple[type, str]]:
    """Return ``(owner, stored_name)`` for every data slot along the MRO.

    ``__dict__`` and ``__weakref__`` entries are skipped; they do not hold
    a property of their own.
    """
    slots: list[tuple[type, str]] = []
    for owner in cls.__mro__:
        raw = owner.__dict__.get("__slots__", ())
        names = (raw,) if isinstance(raw, str) else tuple(raw)
        for name in names:
            if name in _SPECIAL_SLOTS:
                continue
            slots.append((owner, _mangle(owner, name)))
    return slots


def _is_descriptor(value: object) -> bool:
    """``True`` for properties and other unresolved class-level descriptors."""
    return hasattr(type(value), "__get__")


def _is_structured(value: object) -> bool:
    if value is None or isinstance(value, SCALAR_TYPES):
        return False
    if isinstance(value, type) or callable(value):
        return False
    if isinstance(value, Mapping):
        return True
    return instance_namespace(value) is not None or bool(declared_slots(type(value)))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def resolve_target(value: object) -> tuple[ValueKind, object | None]:
    """Classify *value* and return the object whose properties count.

    Returns
    -------
    tuple[ValueKind, object | None]
        ``(STRUCTURED, value)``, ``(CONSTRUCTOR, prototype)`` or
        ``(OTHER, None)``.
    """
    if value is None or isinstance(value, SCALAR_TYPES):
        return ValueKind.OTHER, None

    if isinstance(value, type):
        logger.debug("Redirecting class %s to its namespace", value.__qualname__)
        return ValueKind.CONSTRUCTOR, vars(value)

    if callable(value):
        prototype = inspect.getattr_static(value, "prototype", _MISSING)
        if (
            prototype is not _MISSING
            and not _is_descriptor(prototype)
            and _is_structured(prototype)
        ):
            logger.debug("Redirecting callable %r to its prototype", value)
            return ValueKind.CONSTRUCTOR, prototype
        logger.debug("Callable %r has no structured prototype", value)
        return ValueKind.OTHER, None

    if _is_structured(value):
        return ValueKind.STRUCTURED, value

    return ValueKind.OTHER, None


def classify(value: object) -> ValueKind:
    """Return the :class:`ValueKind` tag for *value*."""
    return resolve_target(value)[0]


def is_nil(value: object) -> bool:
    """``True`` for ``None``."""
    return value is None


def not_nil(value: object) -> bool:
    """``True`` for anything but ``None``."""
    return value is not None


def is_obj(value: object) -> bool:
    """``True`` for mappings and objects owning a namespace."""
    return classify(value) is ValueKind.STRUCTURED


def is_constructor(value: object) -> bool:
    """``True`` for classes and callables with a structured prototype."""
    return classify(value) is ValueKind.CONSTRUCTOR


def is_complex(value: object) -> bool:
    """``True`` for structured values and for any callable."""
    return is_obj(value) or callable(value)


def is_scalar(value: object) -> bool:
    """``True`` for values that are neither ``None`` nor complex."""
    return not_nil(value) and not is_complex(value)
