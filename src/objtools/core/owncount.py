"""Own-property counting.

:func:`own_count` reports how many properties an object defines directly
on itself, at one of three visibility levels:

* ``level == 0`` — public string keys only.
* ``level > 0``  — every string key, including ``_``-prefixed attributes.
* ``level > 1``  — also keys that are not strings.

A class (or a callable carrying a ``prototype``) is inspected through its
prototype, so ``own_count(SomeClass)`` counts what the class body defines.
Anything that cannot hold own properties yields
:data:`~objtools.utils.constants.NOT_COUNTABLE`; the counter never raises
for well-formed calls.

The ``_`` prefix only hides *attribute* names: instance namespaces, set
slots and class namespaces (``mappingproxy``).  Every string key of any
other mapping is a public entry.  A mapping that also carries instance
attributes (a ``dict`` subclass, say) is counted by its items alone.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from types import MappingProxyType

from objtools.core.classify import declared_slots, instance_namespace, resolve_target
from objtools.core.models import PropertyCensus, ValueKind
from objtools.utils.constants import NOT_COUNTABLE, PRIVATE_PREFIX


# ---------------------------------------------------------------------------
# Raw key enumeration
# ---------------------------------------------------------------------------

def _set_slots(target: object) -> list[str]:
    """Return stored names of slots that currently hold a value."""
    cls = type(target)
    present: list[str] = []
    for owner, stored in declared_slots(cls):
        descriptor = owner.__dict__.get(stored)
        if descriptor is None or not hasattr(descriptor, "__get__"):
            continue
        try:
            descriptor.__get__(target, cls)
        except AttributeError:
            continue
        present.append(stored)
    return present


def _raw_keys(target: object) -> list[Hashable]:
    """Own keys of an already-resolved target, in storage order."""
    if isinstance(target, Mapping):
        return list(target.keys())

    keys: list[Hashable] = []
    namespace = instance_namespace(target)
    if namespace is not None:
        keys.extend(namespace.keys())
    seen = set(keys)
    for stored in _set_slots(target):
        if stored not in seen:
            seen.add(stored)
            keys.append(stored)
    return keys


def _hides_private(target: object) -> bool:
    """``True`` when *target* holds attribute names rather than entries."""
    return isinstance(target, MappingProxyType) or not isinstance(target, Mapping)


def _census_of(target: object) -> PropertyCensus:
    private_rule = _hides_private(target)
    enumerable: list[str] = []
    hidden: list[str] = []
    symbolic: list[Hashable] = []
    for key in _raw_keys(target):
        if not isinstance(key, str):
            symbolic.append(key)
        elif private_rule and key.startswith(PRIVATE_PREFIX):
            hidden.append(key)
        else:
            enumerable.append(key)
    return PropertyCensus(
        enumerable=tuple(enumerable),
        hidden=tuple(hidden),
        symbolic=tuple(symbolic),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def take_census(value: object) -> PropertyCensus | None:
    """Group the own keys of *value* by visibility.

    Returns ``None`` when *value* is not countable.
    """
    kind, target = resolve_target(value)
    if kind is ValueKind.OTHER:
        return None
    return _census_of(target)


def own_keys(value: object, level: object = 0) -> list[Hashable] | None:
    """Return the own keys :func:`own_count` would count for *value*.

    Returns ``None`` when *value* is not countable.
    """
    census = take_census(value)
    if census is None:
        return None
    return census.keys(level)


def own_count(value: object, level: object = 0) -> int:
    """Return the number of own properties of *value* at *level*.

    Parameters
    ----------
    value:
        A mapping, an object with an instance namespace, a class, or a
        callable with a structured ``prototype`` attribute.
    level:
        ``0`` counts public string keys, anything else counts all string
        keys, and anything greater than ``1`` also counts non-string keys.
        The level is compared loosely and never validated.

    Returns
    -------
    int
        The property count, or ``NOT_COUNTABLE`` (``-1``) for any other
        input.
    """
    census = take_census(value)
    if census is None:
        return NOT_COUNTABLE
    return census.count(level)
