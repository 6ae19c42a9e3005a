"""Shallow copy helpers.

:func:`cp` copies the public own properties of any number of sources into
a subject, overwriting what is there.  :func:`cp_safe` does the same but
leaves existing keys alone.  Called with a subject and no sources, both
return a shallow clone of the subject.

Only *enumerable* keys are copied: every string key of a mapping, public
attribute names of anything else.  The subject is written with item
assignment when it is a mutable mapping and with ``setattr`` otherwise.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Hashable, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, TypeVar

from objtools.core.classify import resolve_target
from objtools.core.models import ValueKind
from objtools.core.owncount import own_keys
from objtools.exceptions import ReadOnlyTargetError
from objtools.utils.constants import LEVEL_ALL, LEVEL_ENUMERABLE

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read(target: object, key: Hashable) -> Any:
    if isinstance(target, Mapping):
        return target[key]
    return getattr(target, key)  # type: ignore[arg-type]


def _write(subject: object, key: str, value: Any) -> None:
    """Assign one property, mapping refusals to :class:`ReadOnlyTargetError`."""
    if isinstance(subject, MutableMapping):
        subject[key] = value
        return
    if isinstance(subject, Mapping):
        raise ReadOnlyTargetError(
            f"Cannot assign {key!r}: {type(subject).__name__} is read-only.",
            hint="Copy into a dict or another mutable mapping instead.",
        )
    try:
        setattr(subject, key, value)
    except (AttributeError, TypeError) as exc:
        raise ReadOnlyTargetError(
            f"Cannot assign {key!r} on {type(subject).__name__}: {exc}",
        ) from exc


def _copy_into(subject: object, sources: tuple[object, ...], *, overwrite: bool) -> None:
    for source in sources:
        kind, target = resolve_target(source)
        if kind is ValueKind.OTHER:
            logger.debug("Skipping uncountable source %r", source)
            continue
        existing = set(own_keys(subject, LEVEL_ALL) or ())
        for key in own_keys(source, LEVEL_ENUMERABLE) or ():
            if not overwrite and key in existing:
                continue
            _write(subject, key, _read(target, key))  # type: ignore[arg-type]


def _clone(kind: ValueKind, subject: object, target: object) -> Any:
    """Shallow clone; classes and prototyped callables clone their prototype."""
    if isinstance(target, MappingProxyType):
        return dict(target)
    if kind is ValueKind.CONSTRUCTOR:
        return copy.copy(target)
    return copy.copy(subject)


def _prepare(subject: T, sources: tuple[object, ...]) -> tuple[bool, Any]:
    """Return ``(done, result)`` for invalid subjects or clone requests."""
    kind, target = resolve_target(subject)
    if kind is ValueKind.OTHER:
        return True, subject
    if not sources:
        return True, _clone(kind, subject, target)
    return False, subject


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def cp(subject: T, *sources: object) -> Any:
    """Copy public own properties of *sources* into *subject*, overwriting.

    An uncountable *subject* is returned unchanged.  Without *sources* a
    shallow clone of *subject* is returned instead; for a class that is a
    ``dict`` copy of its namespace, for a prototyped callable a copy of its
    prototype.

    Raises
    ------
    ReadOnlyTargetError
        If *subject* refuses an assignment.
    """
    done, result = _prepare(subject, sources)
    if done:
        return result
    _copy_into(subject, sources, overwrite=True)
    return subject


def cp_safe(subject: T, *sources: object) -> Any:
    """Like :func:`cp`, but never replaces a key *subject* already owns."""
    done, result = _prepare(subject, sources)
    if done:
        return result
    _copy_into(subject, sources, overwrite=False)
    return subject
