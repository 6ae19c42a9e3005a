"""Core layer — pure inspection and copy helpers.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``report``.
* The counter never raises for well-formed calls.
"""

from objtools.core.classify import (
    classify,
    is_complex,
    is_constructor,
    is_nil,
    is_obj,
    is_scalar,
    not_nil,
    resolve_target,
)
from objtools.core.copying import cp, cp_safe
from objtools.core.models import PropertyCensus, ValueKind
from objtools.core.owncount import own_count, own_keys, take_census
from objtools.core.protos import MethodFilter, get_methods, get_prototypes_of

__all__: list[str] = [
    "MethodFilter",
    "PropertyCensus",
    "ValueKind",
    "classify",
    "cp",
    "cp_safe",
    "get_methods",
    "get_prototypes_of",
    "is_complex",
    "is_constructor",
    "is_nil",
    "is_obj",
    "is_scalar",
    "not_nil",
    "own_count",
    "own_keys",
    "resolve_target",
    "take_census",
]
