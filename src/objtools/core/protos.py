"""Class-chain and method listing helpers.

:func:`get_prototypes_of` returns the classes an object inherits from.
:func:`get_methods` lists the callable attributes reachable along that
chain, passed through a :class:`MethodFilter`.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Union

from objtools.core.classify import resolve_target
from objtools.core.models import ValueKind
from objtools.exceptions import InvalidRuleError, NotInspectableError
from objtools.utils.constants import PRIVATE_PREFIX

Rule = Union[str, re.Pattern[str], Callable[[str], bool]]

DEFAULT_FILTER_PREFIXES: tuple[str, ...] = (PRIVATE_PREFIX,)
"""Name prefixes excluded when a filter uses defaults."""


# ---------------------------------------------------------------------------
# Class chain
# ---------------------------------------------------------------------------

def get_prototypes_of(value: object) -> list[type]:
    """Return the class chain of *value*, most derived first.

    Instances yield ``type(value).__mro__``, classes their own
    ``__mro__``; anything uncountable yields an empty list.
    """
    kind, _ = resolve_target(value)
    if isinstance(value, type):
        return list(value.__mro__)
    if kind is ValueKind.STRUCTURED:
        return list(type(value).__mro__)
    return []


# ---------------------------------------------------------------------------
# Method filtering
# ---------------------------------------------------------------------------

class MethodFilter:
    """Decide which attribute names :func:`get_methods` reports.

    Rules may be strings (a single character is a prefix, anything longer
    an exact name), compiled regular expressions, or callables taking the
    name.  With ``defaults=True`` the filter runs in *exclude* mode and
    also rejects ``_``-prefixed names; with ``defaults=False`` it runs in
    *include* mode and only accepts names matching a rule.
    """

    def __init__(self, *rules: Rule, defaults: bool = True) -> None:
        self.exclude: bool = defaults
        self.names: list[str] = []
        self.prefixes: list[str] = list(DEFAULT_FILTER_PREFIXES) if defaults else []
        self.patterns: list[re.Pattern[str]] = []
        self.tests: list[Callable[[str], bool]] = []
        for rule in rules:
            self.add(rule)

    def add(self, rule: Rule) -> MethodFilter:
        """Register one more rule and return ``self`` for chaining."""
        if isinstance(rule, str):
            if len(rule) == 1:
                self.prefixes.append(rule)
            else:
                self.names.append(rule)
        elif isinstance(rule, re.Pattern):
            self.patterns.append(rule)
        elif callable(rule):
            self.tests.append(rule)
        else:
            raise InvalidRuleError(
                f"Unsupported filter rule: {rule!r}",
                hint="Use a string, a compiled pattern, or a callable.",
            )
        return self

    def matches(self, name: str) -> bool:
        """``True`` when *name* matches any registered rule."""
        if name[:1] in self.prefixes:
            return True
        if name in self.names:
            return True
        if any(pattern.search(name) for pattern in self.patterns):
            return True
        return any(test(name) for test in self.tests)

    def accepts(self, name: str) -> bool:
        """``True`` when *name* should be reported."""
        return self.matches(name) != self.exclude

    @classmethod
    def excluding(cls, *rules: Rule) -> MethodFilter:
        return cls(*rules, defaults=True)

    @classmethod
    def including(cls, *rules: Rule) -> MethodFilter:
        return cls(*rules, defaults=False)


def _as_filter(flt: MethodFilter | Rule | Iterable[Rule] | None) -> MethodFilter:
    if isinstance(flt, MethodFilter):
        return flt
    if flt is None:
        return MethodFilter()
    if isinstance(flt, (list, tuple)):
        return MethodFilter(*flt)
    return MethodFilter(flt)  # type: ignore[arg-type]


def get_methods(
    value: object,
    flt: MethodFilter | Rule | Iterable[Rule] | None = None,
) -> list[str]:
    """Return names of callable attributes of *value*, in first-seen order.

    The class chain is walked from the most derived class down to, but not
    including, :class:`object`.  For instances the instance namespace is
    scanned first.

    Raises
    ------
    NotInspectableError
        If *value* is neither a structured value nor a class.
    """
    kind, _ = resolve_target(value)
    if kind is ValueKind.OTHER:
        raise NotInspectableError(
            f"Cannot list methods of {type(value).__name__} value.",
            hint="Pass an object instance or a class.",
        )

    method_filter = _as_filter(flt)
    namespaces: list[Iterable[object]] = []
    if not isinstance(value, type):
        instance_dict = getattr(value, "__dict__", None)
        if isinstance(instance_dict, dict):
            namespaces.append(instance_dict)
    namespaces.extend(
        vars(owner) for owner in get_prototypes_of(value) if owner is not object
    )

    seen: dict[str, None] = {}
    for namespace in namespaces:
        for name in namespace:
            if isinstance(name, str) and name not in seen and method_filter.accepts(name):
                seen[name] = None
    return [name for name in seen if callable(getattr(value, name, None))]
