"""Tests for value classification (core/classify.py)."""

from __future__ import annotations

from functools import cached_property
from types import MappingProxyType, SimpleNamespace

import pytest

from objtools.core.classify import (
    classify,
    declared_slots,
    is_complex,
    is_constructor,
    is_nil,
    is_obj,
    is_scalar,
    not_nil,
    resolve_target,
)
from objtools.core.models import ValueKind


class Plain:
    def __init__(self) -> None:
        self.a = 1


class Slotted:
    __slots__ = ("x", "__y")


class _Hidden:
    __slots__ = ("__z",)


class WithDictSlot:
    __slots__ = ("x", "__dict__", "__weakref__")


def _with_prototype() -> None:
    return None


_with_prototype.prototype = SimpleNamespace(a=1)  # type: ignore[attr-defined]


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

class TestClassify:
    @pytest.mark.parametrize(
        "value",
        [{}, {"a": 1}, MappingProxyType({}), Plain(), SimpleNamespace(), Slotted()],
    )
    def test_structured(self, value: object) -> None:
        assert classify(value) is ValueKind.STRUCTURED

    @pytest.mark.parametrize("value", [Plain, dict, _with_prototype])
    def test_constructor(self, value: object) -> None:
        assert classify(value) is ValueKind.CONSTRUCTOR

    @pytest.mark.parametrize(
        "value",
        [None, 0, 2.5, "s", b"b", bytearray(b"x"), True, [], (), set(), len, lambda: 0, object()],
    )
    def test_other(self, value: object) -> None:
        assert classify(value) is ValueKind.OTHER

    def test_str_subclass_is_scalar(self) -> None:
        class Label(str):
            pass

        label = Label("x")
        label.note = "still a string"  # type: ignore[attr-defined]
        assert classify(label) is ValueKind.OTHER


# ---------------------------------------------------------------------------
# resolve_target
# ---------------------------------------------------------------------------

class TestResolveTarget:
    def test_structured_returns_value(self) -> None:
        value = {"a": 1}
        kind, target = resolve_target(value)
        assert kind is ValueKind.STRUCTURED
        assert target is value

    def test_class_returns_namespace(self) -> None:
        kind, target = resolve_target(Plain)
        assert kind is ValueKind.CONSTRUCTOR
        assert dict(target) == dict(vars(Plain))  # type: ignore[call-overload]

    def test_callable_returns_prototype(self) -> None:
        kind, target = resolve_target(_with_prototype)
        assert kind is ValueKind.CONSTRUCTOR
        assert target is _with_prototype.prototype  # type: ignore[attr-defined]

    def test_other_returns_none(self) -> None:
        assert resolve_target(42) == (ValueKind.OTHER, None)

    def test_prototype_lookup_does_not_trigger_properties(self) -> None:
        calls: list[str] = []

        class Tricky:
            def __call__(self) -> None:
                return None

            @property
            def prototype(self) -> dict[str, int]:
                calls.append("hit")
                return {"a": 1}

        assert classify(Tricky()) is ValueKind.OTHER
        assert calls == []

    def test_cached_property_prototype_refused(self) -> None:
        class Lazy:
            def __call__(self) -> None:
                return None

            @cached_property
            def prototype(self) -> dict[str, int]:
                return {"a": 1}

        lazy = Lazy()
        assert resolve_target(lazy) == (ValueKind.OTHER, None)
        assert "prototype" not in vars(lazy)


# ---------------------------------------------------------------------------
# Slots
# ---------------------------------------------------------------------------

class TestDeclaredSlots:
    def test_private_slot_is_mangled(self) -> None:
        assert declared_slots(Slotted) == [(Slotted, "x"), (Slotted, "_Slotted__y")]

    def test_leading_underscores_stripped_from_class_name(self) -> None:
        assert declared_slots(_Hidden) == [(_Hidden, "_Hidden__z")]

    def test_special_slots_skipped(self) -> None:
        assert declared_slots(WithDictSlot) == [(WithDictSlot, "x")]

    def test_inherited_slots(self) -> None:
        class Child(Slotted):
            __slots__ = "w"

        assert declared_slots(Child) == [
            (Child, "w"),
            (Slotted, "x"),
            (Slotted, "_Slotted__y"),
        ]

    def test_no_slots(self) -> None:
        assert declared_slots(Plain) == []


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

class TestPredicates:
    def test_nil(self) -> None:
        assert is_nil(None)
        assert not is_nil(0)
        assert not_nil(0)
        assert not not_nil(None)

    def test_is_obj(self) -> None:
        assert is_obj({})
        assert is_obj(Plain())
        assert not is_obj(Plain)
        assert not is_obj(5)

    def test_is_constructor(self) -> None:
        assert is_constructor(Plain)
        assert is_constructor(_with_prototype)
        assert not is_constructor(len)

    def test_is_complex(self) -> None:
        assert is_complex({})
        assert is_complex(len)
        assert is_complex(Plain)
        assert not is_complex("s")

    def test_is_scalar(self) -> None:
        assert is_scalar(5)
        assert is_scalar("s")
        assert not is_scalar(None)
        assert not is_scalar({})
        assert not is_scalar(len)
