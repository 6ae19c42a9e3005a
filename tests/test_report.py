"""Tests for census rendering (report/census_table.py).

Rich is exercised when installed and hidden through ``sys.modules`` to
verify the plain-text fallback.
"""

from __future__ import annotations

import sys
from types import SimpleNamespace

import pytest

from objtools.exceptions import EnvironmentError
from objtools.report import census_rows, print_census
from objtools.report.census_table import _load_rich


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


class Widget:
    kind = "widget"


# ---------------------------------------------------------------------------
# census_rows
# ---------------------------------------------------------------------------

class TestCensusRows:
    def test_rows_per_level(self) -> None:
        rows = census_rows(SimpleNamespace(a=1, _b=2))
        assert rows == [
            ("0", "public names", "1"),
            ("1", "all names", "2"),
            ("2", "names + other keys", "2"),
        ]

    def test_mapping_rows(self) -> None:
        rows = census_rows({"a": 1, "_b": 2, 3: "c"})
        assert [count for _, _, count in rows] == ["2", "2", "3"]

    def test_uncountable(self) -> None:
        assert census_rows(5) == [("-", "not countable", "-1")]


# ---------------------------------------------------------------------------
# print_census
# ---------------------------------------------------------------------------

class TestPrintCensus:
    def test_returns_level_two_count(self) -> None:
        assert print_census({"a": 1, 2: "b"}) == 2

    def test_returns_sentinel_for_uncountable(self) -> None:
        assert print_census(None) == -1

    def test_plain_fallback(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        assert print_census({"a": 1}) == 1
        err = capsys.readouterr().err
        assert "dict" in err
        assert "public names" in err
        assert "names + other keys" in err

    def test_plain_fallback_class_title(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        print_census(Widget)
        assert "class Widget" in capsys.readouterr().err

    def test_custom_title(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _hide_rich(monkeypatch)
        print_census({}, title="Empty mapping")
        assert "Empty mapping" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Rich loading
# ---------------------------------------------------------------------------

class TestLoadRich:
    def test_raises_without_rich(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _hide_rich(monkeypatch)
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            _load_rich()

    def test_one_console_per_render(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        pytest.importorskip("rich")
        from objtools.report import census_table

        console_class, table_class = _load_rich()
        created: list[object] = []

        def _counting_console(*args: object, **kwargs: object) -> object:
            instance = console_class(*args, **kwargs)
            created.append(instance)
            return instance

        monkeypatch.setattr(
            census_table, "_load_rich", lambda: (_counting_console, table_class),
        )
        print_census({"a": 1})
        assert len(created) == 1
