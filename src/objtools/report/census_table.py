"""Tabular rendering of an object's own-property census.

Collects one row per visibility level and renders them as a Rich table
on stderr, or as aligned plain text when Rich is not installed.  No
counting logic lives here; every number comes from
:mod:`objtools.core.owncount`.
"""

from __future__ import annotations

import sys
from typing import Any

from objtools.core.owncount import take_census
from objtools.exceptions import EnvironmentError
from objtools.utils.constants import (
    LEVEL_ALL,
    LEVEL_ENUMERABLE,
    LEVEL_NAMED,
    NOT_COUNTABLE,
)

_LEVEL_LABELS: tuple[tuple[int, str], ...] = (
    (LEVEL_ENUMERABLE, "public names"),
    (LEVEL_NAMED, "all names"),
    (LEVEL_ALL, "names + other keys"),
)


# ---------------------------------------------------------------------------
# Row collection
# ---------------------------------------------------------------------------

def census_rows(value: object) -> list[tuple[str, str, str]]:
    """Return ``(level, label, count)`` rows for *value*.

    Uncountable values produce a single ``("-", "not countable", "-1")``
    row.
    """
    census = take_census(value)
    if census is None:
        return [("-", "not countable", str(NOT_COUNTABLE))]
    return [
        (str(level), label, str(census.count(level)))
        for level, label in _LEVEL_LABELS
    ]


def _load_rich() -> tuple[type[Any], type[Any]]:
    """Return Rich's ``Console`` and ``Table`` classes or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console, Table


def _default_title(value: object) -> str:
    if isinstance(value, type):
        return f"class {value.__qualname__}"
    return type(value).__name__


def _print_plain_table(title: str, rows: list[tuple[str, str, str]]) -> None:
    """Render rows without Rich."""
    print(f"\n{title}", file=sys.stderr)
    print("=" * 40, file=sys.stderr)
    print(f"{'Level':<6} {'Keys':<24} {'Count':>8}", file=sys.stderr)
    print("-" * 40, file=sys.stderr)
    for level, label, count in rows:
        print(f"{level:<6} {label:<24} {count:>8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def print_census(value: object, *, title: str | None = None) -> int:
    """Render the property census of *value* on stderr.

    Returns
    -------
    int
        The level-2 count, or ``NOT_COUNTABLE`` for uncountable input.
    """
    rows = census_rows(value)
    heading = title if title is not None else _default_title(value)

    try:
        console_class, table_class = _load_rich()
    except EnvironmentError:
        _print_plain_table(heading, rows)
        return int(rows[-1][2])

    table = table_class(
        title=heading,
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Level", justify="center", min_width=5)
    table.add_column("Keys", style="bold", min_width=20)
    table.add_column("Count", justify="right", min_width=6)
    for level, label, count in rows:
        table.add_row(level, label, count)

    console = console_class(stderr=True)
    console.print()
    console.print(table)
    console.print()
    return int(rows[-1][2])
