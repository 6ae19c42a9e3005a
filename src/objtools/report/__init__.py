"""Report layer — optional Rich rendering of property censuses.

This package is the only place objtools writes to a terminal.  It may
import from ``core`` and ``utils``; no other layer imports from
``report``.  Rich is optional: every renderer falls back to plain
stderr text when it is missing.
"""

from objtools.report.census_table import census_rows, print_census

__all__: list[str] = ["census_rows", "print_census"]
