"""Custom exception hierarchy for objtools.

Every exception raised by a public helper inherits from
:class:`ObjToolsError`.  The property counter is the one exception to
the rule: it never raises for well-formed calls and signals an
uncountable input with :data:`~objtools.utils.constants.NOT_COUNTABLE`
instead.

Hierarchy
---------
ObjToolsError
├── NotInspectableError
├── InvalidRuleError
├── ReadOnlyTargetError
└── EnvironmentError
"""

from __future__ import annotations


class ObjToolsError(Exception):
    """Base exception for all objtools errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input values ----------------------------------------------------------

class NotInspectableError(ObjToolsError):
    """Raised when a helper that requires an object receives a scalar."""


class InvalidRuleError(ObjToolsError):
    """Raised when a method filter rule has an unsupported type."""


# --- Mutation --------------------------------------------------------------

class ReadOnlyTargetError(ObjToolsError):
    """Raised when a copy target refuses to accept new properties."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ObjToolsError):
    """Raised when an optional runtime dependency is not available."""
