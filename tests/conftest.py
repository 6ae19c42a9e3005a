"""Shared pytest fixtures and configuration for the objtools test suite.

Guidelines
----------
* No filesystem or network access in any test.
* Core tests must be pure — no side effects on the inspected values.
* Rich is hidden through ``sys.modules`` when testing fallbacks.
"""

from __future__ import annotations
