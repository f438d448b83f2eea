"""Integrations subpackage for structure-printer.

Contains the pytest plugin (auto-discovered via the pytest11 entry point),
which provides the ``assert_renders`` fixture.
"""

from __future__ import annotations

__all__: list[str] = []
