"""Public API functions for structure-printer.

This module provides the user-facing functions: render, render_text,
print_structure, print_each and describe.  Each call creates a fresh
StructureRenderer to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import IO, Any

from structure_printer.config import RenderConfig
from structure_printer.renderer import StructureRenderer
from structure_printer.result import RenderResult

__all__ = ["describe", "print_each", "print_structure", "render", "render_text"]


def _renderer(label: str | None, config: RenderConfig | None) -> StructureRenderer:
    """Create a renderer, overriding the sequence label when one is given."""
    config = config if config is not None else RenderConfig()
    if label is not None:
        config = dataclasses.replace(config, sequence_label=label)
    return StructureRenderer(config=config)


def render(
    value: Any,
    depth: int = 0,
    *,
    label: str | None = None,
    config: RenderConfig | None = None,
) -> list[str]:
    """Return the indented listing of ``value`` as a list of lines.

    Sequences produce ``"<Label> <i>:"`` lines (1-based), mappings produce
    ``"<key>:"`` lines in their own iteration order, and leaves produce
    ``"Value: <text>"``.  Each level of nesting adds one indent unit (two
    spaces by default).

    Args:
        value:  Any Python value.
        depth:  Indentation depth of the first line. Must be a non-negative
                int. Defaults to 0.
        label:  Overrides ``config.sequence_label`` (e.g. ``"Item"``).
        config: Output parameters. Defaults to ``RenderConfig()`` when None.

    Returns:
        Lines without trailing newlines.

    Raises:
        DepthExceeded: If nesting goes past ``config.max_depth``.
        CycleDetected: If the value contains itself.
    """
    return _renderer(label, config).render(value, depth)


def render_text(
    value: Any,
    depth: int = 0,
    *,
    label: str | None = None,
    config: RenderConfig | None = None,
) -> str:
    """Return the listing as one newline-terminated string ("" when empty)."""
    lines = render(value, depth, label=label, config=config)
    return "".join(f"{line}\n" for line in lines)


def print_structure(
    value: Any,
    depth: int = 0,
    *,
    label: str | None = None,
    file: IO[str] | None = None,
    config: RenderConfig | None = None,
) -> None:
    """Write the listing of ``value`` to ``file`` (default ``sys.stdout``).

    Nothing is written when rendering fails.
    """
    _renderer(label, config).write(value, file=file, depth=depth)


def print_each(
    items: Iterable[Any],
    *,
    label: str | None = None,
    file: IO[str] | None = None,
    config: RenderConfig | None = None,
) -> None:
    """Print every item of ``items`` as its own top-level listing.

    Each item starts flush-left at depth 0, so a tuple followed by a mapping
    both begin without indentation.  Nothing is written unless every item
    renders.
    """
    _renderer(label, config).write_each(items, file=file)


def describe(
    value: Any,
    depth: int = 0,
    *,
    config: RenderConfig | None = None,
) -> RenderResult:
    """Render ``value`` and return a ``RenderResult`` with traversal statistics.

    Args:
        value:  Any Python value.
        depth:  Indentation depth of the first line. Defaults to 0.
        config: Output parameters. Defaults to ``RenderConfig()`` when None.

    Returns:
        A ``RenderResult`` with lines, leaf_count, container_count, max_depth
        and computation_time_ms populated.
    """
    return StructureRenderer(config=config).describe(value, depth)
