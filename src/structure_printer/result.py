"""RenderResult dataclass for structure rendering output.

This module provides the rich result type returned by describe() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RenderResult"]


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Rich result of a describe() call.

    Attributes:
        lines: Output lines in emission order, without trailing newlines.
        leaf_count: Number of leaf values rendered.
        container_count: Number of sequences and mappings traversed,
            including empty ones.
        max_depth: Deepest indentation level among the emitted lines, or -1
            when nothing was emitted (an empty container).
        computation_time_ms: Wall-clock duration of the render in milliseconds.
    """

    lines: list[str]
    leaf_count: int
    container_count: int
    max_depth: int
    computation_time_ms: float

    @property
    def text(self) -> str:
        """The listing as one newline-terminated string ("" when empty)."""
        if not self.lines:
            return ""
        return "\n".join(self.lines) + "\n"
