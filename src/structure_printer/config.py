"""RenderConfig and LeafFormat for structure rendering.

RenderConfig is a frozen (immutable) dataclass holding the output
parameters.  The defaults reproduce the canonical listing format:
two-space indentation, ``Element <i>:`` for sequence positions and
``Value: <text>`` for leaves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class LeafFormat(StrEnum):
    """How a leaf value is turned into text.

    - STR:  ``str(value)``, e.g. ``value1`` for the string ``"value1"``.
    - REPR: ``repr(value)``, e.g. ``'value1'``.
    """

    STR = auto()
    REPR = auto()


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for the structure renderer.

    Attributes:
        indent: Text repeated once per depth level. Whitespace only.
        sequence_label: Word printed before the 1-based position of each
            sequence element (``"Element"`` or a synonym such as ``"Item"``).
        leaf_label: Word printed before a leaf's text.
        max_depth: Deepest indentation level allowed, or None for no bound.
            Traversal past it raises ``DepthExceeded``.
        detect_cycles: When True, a container that contains itself raises
            ``CycleDetected`` instead of recursing forever.
        leaf_format: How leaves are converted to text.
    """

    indent: str = "  "
    sequence_label: str = "Element"
    leaf_label: str = "Value"
    max_depth: int | None = 100
    detect_cycles: bool = True
    leaf_format: LeafFormat = LeafFormat.STR

    def __post_init__(self) -> None:
        if not self.indent or not self.indent.isspace():
            msg = f"indent must be non-empty whitespace, got {self.indent!r}"
            raise ValueError(msg)
        for name in ("sequence_label", "leaf_label"):
            label = getattr(self, name)
            if not label or "\n" in label:
                msg = f"{name} must be a non-empty single line, got {label!r}"
                raise ValueError(msg)
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 0
        ):
            msg = f"max_depth must be None or an int >= 0, got {self.max_depth!r}"
            raise ValueError(msg)
        # Accepts plain strings such as "repr"; raises ValueError otherwise.
        object.__setattr__(self, "leaf_format", LeafFormat(self.leaf_format))

    def indentation(self, depth: int) -> str:
        """Return the prefix for a line emitted at ``depth``."""
        return self.indent * depth

    def format_leaf(self, value: object) -> str:
        """Return the text shown for a leaf value."""
        if self.leaf_format is LeafFormat.REPR:
            return repr(value)
        return str(value)
