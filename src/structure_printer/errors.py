"""Exception types raised while building or rendering a structure listing.

Both concrete errors also inherit from the closest built-in exception so
callers that already catch ``RecursionError`` or ``ValueError`` keep working.
"""

from __future__ import annotations

__all__ = ["CycleDetected", "DepthExceeded", "StructurePrinterError"]


class StructurePrinterError(Exception):
    """Base class for all structure-printer failures."""


class DepthExceeded(StructurePrinterError, RecursionError):
    """Raised when traversal descends past ``RenderConfig.max_depth``.

    Attributes:
        depth:     The indentation depth that was about to be emitted.
        max_depth: The configured bound.
        path:      Slash-separated path (keys and 0-based indices) to the
                   offending value. Root is ``""``.
    """

    def __init__(self, depth: int, max_depth: int, path: str) -> None:
        self.depth = depth
        self.max_depth = max_depth
        self.path = path
        super().__init__(
            f"nesting depth {depth} exceeds max_depth={max_depth} at path {path!r}"
        )


class CycleDetected(StructurePrinterError, ValueError):
    """Raised when a container is reached again while it is still being traversed.

    Attributes:
        path: Path at which the container reappeared.
        type_name: Name of the container's type.
    """

    def __init__(self, path: str, type_name: str) -> None:
        self.path = path
        self.type_name = type_name
        super().__init__(
            f"cyclic reference to {type_name} detected at path {path!r}"
        )
