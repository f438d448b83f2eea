"""Node types for the intermediate listing tree.

A listing is a tree in which containers own one entry node per member and
every entry owns exactly one child: the member's own subtree.  Only entries
and leaves produce output lines; containers exist to group them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeType(StrEnum):
    """Kinds of node in a listing tree."""

    OBJECT = auto()  # keyed collection
    KEY = auto()  # "<key>:" line
    ARRAY = auto()  # ordered sequence
    ELEMENT = auto()  # "<Label> <i>:" line
    SCALAR = auto()  # "Value: <text>" line


_CONTAINER_TYPES = frozenset({NodeType.OBJECT, NodeType.ARRAY})


@dataclass(slots=True)
class TreeNode:
    """One node of a listing tree.

    ``label`` holds the text that goes on the node's line: the key, the
    1-based position, or the leaf text.  Containers carry an empty label.
    ``path`` locates the node in the input ("" for the root, then
    "/key" or "/index" per level) and is what errors report.  ``value``
    keeps the original key or leaf object.
    """

    node_type: NodeType
    label: str
    path: str
    depth: int = 0
    value: Any = None
    children: list[TreeNode] = field(default_factory=list)

    @property
    def is_container(self) -> bool:
        return self.node_type in _CONTAINER_TYPES

    @property
    def emits_line(self) -> bool:
        """True when rendering this node produces an output line."""
        return not self.is_container
