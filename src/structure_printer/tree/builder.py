"""TreeBuilder: converts any Python value into a typed TreeNode tree.

Dispatches on ``classify()`` to convert sequences, mappings and leaves into a
tree of TreeNode objects.  Sequence elements are wrapped in ELEMENT nodes with
1-based position labels; mapping entries are wrapped in KEY nodes in the
mapping's own iteration order.

Traversal runs on an explicit work stack, so nesting is limited only by
``RenderConfig.max_depth`` and never by the interpreter's recursion limit.

Paths are built during traversal:
- Root is "" (empty string)
- Each level appends "/{key_or_index}" (indices are 0-based)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple

import numpy as np

from structure_printer.config import RenderConfig
from structure_printer.errors import CycleDetected, DepthExceeded
from structure_printer.shapes import Shape, classify
from structure_printer.tree.nodes import NodeType, TreeNode

__all__ = ["TreeBuilder", "validate_depth"]

logger = logging.getLogger(__name__)


def validate_depth(depth: Any) -> int:
    """Return ``depth`` if it is a non-negative int, raise otherwise.

    Raises:
        TypeError:  If depth is not an int (bool is rejected too).
        ValueError: If depth is negative.
    """
    # bool subclasses int in Python
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise TypeError(f"depth must be an int, got {type(depth).__name__}")
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    return depth


class _Pending(NamedTuple):
    """A value still to be converted; its node is appended to ``target``."""

    value: Any
    path: str
    depth: int
    target: list[TreeNode]


class _Release(NamedTuple):
    """Marks the end of a container's subtree on the work stack.

    Holds the container itself so its ``id()`` cannot be reused while it is
    still listed as active.
    """

    container: Any


@dataclass
class TreeBuilder:
    """Converts any Python value into a typed TreeNode tree.

    The builder only reads its input: nothing is copied or mutated, and no
    state is kept between ``build()`` calls.

    Depth bound:
        Every node records the indentation depth of the line it emits.  When
        traversal reaches a depth greater than ``config.max_depth``,
        ``DepthExceeded`` is raised.

    Cycle detection:
        Containers currently being traversed are tracked by ``id()``.  Meeting
        one again on the same descent raises ``CycleDetected``.  The same
        container appearing twice as siblings is not a cycle and is rendered
        twice.

    numpy arrays:
        Arrays are iterated through their base ``ndarray`` view, so subclasses
        such as ``np.matrix`` (whose rows stay 2-D) still bottom out in leaves.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"key1": (2, 4)})
        # tree: OBJECT -> KEY("key1") -> ARRAY -> [ELEMENT("1") -> SCALAR("2"), ...]
    """

    config: RenderConfig = field(default_factory=RenderConfig)

    def build(self, value: Any, depth: int = 0) -> TreeNode:
        """Convert a value to a TreeNode tree.

        Args:
            value: Any Python value.
            depth: Indentation depth of the value's first line. Defaults to 0.

        Returns:
            A TreeNode tree rooted at the appropriate node type.

        Raises:
            TypeError:     If depth is not an int.
            ValueError:    If depth is negative.
            DepthExceeded: If nesting goes past ``config.max_depth``.
            CycleDetected: If the value contains itself.
        """
        validate_depth(depth)
        root: list[TreeNode] = []
        active: set[int] = set()
        stack: list[_Pending | _Release] = [_Pending(value, "", depth, root)]

        while stack:
            task = stack.pop()
            if isinstance(task, _Release):
                active.discard(id(task.container))
                continue

            node, children = self._expand(task, active)
            task.target.append(node)
            if not node.is_container:
                continue
            if self.config.detect_cycles:
                stack.append(_Release(task.value))
            # Reversed so the first child is converted first.
            stack.extend(reversed(children))

        return root[0]

    def _expand(
        self, task: _Pending, active: set[int]
    ) -> tuple[TreeNode, list[_Pending]]:
        """Create the node for one value and list its unconverted children.

        Returns:
            The node (SCALAR, OBJECT or ARRAY) and the pending work for its
            entries, empty for leaves.
        """
        value, path, depth, _ = task
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            logger.debug("depth %d exceeds max_depth=%d at %r", depth, max_depth, path)
            raise DepthExceeded(depth, max_depth, path)

        shape = classify(value)
        if shape is Shape.LEAF:
            node = TreeNode(
                node_type=NodeType.SCALAR,
                label=self.config.format_leaf(value),
                path=path,
                depth=depth,
                value=value,
            )
            return node, []

        if self.config.detect_cycles:
            marker = id(value)
            if marker in active:
                type_name = type(value).__name__
                logger.debug("cycle through %s at %r", type_name, path)
                raise CycleDetected(path, type_name)
            active.add(marker)

        if shape is Shape.MAPPING:
            return self._expand_object(value, path, depth)
        return self._expand_array(value, path, depth)

    def _expand_object(
        self, obj: Any, path: str, depth: int
    ) -> tuple[TreeNode, list[_Pending]]:
        """Build an OBJECT node with one KEY child per entry.

        Args:
            obj:    The keyed collection.
            path:   Path to this object node.
            depth:  Depth of the KEY lines.

        Returns:
            The OBJECT node and one pending value per KEY node, targeting
            that KEY node's children.
        """
        object_node = TreeNode(
            node_type=NodeType.OBJECT, label="", path=path, depth=depth
        )
        pending: list[_Pending] = []

        for key, val in obj.items():
            key_path = f"{path}/{key}"
            key_node = TreeNode(
                node_type=NodeType.KEY,
                label=str(key),
                path=key_path,
                depth=depth,
                value=key,
            )
            object_node.children.append(key_node)
            pending.append(_Pending(val, key_path, depth + 1, key_node.children))

        return object_node, pending

    def _expand_array(
        self, arr: Any, path: str, depth: int
    ) -> tuple[TreeNode, list[_Pending]]:
        """Build an ARRAY node with one ELEMENT child per position.

        Args:
            arr:    The ordered sequence.
            path:   Path to this array node.
            depth:  Depth of the ELEMENT lines.

        Returns:
            The ARRAY node, whose ELEMENT children are labelled 1..n, and one
            pending value per ELEMENT node.
        """
        array_node = TreeNode(
            node_type=NodeType.ARRAY, label="", path=path, depth=depth
        )
        pending: list[_Pending] = []
        items = np.asarray(arr) if isinstance(arr, np.ndarray) else arr

        for idx, item in enumerate(items):
            elem_path = f"{path}/{idx}"
            elem_node = TreeNode(
                node_type=NodeType.ELEMENT,
                label=str(idx + 1),
                path=elem_path,
                depth=depth,
            )
            array_node.children.append(elem_node)
            pending.append(_Pending(item, elem_path, depth + 1, elem_node.children))

        return array_node, pending
