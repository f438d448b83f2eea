"""StructureRenderer: orchestrator that wires TreeBuilder to line emission.

This is the central layer between the tree primitives and the public API.

Architecture:
- render() builds a TreeNode tree with TreeBuilder (which classifies values,
  enforces the depth bound and detects cycles), then walks the tree with an
  explicit stack and emits one line per KEY, ELEMENT and SCALAR node.
  Container nodes emit nothing, so an empty container yields no lines.
- render_each() treats its argument as a top-level loop: every item restarts
  at depth 0 and no state carries over between siblings.
- write() and write_each() render completely before writing, so a failing
  render never leaves a partial listing in the sink.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable
from typing import IO, Any

from structure_printer.config import RenderConfig
from structure_printer.result import RenderResult
from structure_printer.tree.builder import TreeBuilder
from structure_printer.tree.nodes import NodeType, TreeNode

__all__ = ["StructureRenderer"]


class StructureRenderer:
    """Renders values as indented listings of their leaves.

    The renderer holds only its configuration, so one instance may be shared
    between threads and reused for any number of calls.

    Example::

        from structure_printer.renderer import StructureRenderer

        renderer = StructureRenderer()
        renderer.render((2, 4))
        # ['Element 1:', '  Value: 2', 'Element 2:', '  Value: 4']
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialise the renderer.

        Args:
            config: Output parameters.  Defaults to ``RenderConfig()``.
        """
        self._config: RenderConfig = config if config is not None else RenderConfig()
        self._builder = TreeBuilder(config=self._config)

    @property
    def config(self) -> RenderConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, value: Any, depth: int = 0) -> list[str]:
        """Return the listing of ``value`` as a list of lines.

        Args:
            value: Any Python value.
            depth: Indentation depth of the first line.  Defaults to 0.

        Returns:
            Lines without trailing newlines, in emission order.
        """
        return self.render_tree(self._builder.build(value, depth))

    def render_each(self, items: Iterable[Any]) -> list[str]:
        """Render every item of ``items`` independently at depth 0."""
        lines: list[str] = []
        for item in items:
            lines.extend(self.render(item))
        return lines

    def describe(self, value: Any, depth: int = 0) -> RenderResult:
        """Render ``value`` and report statistics about the traversal.

        Returns:
            A ``RenderResult`` with lines, leaf and container counts, the
            deepest emitted depth and wall-clock timing.
        """
        t0 = time.perf_counter()
        tree = self._builder.build(value, depth)
        lines = self.render_tree(tree)

        leaf_count = 0
        container_count = 0
        deepest = -1
        for node in _walk(tree):
            if node.node_type is NodeType.SCALAR:
                leaf_count += 1
            elif node.is_container:
                container_count += 1
            if node.emits_line:
                deepest = max(deepest, node.depth)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        return RenderResult(
            lines=lines,
            leaf_count=leaf_count,
            container_count=container_count,
            max_depth=deepest,
            computation_time_ms=elapsed_ms,
        )

    def write(self, value: Any, file: IO[str] | None = None, depth: int = 0) -> None:
        """Write the listing of ``value`` to ``file`` (default ``sys.stdout``)."""
        _emit(self.render(value, depth), file)

    def write_each(self, items: Iterable[Any], file: IO[str] | None = None) -> None:
        """Write ``render_each(items)`` to ``file`` once every item has rendered."""
        _emit(self.render_each(items), file)

    def render_tree(self, tree: TreeNode) -> list[str]:
        """Emit the lines for an already built tree."""
        config = self._config
        lines: list[str] = []
        for node in _walk(tree):
            prefix = config.indentation(node.depth)
            if node.node_type is NodeType.ELEMENT:
                lines.append(f"{prefix}{config.sequence_label} {node.label}:")
            elif node.node_type is NodeType.KEY:
                lines.append(f"{prefix}{node.label}:")
            elif node.node_type is NodeType.SCALAR:
                lines.append(f"{prefix}{config.leaf_label}: {node.label}")
        return lines


def _emit(lines: list[str], file: IO[str] | None) -> None:
    sink = file if file is not None else sys.stdout
    for line in lines:
        sink.write(line + "\n")


def _walk(tree: TreeNode) -> Iterable[TreeNode]:
    """Yield nodes in pre-order without recursion."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
