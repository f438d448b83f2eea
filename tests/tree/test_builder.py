"""Comprehensive tests for TreeBuilder.

Covers sequences, mappings, leaves, nesting depth, paths, 1-based element
labels, mapping iteration order, starting depth validation, the max_depth
bound, cycle detection and non-mutation of the input.
"""

from __future__ import annotations

import copy
import sys
from typing import Any

import pytest

from structure_printer.config import RenderConfig
from structure_printer.errors import CycleDetected, DepthExceeded
from structure_printer.tree.builder import TreeBuilder, validate_depth
from structure_printer.tree.nodes import NodeType

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder instance for each test."""
    return TreeBuilder()


def _nest(value: Any, levels: int) -> Any:
    for _ in range(levels):
        value = [value]
    return value


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------


class TestSequences:
    def test_root_is_array(self, builder: TreeBuilder) -> None:
        tree = builder.build((2, 4))
        assert tree.node_type == NodeType.ARRAY
        assert tree.path == ""
        assert tree.depth == 0

    def test_elements_labelled_one_based(self, builder: TreeBuilder) -> None:
        tree = builder.build(["a", "b", "c"])
        assert [child.label for child in tree.children] == ["1", "2", "3"]
        assert all(child.node_type == NodeType.ELEMENT for child in tree.children)

    def test_element_paths_are_zero_based(self, builder: TreeBuilder) -> None:
        tree = builder.build(["a", "b"])
        assert [child.path for child in tree.children] == ["/0", "/1"]

    def test_element_holds_scalar_one_level_deeper(self, builder: TreeBuilder) -> None:
        tree = builder.build((2, 4))
        elem = tree.children[0]
        scalar = elem.children[0]
        assert elem.depth == 0
        assert scalar.node_type == NodeType.SCALAR
        assert scalar.label == "2"
        assert scalar.value == 2
        assert scalar.depth == 1

    def test_empty_sequence_has_no_children(self, builder: TreeBuilder) -> None:
        assert builder.build([]).children == []


# ---------------------------------------------------------------------------
# Mappings
# ---------------------------------------------------------------------------


class TestMappings:
    def test_root_is_object(self, builder: TreeBuilder) -> None:
        tree = builder.build({"key1": "value1"})
        assert tree.node_type == NodeType.OBJECT

    def test_key_node_label_and_value(self, builder: TreeBuilder) -> None:
        tree = builder.build({"key1": "value1"})
        key_node = tree.children[0]
        assert key_node.node_type == NodeType.KEY
        assert key_node.label == "key1"
        assert key_node.value == "key1"
        assert key_node.path == "/key1"

    def test_non_string_keys_use_str(self, builder: TreeBuilder) -> None:
        tree = builder.build({1: "a", (1, 2): "b"})
        assert [child.label for child in tree.children] == ["1", "(1, 2)"]

    def test_iteration_order_not_sorted(self, builder: TreeBuilder) -> None:
        tree = builder.build({"zeta": 1, "alpha": 2, "mid": 3})
        assert [child.label for child in tree.children] == ["zeta", "alpha", "mid"]

    def test_nested_mapping_paths_and_depths(self, builder: TreeBuilder) -> None:
        tree = builder.build({"key2": {"nested_key1": "nested_value1"}})
        inner = tree.children[0].children[0]
        assert inner.node_type == NodeType.OBJECT
        assert inner.depth == 1
        nested_key = inner.children[0]
        assert nested_key.path == "/key2/nested_key1"
        assert nested_key.depth == 1
        scalar = nested_key.children[0]
        assert scalar.label == "nested_value1"
        assert scalar.depth == 2


# ---------------------------------------------------------------------------
# Leaves and starting depth
# ---------------------------------------------------------------------------


class TestLeavesAndDepth:
    @pytest.mark.parametrize(
        ("value", "label"),
        [(5, "5"), ("text", "text"), (None, "None"), (True, "True"), (2.5, "2.5")],
    )
    def test_scalar_labels(self, builder: TreeBuilder, value: Any, label: str) -> None:
        tree = builder.build(value)
        assert tree.node_type == NodeType.SCALAR
        assert tree.label == label
        assert tree.value is value

    def test_repr_leaf_format(self) -> None:
        builder = TreeBuilder(config=RenderConfig(leaf_format="repr"))  # type: ignore[arg-type]
        assert builder.build("x").label == "'x'"

    def test_starting_depth_offsets_every_node(self, builder: TreeBuilder) -> None:
        tree = builder.build([1], depth=3)
        assert tree.depth == 3
        assert tree.children[0].children[0].depth == 4

    @pytest.mark.parametrize("depth", [True, 1.5, "1", None])
    def test_non_int_depth_rejected(self, builder: TreeBuilder, depth: Any) -> None:
        with pytest.raises(TypeError, match="depth"):
            builder.build(1, depth=depth)

    def test_negative_depth_rejected(self, builder: TreeBuilder) -> None:
        with pytest.raises(ValueError, match="depth"):
            builder.build(1, depth=-1)

    def test_validate_depth_returns_value(self) -> None:
        assert validate_depth(4) == 4


# ---------------------------------------------------------------------------
# Depth bound
# ---------------------------------------------------------------------------


class TestDepthBound:
    def test_within_bound(self) -> None:
        builder = TreeBuilder(config=RenderConfig(max_depth=2))
        tree = builder.build(_nest(1, 2))
        assert tree.children[0].children[0].children[0].children[0].depth == 2

    def test_past_bound_raises(self) -> None:
        builder = TreeBuilder(config=RenderConfig(max_depth=2))
        with pytest.raises(DepthExceeded) as exc_info:
            builder.build(_nest(1, 3))
        assert exc_info.value.depth == 3
        assert exc_info.value.max_depth == 2
        assert exc_info.value.path == "/0/0/0"

    def test_starting_depth_counts_toward_bound(self) -> None:
        builder = TreeBuilder(config=RenderConfig(max_depth=0))
        with pytest.raises(DepthExceeded) as exc_info:
            builder.build(5, depth=1)
        assert exc_info.value.path == ""

    def test_default_bound_stops_pathological_nesting(self, builder: TreeBuilder) -> None:
        with pytest.raises(DepthExceeded):
            builder.build(_nest(0, 150))

    def test_depth_exceeded_is_recursion_error(self) -> None:
        builder = TreeBuilder(config=RenderConfig(max_depth=0))
        with pytest.raises(RecursionError):
            builder.build([1])

    def test_unbounded(self) -> None:
        builder = TreeBuilder(config=RenderConfig(max_depth=None))
        tree = builder.build(_nest(0, 150))
        assert tree.node_type == NodeType.ARRAY

    def test_large_bound_reports_depth_exceeded(self) -> None:
        builder = TreeBuilder(config=RenderConfig(max_depth=600))
        with pytest.raises(DepthExceeded) as exc_info:
            builder.build(_nest(0, 700))
        assert exc_info.value.depth == 601
        assert exc_info.value.path == "/0" * 601

    def test_nesting_beyond_recursion_limit(self) -> None:
        levels = sys.getrecursionlimit() + 200
        builder = TreeBuilder(config=RenderConfig(max_depth=None))
        node = builder.build(_nest("x", levels))
        while node.children:
            node = node.children[0]
        assert node.node_type == NodeType.SCALAR
        assert node.depth == levels


# ---------------------------------------------------------------------------
# Cycles and input safety
# ---------------------------------------------------------------------------


class TestCycles:
    def test_self_containing_list(self, builder: TreeBuilder) -> None:
        items: list[Any] = [1]
        items.append(items)
        with pytest.raises(CycleDetected) as exc_info:
            builder.build(items)
        assert exc_info.value.path == "/1"
        assert exc_info.value.type_name == "list"

    def test_self_containing_dict(self, builder: TreeBuilder) -> None:
        data: dict[str, Any] = {}
        data["self"] = data
        with pytest.raises(CycleDetected, match="/self"):
            builder.build(data)

    def test_indirect_cycle(self, builder: TreeBuilder) -> None:
        outer: dict[str, Any] = {"inner": []}
        outer["inner"].append(outer)
        with pytest.raises(CycleDetected):
            builder.build(outer)

    def test_cycle_detected_is_value_error(self, builder: TreeBuilder) -> None:
        items: list[Any] = []
        items.append(items)
        with pytest.raises(ValueError):
            builder.build(items)

    def test_shared_sibling_is_not_a_cycle(self, builder: TreeBuilder) -> None:
        shared = [1]
        tree = builder.build([shared, shared])
        assert len(tree.children) == 2

    def test_cycle_hits_depth_bound_when_detection_off(self) -> None:
        builder = TreeBuilder(config=RenderConfig(detect_cycles=False, max_depth=5))
        items: list[Any] = []
        items.append(items)
        with pytest.raises(DepthExceeded):
            builder.build(items)

    def test_input_not_mutated(self, builder: TreeBuilder) -> None:
        data = {"a": [1, {"b": (2, 3)}], "c": "d"}
        snapshot = copy.deepcopy(data)
        builder.build(data)
        assert data == snapshot

    def test_builds_are_deterministic(self, builder: TreeBuilder) -> None:
        data = {"a": [1, 2], "b": {"c": None}}
        first = builder.build(data)
        second = builder.build(data)
        assert first == second
