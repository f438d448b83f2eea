"""Tree subpackage for value-to-tree conversion primitives.

Re-exports the public API for the tree module:
- TreeNode: dataclass representing a node in the structure tree
- NodeType: StrEnum of the five node kinds (OBJECT, KEY, ARRAY, ELEMENT, SCALAR)
- TreeBuilder: converts any Python value into a typed TreeNode tree
"""

from structure_printer.tree.builder import TreeBuilder
from structure_printer.tree.nodes import NodeType, TreeNode

__all__ = ["NodeType", "TreeBuilder", "TreeNode"]
