"""Test fixtures for ShopTree consumers.

These fixtures provide controlled access to the tree's shape for testing
purposes without making node internals part of the public API.
"""

from typing import Any, Dict, List, Optional

from ..core.collector import IdentifierCollector, MetadataCollector
from ..core.node import BSTNode
from ..core.ordering import Comparison
from ..core.tree import BinarySearchTree


class TreeShapeHelper:
    """Public test fixture for structural verification of a tree.

    Example:
        shopping = ShoppingList()
        shopping.add("Milk", 2)
        shape = TreeShapeHelper(shopping.tree)

        assert shape.is_valid()
        assert shape.node_count() == len(shopping)
    """

    def __init__(self, tree: BinarySearchTree):
        """Initialize with the tree to inspect.

        Args:
            tree: The BinarySearchTree, e.g. ``shopping.tree``
        """
        self._tree = tree

    def is_valid(self) -> bool:
        """Check the search-tree invariant under the tree's own ordering.

        Every item in a left subtree must compare LESS than its ancestor
        and every item in a right subtree GREATER.
        """
        return not self.violations()

    def violations(self) -> List[str]:
        """Describe every node placed on the wrong side of an ancestor.

        Returns:
            List of violation descriptions (empty if valid)
        """
        compare = self._tree.ordering.compare
        problems = []

        # Each entry: node, lower bound node, upper bound node
        stack: List[tuple] = []
        if self._tree.root is not None:
            stack.append((self._tree.root, None, None))

        while stack:
            node, low, high = stack.pop()
            if low is not None and compare(node.item, low.item) != Comparison.GREATER:
                problems.append(f"{node.item} is not after {low.item}")
            if high is not None and compare(node.item, high.item) != Comparison.LESS:
                problems.append(f"{node.item} is not before {high.item}")
            if node.left is not None:
                stack.append((node.left, low, node))
            if node.right is not None:
                stack.append((node.right, node, high))

        return problems

    def node_count(self) -> int:
        """Count nodes by walking the tree, ignoring the cached size."""
        return sum(1 for _ in self._tree.walk("pre"))

    def height(self) -> int:
        return self._tree.height()

    def root_key(self) -> Optional[str]:
        root: Optional[BSTNode] = self._tree.root
        return root.identifier() if root is not None else None

    def leaf_keys(self) -> List[str]:
        """Keys of leaf nodes, left to right."""
        collector = IdentifierCollector()
        return [collector.collect(node, depth)
                for node, depth in self._tree.walk("in") if node.is_leaf()]

    def node_records(self) -> List[Dict[str, Any]]:
        """Per-node metadata and depth, in pre-order."""
        return self._tree.collect("pre", MetadataCollector())
