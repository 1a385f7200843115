"""BSTNode for ShopTree.

The node is intentionally kept simple: it holds one item and owns at most
two children. Placement logic lives in BinarySearchTree, and walking
lives in the traversers.
"""

from typing import Any, Dict, Iterator, Optional

from .entity import Item


class BSTNode:
    """A node in a binary search tree.

    Each node exclusively owns its left and right subtrees. There are no
    parent pointers; algorithms that need the parent track it while
    descending.
    """

    def __init__(self, item: Item,
                 left: Optional['BSTNode'] = None,
                 right: Optional['BSTNode'] = None):
        self.item = item
        self.left = left
        self.right = right

    def identifier(self) -> str:
        """Return the normalized key of the stored item."""
        return self.item.key

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['BSTNode']:
        """Yield existing children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def metadata(self) -> Dict[str, Any]:
        """Return item fields plus the node's child count."""
        data = self.item.metadata()
        data['child_count'] = sum(1 for _ in self.children())
        return data

    def __str__(self) -> str:
        return str(self.item)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"
