"""Tree traversal strategies for ShopTree.

Traversers implement the three depth-first walks over a binary search
tree. Each one yields ``(node, depth)`` pairs with depth relative to the
root (root = 0).

The tree is never balanced, so a list of items inserted in sorted order
degenerates into a chain as deep as the list is long. All walks therefore
keep an explicit stack instead of recursing.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple, Union

from .._common.config import TraversalOrder
from ..errors import UnknownTraversalError
from .node import BSTNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    order: TraversalOrder

    @abstractmethod
    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node, or None for an empty tree

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass


class InOrderTraverser(TreeTraverser):
    """In-order traversal: left subtree, node, right subtree.

    Yields items in ascending order under the ordering the tree was
    built with.
    """

    order = TraversalOrder.IN_ORDER

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        stack: List[Tuple[BSTNode, int]] = []
        node, depth = root, 0

        while stack or node is not None:
            # Descend the left spine
            while node is not None:
                stack.append((node, depth))
                node, depth = node.left, depth + 1

            node, depth = stack.pop()
            yield (node, depth)
            node, depth = node.right, depth + 1


class PreOrderTraverser(TreeTraverser):
    """Pre-order traversal: node, left subtree, right subtree.

    Visits parent before children. Re-inserting items in this order
    into an empty tree reproduces the same shape.
    """

    order = TraversalOrder.PRE_ORDER

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        stack: List[Tuple[BSTNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            yield (node, depth)

            # Right pushed first so left is visited first
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Post-order traversal: left subtree, right subtree, node.

    Visits children before parent. Good for bottom-up processing such
    as tearing a tree down.
    """

    order = TraversalOrder.POST_ORDER

    def traverse(self, root: Optional[BSTNode]) -> Iterator[Tuple[BSTNode, int]]:
        if root is None:
            return

        # Each entry carries whether its children were already scheduled
        stack: List[Tuple[BSTNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            if node.right is not None:
                stack.append((node.right, depth + 1, False))
            if node.left is not None:
                stack.append((node.left, depth + 1, False))


def parse_traversal_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Convert an enum member or a name to a TraversalOrder.

    Raises:
        UnknownTraversalError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    aliases = {
        'in': TraversalOrder.IN_ORDER,
        'in_order': TraversalOrder.IN_ORDER,
        'inorder': TraversalOrder.IN_ORDER,
        'pre': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'preorder': TraversalOrder.PRE_ORDER,
        'post': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'postorder': TraversalOrder.POST_ORDER,
    }

    order_lower = str(order).strip().lower().replace('-', '_')
    if order_lower not in aliases:
        raise UnknownTraversalError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(aliases.keys())}"
        )
    return aliases[order_lower]


def create_traverser(order: Union[TraversalOrder, str]) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder member or name (in, pre, post, ...)

    Returns:
        TreeTraverser instance

    Raises:
        UnknownTraversalError: If the order is not recognized
    """
    traversers = {
        TraversalOrder.IN_ORDER: InOrderTraverser,
        TraversalOrder.PRE_ORDER: PreOrderTraverser,
        TraversalOrder.POST_ORDER: PostOrderTraverser,
    }
    return traversers[parse_traversal_order(order)]()
