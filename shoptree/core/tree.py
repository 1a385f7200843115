"""Binary search tree engine for ShopTree.

BinarySearchTree places items according to an OrderingStrategy and never
balances itself. Items comparing EQUAL under the active strategy are
duplicates: the second one is refused.

Changing the strategy with ``set_ordering`` does not move any node. The
existing shape may then violate the new ordering, so callers that switch
strategies build a fresh tree with ``rebuild`` instead.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .._common.config import TraversalOrder
from .collector import DataCollector, ItemCollector, TextLineCollector
from .entity import Item
from .node import BSTNode
from .ordering import Comparison, OrderingStrategy
from .traverser import create_traverser

logger = logging.getLogger(__name__)


class BinarySearchTree:
    """Unbalanced binary search tree over items.

    Example:
        >>> tree = BinarySearchTree(ByNameOrdering())
        >>> tree.insert(Item("Milk", 2))
        True
        >>> [item.name for item in tree.in_order()]
        ['Milk']
    """

    def __init__(self, ordering: OrderingStrategy):
        """Create an empty tree.

        Args:
            ordering: Strategy deciding where each item is placed
        """
        self.root: Optional[BSTNode] = None
        self.ordering = ordering
        self._size = 0

    @classmethod
    def rebuild(cls, ordering: OrderingStrategy,
                items: Iterable[Item]) -> 'BinarySearchTree':
        """Build a fresh tree bound to ``ordering`` from ``items``.

        Items are inserted in iteration order. The resulting shape depends
        on that order, the in-order sequence does not.
        """
        tree = cls(ordering)
        for item in items:
            tree.insert(item)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Rebuilt tree with %s: %d items, height %d",
                         ordering, len(tree), tree.height())
        return tree

    def set_ordering(self, ordering: OrderingStrategy) -> None:
        """Replace the active ordering without reshaping the tree."""
        logger.debug("Ordering swapped from %s to %s", self.ordering, ordering)
        self.ordering = ordering

    # Mutation

    def insert(self, item: Item) -> bool:
        """Insert an item as a new leaf.

        Returns:
            True if inserted, False if an EQUAL item is already present
        """
        if self.root is None:
            self.root = BSTNode(item)
            self._size += 1
            return True

        current = self.root
        while True:
            cmp = self.ordering.compare(item, current.item)
            if cmp == Comparison.EQUAL:
                logger.debug("Refused duplicate %s", item)
                return False
            if cmp == Comparison.LESS:
                if current.left is None:
                    current.left = BSTNode(item)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = BSTNode(item)
                    break
                current = current.right

        self._size += 1
        return True

    def delete(self, item: Item) -> bool:
        """Remove the node whose item compares EQUAL to ``item``.

        A node with two children takes over the item of its in-order
        successor (leftmost node of the right subtree), and the
        successor's node is spliced out instead.

        Returns:
            True if a node was removed, False if nothing matched
        """
        parent: Optional[BSTNode] = None
        node = self.root
        while node is not None:
            cmp = self.ordering.compare(item, node.item)
            if cmp == Comparison.EQUAL:
                break
            parent = node
            node = node.left if cmp == Comparison.LESS else node.right

        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.item = successor.item
            # The successor has no left child, so it falls into the
            # leaf/one-child case below
            parent, node = successor_parent, successor

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

        self._size -= 1
        logger.debug("Deleted %s, %d items left", item, self._size)
        return True

    def clear(self) -> None:
        """Drop every node."""
        self.root = None
        self._size = 0

    # Lookup

    def _find_node(self, item: Item) -> Optional[BSTNode]:
        current = self.root
        while current is not None:
            cmp = self.ordering.compare(item, current.item)
            if cmp == Comparison.EQUAL:
                return current
            current = current.left if cmp == Comparison.LESS else current.right
        return None

    def contains(self, item: Item) -> bool:
        """Check if an item comparing EQUAL to ``item`` is in the tree."""
        return self._find_node(item) is not None

    def find(self, item: Item) -> Optional[Item]:
        """Return the stored item comparing EQUAL to ``item``, if any."""
        node = self._find_node(item)
        return node.item if node is not None else None

    def min_item(self) -> Optional[Item]:
        """Return the first item in order (leftmost node)."""
        if self.root is None:
            return None
        current = self.root
        while current.left is not None:
            current = current.left
        return current.item

    def max_item(self) -> Optional[Item]:
        """Return the last item in order (rightmost node)."""
        if self.root is None:
            return None
        current = self.root
        while current.right is not None:
            current = current.right
        return current.item

    # Traversal

    def walk(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER
             ) -> Iterator[Tuple[BSTNode, int]]:
        """Lazily yield ``(node, depth)`` pairs in the given order."""
        return create_traverser(order).traverse(self.root)

    def collect(self, order: Union[TraversalOrder, str],
                collector: DataCollector) -> List[Any]:
        """Walk the tree and return what ``collector`` extracts per node."""
        return [collector.collect(node, depth) for node, depth in self.walk(order)]

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER
                 ) -> List[Item]:
        """Return all items in the given traversal order."""
        return self.collect(order, ItemCollector())

    def in_order(self) -> List[Item]:
        """Items ascending under the active ordering."""
        return self.traverse(TraversalOrder.IN_ORDER)

    def pre_order(self) -> List[Item]:
        """Items with each parent before its children."""
        return self.traverse(TraversalOrder.PRE_ORDER)

    def post_order(self) -> List[Item]:
        """Items with each parent after its children."""
        return self.traverse(TraversalOrder.POST_ORDER)

    def height(self) -> int:
        """Number of edges on the longest root-to-leaf path (-1 if empty)."""
        return max((depth for _, depth in self.walk(TraversalOrder.PRE_ORDER)),
                   default=-1)

    def to_text(self, indent: str = "  ") -> str:
        """Render the tree in pre-order, one indented line per node.

        Diagnostic only. An empty tree renders as an empty string.
        """
        lines = self.collect(TraversalOrder.PRE_ORDER, TextLineCollector(indent))
        return "\n".join(lines)

    # Container protocol

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Item]:
        for node, _ in self.walk(TraversalOrder.IN_ORDER):
            yield node.item

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Item):
            return False
        return self.contains(item)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(ordering={self.ordering!r}, size={self._size})"


def rebuild(ordering: OrderingStrategy, items: Iterable[Item]) -> BinarySearchTree:
    """Build a new tree bound to ``ordering`` containing ``items``."""
    return BinarySearchTree.rebuild(ordering, items)
