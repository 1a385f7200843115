"""High-level API for ShopTree.

ShoppingList is the object a presentation layer talks to. It owns the
registry and the tree, keeps them consistent, and reports every outcome
as an OperationResult. Nothing here exposes tree nodes.
"""

import logging
from typing import Any, Iterable, List, Optional, Union

from .config import ShopTreeConfig, OrderingMode, TraversalOrder
from .core.entity import Item, normalize_key, parse_priority
from .core.ordering import create_ordering, parse_ordering_mode
from .core.registry import ItemRegistry
from .core.tree import BinarySearchTree
from .errors import ConfigurationError
from .results import OperationResult, Status

logger = logging.getLogger(__name__)


_MODE_LABELS = {
    OrderingMode.BY_NAME: "by name",
    OrderingMode.BY_PRIORITY: "by priority",
}


class ShoppingList:
    """A shopping list ordered by a binary search tree.

    The registry decides whether an item exists; the tree is a view of
    the same items in the active order. Every mutation updates both or
    neither.

    Example:
        >>> shopping = ShoppingList()
        >>> shopping.add("Milk", 2).status
        <Status.ADDED: 'added'>
        >>> shopping.add("milk", 1).status
        <Status.ALREADY_EXISTS: 'already_exists'>
        >>> [item.name for item in shopping.traverse()]
        ['Milk']
    """

    def __init__(self, config: Optional[ShopTreeConfig] = None):
        """Create an empty list.

        Args:
            config: List configuration (defaults to ShopTreeConfig())

        Raises:
            ConfigurationError: If the config fails validation
        """
        self.config = config or ShopTreeConfig()

        problems = self.config.validate()
        if problems:
            raise ConfigurationError(problems)

        self.mode = self.config.default_ordering
        self.registry = ItemRegistry()
        self.tree = BinarySearchTree(create_ordering(self.mode))

    # Operations

    def add(self, name: str, priority: Any = None) -> OperationResult:
        """Add an item.

        A missing or invalid priority silently becomes the configured
        default priority.

        Returns:
            ADDED, ALREADY_EXISTS or INVALID_NAME
        """
        name = _clean_name(name)
        if not name:
            return _invalid_name()

        existing = self.registry.lookup(name)
        if existing is not None:
            return OperationResult(
                Status.ALREADY_EXISTS, name, existing,
                f'"{name}" already exists in the list.'
            )

        item = Item(name, parse_priority(priority, self.config.default_priority))
        self.registry.add(item)
        self.tree.insert(item)

        logger.info("Added %s", item)
        return OperationResult(
            Status.ADDED, name, item,
            f"Item added: {item.name} (P{item.priority})."
        )

    def search(self, name: str) -> OperationResult:
        """Look up an item by name, case-insensitively.

        Returns:
            FOUND, NOT_FOUND or INVALID_NAME
        """
        name = _clean_name(name)
        if not name:
            return _invalid_name()

        item = self.registry.lookup(name)
        if item is None:
            return OperationResult(
                Status.NOT_FOUND, name, None,
                f'"{name}" is not in the list.'
            )
        return OperationResult(
            Status.FOUND, name, item,
            f'"{name}" is in the list.'
        )

    def delete(self, name: str) -> OperationResult:
        """Remove an item by name, case-insensitively.

        Returns:
            DELETED, NOT_FOUND or INVALID_NAME
        """
        name = _clean_name(name)
        if not name:
            return _invalid_name()

        item = self.registry.lookup(name)
        if item is None:
            return OperationResult(
                Status.NOT_FOUND, name, None,
                f'Cannot delete: "{name}" is not in the list.'
            )

        # The registry's instance compares EQUAL to exactly one tree node
        self.tree.delete(item)
        self.registry.remove(item.key)

        logger.info("Deleted %s", item)
        return OperationResult(
            Status.DELETED, name, item,
            f"Item deleted: {name}."
        )

    def change_ordering(self, mode: Union[OrderingMode, str]) -> OperationResult:
        """Switch the ordering and rebuild the tree from the registry.

        Always rebuilds, even when ``mode`` is already active.

        Raises:
            UnknownOrderingError: If the mode is not recognized
        """
        mode = parse_ordering_mode(mode)
        self.tree = BinarySearchTree.rebuild(create_ordering(mode), self.registry.values())
        self.mode = mode

        label = _MODE_LABELS[mode]
        logger.info("Ordering changed to %s (%d items)", label, len(self.tree))
        return OperationResult(
            Status.ORDERING_CHANGED, mode.value, None,
            f"Ordering applied: {label}."
        )

    def traverse(self, order: Union[TraversalOrder, str, None] = None) -> List[Item]:
        """Return every item in the given traversal order.

        Defaults to the configured traversal (in-order unless changed).

        Raises:
            UnknownTraversalError: If the order is not recognized
        """
        if order is None:
            order = self.config.default_traversal
        return self.tree.traverse(order)

    def dump_text(self) -> str:
        """Diagnostic pre-order outline of the tree."""
        if self.tree.is_empty():
            return self.config.empty_tree_text
        return self.tree.to_text(self.config.indent)

    def check_consistency(self) -> List[str]:
        """Compare the registry and the tree.

        Returns:
            List of disagreements (empty if consistent)
        """
        problems = []

        if len(self.registry) != len(self.tree):
            problems.append(
                f"registry holds {len(self.registry)} items, tree holds {len(self.tree)}"
            )

        for item in self.registry.values():
            if self.tree.find(item) is not item:
                problems.append(f"{item.name!r} is registered but not reachable in the tree")

        for item in self.tree.in_order():
            if self.registry.get(item.key) is not item:
                problems.append(f"{item.name!r} is in the tree but not registered")

        for problem in problems:
            logger.warning("Inconsistent shopping list: %s", problem)
        return problems

    # Container protocol

    def items(self) -> List[Item]:
        """Items in the active order."""
        return self.tree.in_order()

    def __len__(self) -> int:
        return len(self.registry)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str) or not name.strip():
            return False
        return self.registry.has(normalize_key(name))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self.mode.value!r}, size={len(self)})"


def format_items(items: Iterable[Item],
                 config: Optional[ShopTreeConfig] = None) -> List[str]:
    """Render items as display lines.

    Returns one ``"<name> (Priority <n>)"`` line per item, or a single
    placeholder line when there are none.
    """
    config = config or ShopTreeConfig()
    lines = [f"{item.name} (Priority {item.priority})" for item in items]
    return lines or [config.empty_list_text]


def _clean_name(name: Any) -> str:
    if not isinstance(name, str):
        return ""
    return name.strip()


def _invalid_name() -> OperationResult:
    return OperationResult(Status.INVALID_NAME, "", None, "Enter an item name.")
