"""Configuration system for ShopTree.

This module defines how users pick the ordering and traversal of the
shopping list, what priority unspecified items receive, and how the
diagnostic text output looks.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


HIGHEST_PRIORITY = 1
LOWEST_PRIORITY = 3


class OrderingMode(Enum):
    """Which ordering strategy the tree is built with."""
    BY_NAME = "name"            # Alphabetical, case-insensitive
    BY_PRIORITY = "priority"    # Most urgent first


class TraversalOrder(Enum):
    """How to walk the tree when listing items.

    In-order follows the active ordering; the other two expose the
    tree's shape.
    """
    IN_ORDER = "in"         # Left, node, right
    PRE_ORDER = "pre"       # Node before children
    POST_ORDER = "post"     # Children before node


@dataclass
class ShopTreeConfig:
    """Complete configuration for a shopping list.

    Validated by ShoppingList on construction; an invalid config raises
    ConfigurationError before any structure is built.
    """

    # Ordering
    default_ordering: OrderingMode = OrderingMode.BY_NAME
    default_traversal: TraversalOrder = TraversalOrder.IN_ORDER

    # Items
    default_priority: int = LOWEST_PRIORITY

    # Text output
    indent: str = "  "
    empty_tree_text: str = "(empty tree)"
    empty_list_text: str = "(no results)"

    @classmethod
    def by_name(cls) -> 'ShopTreeConfig':
        """Create config that orders items alphabetically."""
        return cls(default_ordering=OrderingMode.BY_NAME)

    @classmethod
    def by_priority(cls) -> 'ShopTreeConfig':
        """Create config that orders the most urgent items first."""
        return cls(default_ordering=OrderingMode.BY_PRIORITY)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.default_ordering, OrderingMode):
            errors.append("default_ordering must be an OrderingMode")

        if not isinstance(self.default_traversal, TraversalOrder):
            errors.append("default_traversal must be a TraversalOrder")

        if (isinstance(self.default_priority, bool)
                or not isinstance(self.default_priority, int)
                or not HIGHEST_PRIORITY <= self.default_priority <= LOWEST_PRIORITY):
            errors.append(
                f"default_priority must be an integer between "
                f"{HIGHEST_PRIORITY} and {LOWEST_PRIORITY}"
            )

        if not isinstance(self.indent, str) or not self.indent:
            errors.append("indent must be a non-empty string")

        return errors
