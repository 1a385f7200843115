"""ShopTree - shopping list ordered by a binary search tree.

ShopTree keeps a set of items in a registry keyed by normalized name and
mirrors them into an unbalanced binary search tree whose ordering can be
switched at runtime (alphabetical or by priority).

Typical use:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from shoptree import ShoppingList

    shopping = ShoppingList()
    shopping.add("Milk", 2)
    shopping.change_ordering("priority")
    shopping.traverse("in")
━━━━━━━━━━━━━━━━━━━━━━━━━━

The engine (BinarySearchTree, ItemRegistry, orderings) is available from
``shoptree.core`` for callers that manage their own state.
"""

__version__ = "0.1.0"

from .config import (
    ShopTreeConfig,
    OrderingMode,
    TraversalOrder,
    HIGHEST_PRIORITY,
    LOWEST_PRIORITY,
)
from .errors import (
    ShopTreeError,
    UnknownOrderingError,
    UnknownTraversalError,
    ConfigurationError,
)
from .core import (
    Item,
    Comparison,
    OrderingStrategy,
    ByNameOrdering,
    ByPriorityOrdering,
    create_ordering,
    BinarySearchTree,
    ItemRegistry,
    rebuild,
)
from .results import Status, OperationResult
from .api import ShoppingList, format_items

__all__ = [
    "__version__",
    # Config
    "ShopTreeConfig",
    "OrderingMode",
    "TraversalOrder",
    "HIGHEST_PRIORITY",
    "LOWEST_PRIORITY",
    # Errors
    "ShopTreeError",
    "UnknownOrderingError",
    "UnknownTraversalError",
    "ConfigurationError",
    # Core
    "Item",
    "Comparison",
    "OrderingStrategy",
    "ByNameOrdering",
    "ByPriorityOrdering",
    "create_ordering",
    "BinarySearchTree",
    "ItemRegistry",
    "rebuild",
    # API
    "Status",
    "OperationResult",
    "ShoppingList",
    "format_items",
]
