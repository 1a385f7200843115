"""Core building blocks for ShopTree.

This package contains the item record, the ordering strategies, the tree
node and engine, and the registry the engine is rebuilt from.
"""

from .entity import Item, normalize_key, parse_priority
from .ordering import (
    Comparison,
    OrderingStrategy,
    ByNameOrdering,
    ByPriorityOrdering,
    create_ordering,
    parse_ordering_mode,
)
from .node import BSTNode
from .traverser import (
    TreeTraverser,
    InOrderTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    create_traverser,
    parse_traversal_order,
)
from .collector import (
    DataCollector,
    ItemCollector,
    IdentifierCollector,
    MetadataCollector,
    TextLineCollector,
)
from .tree import BinarySearchTree, rebuild
from .registry import ItemRegistry

__all__ = [
    "Item",
    "normalize_key",
    "parse_priority",
    "Comparison",
    "OrderingStrategy",
    "ByNameOrdering",
    "ByPriorityOrdering",
    "create_ordering",
    "parse_ordering_mode",
    "BSTNode",
    "TreeTraverser",
    "InOrderTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "create_traverser",
    "parse_traversal_order",
    "DataCollector",
    "ItemCollector",
    "IdentifierCollector",
    "MetadataCollector",
    "TextLineCollector",
    "BinarySearchTree",
    "rebuild",
    "ItemRegistry",
]
