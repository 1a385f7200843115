"""Data collection strategies for ShopTree.

Collectors define what is extracted from each node a traverser visits.
The same walk can produce items for listing, keys for structural checks
or text lines for the diagnostic dump.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from .entity import Item
from .node import BSTNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: BSTNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ItemCollector(DataCollector):
    """Collects the stored items themselves."""

    def collect(self, node: BSTNode, depth: int) -> Item:
        return node.item


class IdentifierCollector(DataCollector):
    """Collects only item keys."""

    def collect(self, node: BSTNode, depth: int) -> str:
        return node.identifier()


class MetadataCollector(DataCollector):
    """Collects item fields along with the node's position."""

    def collect(self, node: BSTNode, depth: int) -> Dict[str, Any]:
        data = node.metadata()
        data['depth'] = depth
        data['is_leaf'] = node.is_leaf()
        return data


class TextLineCollector(DataCollector):
    """Renders each node as one indented line.

    Indentation is ``indent`` repeated once per level, so a pre-order walk
    produces a readable outline of the tree's shape.
    """

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def collect(self, node: BSTNode, depth: int) -> str:
        item = node.item
        return f"{self.indent * depth}- {item.name} (P{item.priority})"
