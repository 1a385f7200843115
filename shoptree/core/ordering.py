"""Ordering strategies for ShopTree.

An ordering strategy is a pure three-way comparison over items. The tree
holds a reference to one strategy and delegates every placement decision
to it, so swapping the strategy changes where items belong without
touching the items themselves.

Every strategy must be a strict weak ordering whose EQUAL means "same
item key". Otherwise the tree and the registry disagree about what a
duplicate is.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Tuple, Union

from .._common.config import OrderingMode
from ..errors import UnknownOrderingError
from .entity import Item


class Comparison(IntEnum):
    """Result of a three-way comparison."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _three_way(left: Tuple[Any, ...], right: Tuple[Any, ...]) -> Comparison:
    if left < right:
        return Comparison.LESS
    if left > right:
        return Comparison.GREATER
    return Comparison.EQUAL


class OrderingStrategy(ABC):
    """Abstract base class for item orderings.

    Subclasses only define ``sort_key``; comparison is lexicographic over
    that tuple. Keeping both views in one place guarantees that sorting a
    list with ``sort_key`` gives the same sequence as an in-order walk of
    a tree built with ``compare``.
    """

    mode: OrderingMode

    @abstractmethod
    def sort_key(self, item: Item) -> Tuple[Any, ...]:
        """Return the tuple this strategy orders items by."""
        pass

    def compare(self, a: Item, b: Item) -> Comparison:
        """Compare two items.

        Returns:
            Comparison.LESS, EQUAL or GREATER
        """
        return _three_way(self.sort_key(a), self.sort_key(b))

    def __call__(self, a: Item, b: Item) -> Comparison:
        return self.compare(a, b)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderingStrategy):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class ByNameOrdering(OrderingStrategy):
    """Alphabetical ordering.

    Lowercase name first, then priority (most urgent first), then
    creation order.
    """

    mode = OrderingMode.BY_NAME

    def sort_key(self, item: Item) -> Tuple[Any, ...]:
        return (item.key, item.priority, item.created_at)


class ByPriorityOrdering(OrderingStrategy):
    """Urgency ordering.

    Priority first (1 before 3), then lowercase name, then creation order.
    """

    mode = OrderingMode.BY_PRIORITY

    def sort_key(self, item: Item) -> Tuple[Any, ...]:
        return (item.priority, item.key, item.created_at)


def parse_ordering_mode(mode: Union[OrderingMode, str]) -> OrderingMode:
    """Convert an enum member or its string value to an OrderingMode.

    Raises:
        UnknownOrderingError: If the name is not recognized
    """
    if isinstance(mode, OrderingMode):
        return mode

    aliases = {
        'name': OrderingMode.BY_NAME,
        'by_name': OrderingMode.BY_NAME,
        'alphabetical': OrderingMode.BY_NAME,
        'priority': OrderingMode.BY_PRIORITY,
        'by_priority': OrderingMode.BY_PRIORITY,
    }

    mode_lower = str(mode).strip().lower()
    if mode_lower not in aliases:
        raise UnknownOrderingError(
            f"Unknown ordering mode: {mode}. "
            f"Choose from: {', '.join(aliases.keys())}"
        )
    return aliases[mode_lower]


def create_ordering(mode: Union[OrderingMode, str]) -> OrderingStrategy:
    """Create an ordering strategy by mode.

    Args:
        mode: OrderingMode member or its name ('name', 'priority', ...)

    Returns:
        OrderingStrategy instance

    Raises:
        UnknownOrderingError: If the mode is not recognized
    """
    strategies = {
        OrderingMode.BY_NAME: ByNameOrdering,
        OrderingMode.BY_PRIORITY: ByPriorityOrdering,
    }
    return strategies[parse_ordering_mode(mode)]()
