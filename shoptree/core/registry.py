"""Exact-key item registry for ShopTree.

The registry is the source of truth for which items exist. It gives O(1)
existence checks by normalized name and supplies the item set whenever
the tree is rebuilt under a new ordering.
"""

from typing import Dict, Iterator, List, Optional

from .entity import Item, normalize_key


class ItemRegistry:
    """Mapping from normalized item key to Item.

    ``put`` never overwrites: an existing key is reported back to the
    caller, who then skips the tree insert as well. This keeps the
    registry and the tree in agreement about which items exist.
    """

    def __init__(self):
        self._items: Dict[str, Item] = {}

    def put(self, key: str, item: Item) -> bool:
        """Register ``item`` under ``key``.

        Returns:
            True if stored, False if the key was already present
        """
        if key in self._items:
            return False
        self._items[key] = item
        return True

    def add(self, item: Item) -> bool:
        """Register ``item`` under its own key."""
        return self.put(item.key, item)

    def remove(self, key: str) -> Optional[Item]:
        """Drop the mapping for ``key`` and return the removed item."""
        return self._items.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self._items

    def get(self, key: str) -> Optional[Item]:
        return self._items.get(key)

    def lookup(self, name: str) -> Optional[Item]:
        """Find an item by raw, un-normalized name."""
        return self._items.get(normalize_key(name))

    def keys(self) -> List[str]:
        return list(self._items)

    def values(self) -> List[Item]:
        """All items, in registry iteration order."""
        return list(self._items.values())

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items.values()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._items)})"
