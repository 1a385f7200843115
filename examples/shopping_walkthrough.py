#!/usr/bin/env python3
"""
Walkthrough of a ShopTree shopping list.

This example demonstrates:
- Adding, searching and deleting items
- Switching between name and priority ordering
- The three traversal orders and the diagnostic tree dump
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from shoptree import ShoppingList, TraversalOrder, format_items


def show(shopping: ShoppingList, order: TraversalOrder) -> None:
    """Print one traversal of the list."""
    print(f"\n{order.name} ({shopping.mode.value} ordering):")
    for line in format_items(shopping.traverse(order), shopping.config):
        print(f"  {line}")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    shopping = ShoppingList()
    for name, priority in [("Milk", 2), ("Bread", 1), ("Eggs", 2), ("milk", 1), ("   ", 1)]:
        print(shopping.add(name, priority))

    for order in TraversalOrder:
        show(shopping, order)

    print("\nTree:")
    print(shopping.dump_text())

    print()
    print(shopping.change_ordering("priority"))
    show(shopping, TraversalOrder.IN_ORDER)

    print()
    print(shopping.delete("Bread"))
    print(shopping.search("Bread"))
    print(shopping.add("Bread", 3))
    show(shopping, TraversalOrder.IN_ORDER)

    print("\nTree:")
    print(shopping.dump_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())
