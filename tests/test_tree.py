"""Unit tests for the BinarySearchTree engine."""

import unittest
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shoptree import (
    BinarySearchTree,
    ByNameOrdering,
    ByPriorityOrdering,
    Item,
    rebuild,
)
from shoptree.testing import TreeShapeHelper


def names(items):
    return [item.name for item in items]


class TestInsert(unittest.TestCase):
    """Insertion places new leaves and refuses EQUAL items."""

    def setUp(self):
        self.tree = BinarySearchTree(ByNameOrdering())

    def test_first_insert_becomes_root(self):
        milk = Item("Milk", 2)
        self.assertTrue(self.tree.insert(milk))
        self.assertIs(self.tree.root.item, milk)
        self.assertTrue(self.tree.root.is_leaf())
        self.assertEqual(len(self.tree), 1)

    def test_smaller_left_larger_right(self):
        self.tree.insert(Item("Milk", 2))
        self.tree.insert(Item("Bread", 1))
        self.tree.insert(Item("Tea", 3))
        self.assertEqual(self.tree.root.left.item.name, "Bread")
        self.assertEqual(self.tree.root.right.item.name, "Tea")

    def test_equal_item_is_refused(self):
        milk = Item("Milk", 2)
        self.assertTrue(self.tree.insert(milk))
        self.assertFalse(self.tree.insert(milk))
        self.assertEqual(len(self.tree), 1)
        self.assertEqual(self.tree.in_order(), [milk])

    def test_equal_by_all_fields_is_refused(self):
        """Distinct objects that compare EQUAL are still duplicates."""
        first = Item("Milk", 2, created_at=1)
        second = Item("MILK", 2, created_at=1)
        self.assertTrue(self.tree.insert(first))
        self.assertFalse(self.tree.insert(second))
        self.assertEqual(self.tree.in_order(), [first])


class TestContainsAndFind(unittest.TestCase):

    def setUp(self):
        self.tree = BinarySearchTree(ByNameOrdering())
        self.milk = Item("Milk", 2)
        self.bread = Item("Bread", 1)
        self.tree.insert(self.milk)
        self.tree.insert(self.bread)

    def test_contains(self):
        self.assertTrue(self.tree.contains(self.milk))
        self.assertTrue(self.bread in self.tree)
        self.assertFalse(self.tree.contains(Item("Eggs", 2)))
        self.assertFalse("Milk" in self.tree)

    def test_find_returns_stored_item(self):
        self.assertIs(self.tree.find(self.bread), self.bread)
        self.assertIsNone(self.tree.find(Item("Eggs")))

    def test_min_and_max(self):
        self.assertIs(self.tree.min_item(), self.bread)
        self.assertIs(self.tree.max_item(), self.milk)
        empty = BinarySearchTree(ByNameOrdering())
        self.assertIsNone(empty.min_item())
        self.assertIsNone(empty.max_item())


class TestDelete(unittest.TestCase):
    """The three deletion cases, on the tree

            M
          /   \\
         D     R
        / \\   / \\
       B   F P   T
    """

    def setUp(self):
        self.tree = BinarySearchTree(ByNameOrdering())
        self.items = {name: Item(name, 2) for name in "MDRBFPT"}
        for name in "MDRBFPT":
            self.tree.insert(self.items[name])

    def test_delete_leaf(self):
        self.assertTrue(self.tree.delete(self.items["B"]))
        self.assertIsNone(self.tree.root.left.left)
        self.assertEqual(names(self.tree.in_order()), list("DFMPRT"))
        self.assertEqual(len(self.tree), 6)

    def test_delete_node_with_one_child(self):
        self.tree.delete(self.items["B"])
        self.tree.delete(self.items["D"])
        # D was left with only F, which takes its place
        self.assertEqual(self.tree.root.left.item.name, "F")
        self.assertEqual(names(self.tree.pre_order()), list("MFRPT"))

    def test_delete_node_with_two_children_uses_successor(self):
        self.tree.delete(self.items["M"])
        # Successor of M is P, the leftmost node of the right subtree
        self.assertEqual(self.tree.root.item.name, "P")
        self.assertEqual(names(self.tree.pre_order()), list("PDBFRT"))
        self.assertIsNone(self.tree.root.right.left)
        self.assertTrue(TreeShapeHelper(self.tree).is_valid())

    def test_delete_successor_with_right_child(self):
        """A successor's own right subtree is reattached to its parent."""
        self.tree.insert(Item("Q", 2))
        self.tree.delete(self.items["M"])
        self.assertEqual(self.tree.root.item.name, "P")
        self.assertEqual(self.tree.root.right.left.item.name, "Q")
        self.assertEqual(names(self.tree.in_order()), list("BDFPQRT"))
        self.assertTrue(TreeShapeHelper(self.tree).is_valid())

    def test_delete_root_until_empty(self):
        for _ in range(7):
            self.assertTrue(self.tree.delete(self.tree.root.item))
            self.assertTrue(TreeShapeHelper(self.tree).is_valid())
        self.assertTrue(self.tree.is_empty())
        self.assertEqual(len(self.tree), 0)

    def test_delete_missing_is_noop(self):
        before = names(self.tree.pre_order())
        self.assertFalse(self.tree.delete(Item("Z", 2)))
        self.assertEqual(names(self.tree.pre_order()), before)
        self.assertEqual(len(self.tree), 7)

    def test_delete_from_empty_tree(self):
        empty = BinarySearchTree(ByNameOrdering())
        self.assertFalse(empty.delete(Item("Milk")))

    def test_round_trip(self):
        item = Item("Kiwi", 1)
        self.tree.insert(item)
        self.assertTrue(self.tree.contains(item))
        self.tree.delete(item)
        self.assertFalse(self.tree.contains(item))


class TestOrderingSwap(unittest.TestCase):
    """set_ordering keeps the shape; rebuild restores the invariant."""

    def setUp(self):
        self.apple = Item("Apple", 3)
        self.banana = Item("Banana", 1)
        self.tree = BinarySearchTree(ByNameOrdering())
        self.tree.insert(self.apple)
        self.tree.insert(self.banana)

    def test_set_ordering_does_not_reshape(self):
        before = self.tree.pre_order()
        self.tree.set_ordering(ByPriorityOrdering())
        self.assertIsInstance(self.tree.ordering, ByPriorityOrdering)
        self.assertEqual(self.tree.pre_order(), before)
        # Banana now belongs before Apple but still sits on the right
        self.assertFalse(TreeShapeHelper(self.tree).is_valid())

    def test_rebuild_restores_order(self):
        rebuilt = rebuild(ByPriorityOrdering(), self.tree.in_order())
        self.assertIsNot(rebuilt, self.tree)
        self.assertEqual(rebuilt.in_order(), [self.banana, self.apple])
        self.assertTrue(TreeShapeHelper(rebuilt).is_valid())
        # The source tree is untouched
        self.assertEqual(self.tree.in_order(), [self.apple, self.banana])

    def test_rebuild_classmethod_empty(self):
        rebuilt = BinarySearchTree.rebuild(ByNameOrdering(), [])
        self.assertTrue(rebuilt.is_empty())
        self.assertEqual(rebuilt.height(), -1)


class TestTextDump(unittest.TestCase):

    def test_to_text(self):
        tree = BinarySearchTree(ByNameOrdering())
        for name, priority in (("Milk", 2), ("Bread", 1), ("Eggs", 2)):
            tree.insert(Item(name, priority))
        self.assertEqual(
            tree.to_text(),
            "- Milk (P2)\n"
            "  - Bread (P1)\n"
            "    - Eggs (P2)",
        )
        self.assertEqual(tree.to_text(indent="\t").splitlines()[2], "\t\t- Eggs (P2)")

    def test_empty_to_text(self):
        self.assertEqual(BinarySearchTree(ByNameOrdering()).to_text(), "")


class TestContainerProtocol(unittest.TestCase):

    def test_iter_len_height_clear(self):
        tree = BinarySearchTree(ByNameOrdering())
        for name in ("b", "a", "c", "d"):
            tree.insert(Item(name))
        self.assertEqual(names(tree), ["a", "b", "c", "d"])
        self.assertEqual(len(tree), 4)
        self.assertEqual(tree.height(), 2)
        self.assertIn("size=4", repr(tree))
        tree.clear()
        self.assertTrue(tree.is_empty())
        self.assertEqual(list(tree), [])


class TestDegenerateTrees(unittest.TestCase):
    """Sorted input produces a chain; nothing may recurse per level."""

    @pytest.mark.slow
    def test_sorted_inserts_build_deep_chain(self):
        count = 2000
        items = [Item(f"item{i:05d}", 2) for i in range(count)]
        tree = rebuild(ByNameOrdering(), items)

        self.assertEqual(tree.height(), count - 1)
        self.assertEqual(tree.in_order(), items)
        self.assertEqual(len(tree.pre_order()), count)
        self.assertEqual(tree.post_order(), list(reversed(items)))
        self.assertEqual(len(tree.to_text().splitlines()), count)
        self.assertTrue(tree.contains(items[-1]))

        self.assertTrue(tree.delete(items[-1]))
        for item in items[:-1]:
            self.assertTrue(tree.delete(item))
        self.assertTrue(tree.is_empty())

    def test_small_chain_shape(self):
        items = [Item(name) for name in "abcde"]
        tree = rebuild(ByNameOrdering(), items)
        shape = TreeShapeHelper(tree)
        self.assertEqual(shape.height(), 4)
        self.assertEqual(shape.leaf_keys(), ["e"])
        self.assertEqual(tree.pre_order(), items)


if __name__ == "__main__":
    unittest.main()
