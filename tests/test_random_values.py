import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_search_tree import Tree
from random_values import random_array


class TestRandomArray(unittest.TestCase):

    def test_length(self):
        self.assertEqual(len(random_array(15, seed=0)), 15)
        self.assertEqual(random_array(0, seed=0), [])

    def test_values_within_inclusive_bounds(self):
        values = random_array(2000, low=1, high=100, seed=1)
        self.assertTrue(all(1 <= v <= 100 for v in values))
        self.assertIn(1, values)
        self.assertIn(100, values)

    def test_returns_plain_ints(self):
        self.assertTrue(all(type(v) is int for v in random_array(10, seed=2)))

    def test_seed_is_reproducible(self):
        self.assertEqual(random_array(20, seed=42), random_array(20, seed=42))

    def test_single_point_range(self):
        self.assertEqual(random_array(5, low=7, high=7), [7] * 5)

    def test_negative_size_raises(self):
        with self.assertRaises(ValueError):
            random_array(-1)

    def test_inverted_bounds_raise(self):
        with self.assertRaises(ValueError):
            random_array(3, low=10, high=1)

    def test_builds_balanced_tree(self):
        values = random_array(50, seed=7)
        tree = Tree(values)
        self.assertEqual(tree.in_order(), sorted(set(values)))
        self.assertTrue(tree.is_balanced())


if __name__ == "__main__":
    unittest.main()
