import sys
import os
import io
import contextlib
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ordered_tree import OrderedTree
from tree_render import print_levels, print_tree


class TestTreeRender(unittest.TestCase):

    def setUp(self):
        self.tree = OrderedTree([10, 5, 15, 4, 6, 20, 7, 14])
        self.out = io.StringIO()

    def test_print_tree_sorted(self):
        print_tree(self.tree, file=self.out)
        self.assertEqual(self.out.getvalue(), "4\n5\n6\n7\n10\n14\n15\n20\n")

    def test_print_empty_tree(self):
        print_tree(OrderedTree(), file=self.out)
        self.assertEqual(self.out.getvalue(), "Empty tree\n")

    def test_print_levels(self):
        print_levels(self.tree, file=self.out)
        self.assertEqual(self.out.getvalue(), "10\n5 15\n4 6 14 20\n7\n")

    def test_print_levels_empty_tree(self):
        print_levels(OrderedTree(), file=self.out)
        self.assertEqual(self.out.getvalue(), "")

    def test_print_after_rotation(self):
        self.tree.rotate_left(10)
        print_levels(self.tree, file=self.out)
        self.assertEqual(self.out.getvalue().splitlines()[:2], ["15", "10 20"])

    def test_defaults_to_stdout(self):
        with contextlib.redirect_stdout(self.out):
            print_tree(self.tree)
            print_levels(OrderedTree([2, 1, 3]))
            print_tree(OrderedTree())
        self.assertEqual(
            self.out.getvalue(),
            "4\n5\n6\n7\n10\n14\n15\n20\n2\n1 3\nEmpty tree\n",
        )

    def test_render_leaves_tree_untouched(self):
        before = self.tree.copy()
        print_tree(self.tree, file=self.out)
        print_levels(self.tree, file=self.out)
        self.assertTrue(self.tree.equals(before))


if __name__ == "__main__":
    unittest.main()
