import unittest

from ..beachline import BeachLine, BeachLineError
from ..site import Site


class TestBeachLine(unittest.TestCase):

    def setUp(self):
        self.a = Site(50, 0, 0)
        self.b = Site(20, 10, 1)
        self.c = Site(80, 20, 2)
        self.bl = BeachLine()
        self.root = self.bl.set_root_arc(self.a)

    def sites(self):
        return [arc.site for arc in self.bl.arcs()]

    def collect(self):
        leaves, internals = [], []

        def walk(index):
            node = self.bl.node(index)
            if node.is_leaf():
                leaves.append(node)
                return
            internals.append(node)
            for child in (node.left, node.right):
                self.assertEqual(self.bl.node(child).parent, index)
                walk(child)

        walk(self.bl.root)
        return leaves, internals

    def test_single_arc(self):
        self.assertFalse(self.bl.is_empty())
        self.assertEqual(self.sites(), [self.a])
        self.assertIs(self.bl.find_arc_above(self.b, 10), self.root)
        self.assertIsNone(self.bl.prev_arc(self.root))
        self.assertIsNone(self.bl.next_arc(self.root))

    def test_insert_site_splits_into_three_arcs(self):
        old_index = self.root.index
        left, new, right = self.bl.insert_site(self.root, self.b)

        self.assertEqual(self.sites(), [self.a, self.b, self.a])
        self.assertIs(new.site, self.b)
        self.assertIsNot(left, right)

        # 被替换的叶子变成 old|new 断点
        old = self.bl.node(old_index)
        self.assertFalse(old.is_leaf())
        self.assertIsNone(old.site)
        self.assertEqual(old.left, left.index)
        self.assertIs(self.bl.first_arc(self.bl.node(old.right)), new)

        self.assertIs(self.bl.prev_arc(new), left)
        self.assertIs(self.bl.next_arc(new), right)
        self.assertIsNone(self.bl.prev_arc(left))
        self.assertIsNone(self.bl.next_arc(right))

        leaves, internals = self.collect()
        self.assertEqual(len(leaves), 3)
        self.assertEqual(len(internals), 2)

    def test_split_copies_inherit_outer_edges(self):
        self.root.left_edges.append("west")
        self.root.right_edges.append("east")
        left, new, right = self.bl.insert_site(self.root, self.b)
        self.assertEqual(left.left_edges, ["west"])
        self.assertEqual(left.right_edges, [])
        self.assertEqual(right.right_edges, ["east"])
        self.assertEqual(right.left_edges, [])
        self.assertEqual(new.left_edges, [])

    def test_find_arc_above_uses_breakpoints(self):
        left, new, right = self.bl.insert_site(self.root, self.b)
        sweep = 20
        bps = self.bl.breakpoints(sweep)
        self.assertEqual(len(bps), 2)
        self.assertLess(bps[0], bps[1])

        self.assertIs(self.bl.find_arc_above(Site(int(bps[0]) - 5, sweep, 9), sweep), left)
        self.assertIs(self.bl.find_arc_above(Site(20, sweep, 9), sweep), new)
        self.assertIs(self.bl.find_arc_above(self.c, sweep), right)

    def test_first_and_last_arc(self):
        left, new, right = self.bl.insert_site(self.root, self.b)
        _, c_arc, right2 = self.bl.insert_site(right, self.c)
        root = self.bl.root_node()
        self.assertIs(self.bl.first_arc(root), left)
        self.assertIs(self.bl.last_arc(root), right2)
        self.assertEqual(self.sites(), [self.a, self.b, self.a, self.c, self.a])
        self.assertEqual(self.bl.arc_count(), 5)
        leaves, internals = self.collect()
        self.assertEqual(len(leaves), 2 * 2 + 1)
        self.assertEqual(len(internals), len(leaves) - 1)

    def test_remove_arc_promotes_sibling(self):
        left, new, right = self.bl.insert_site(self.root, self.b)
        self.bl.remove_arc(new)
        self.assertEqual(self.sites(), [self.a, self.a])
        self.assertIs(self.bl.next_arc(left), right)
        self.assertIs(self.bl.prev_arc(right), left)
        leaves, internals = self.collect()
        self.assertEqual(len(leaves), 2)
        self.assertEqual(len(internals), 1)

    def test_remove_arc_next_to_root(self):
        left, new, right = self.bl.insert_site(self.root, self.b)
        self.bl.remove_arc(left)
        # 根的左子树被移除后，右子树成为新根
        root = self.bl.root_node()
        self.assertIsNone(root.parent)
        self.assertEqual(self.sites(), [self.b, self.a])

    def test_remove_last_arc_empties_tree(self):
        self.bl.remove_arc(self.root)
        self.assertTrue(self.bl.is_empty())
        self.assertEqual(self.sites(), [])

    def test_insert_beside_on_first_row(self):
        d = Site(90, 0, 3)
        new = self.bl.insert_beside(self.root, d)
        self.assertEqual(self.sites(), [self.a, d])
        self.assertIs(self.bl.next_arc(self.root), new)
        e = Site(10, 0, 4)
        first = self.bl.insert_beside(self.root, e)
        self.assertEqual(self.sites(), [e, self.a, d])
        self.assertIs(self.bl.prev_arc(self.root), first)
        self.assertEqual(self.bl.breakpoints(0), [30.0, 70.0])

    def test_repr_lists_arcs_in_order(self):
        self.bl.insert_site(self.root, self.b)
        text = repr(self.bl)
        self.assertIn("<root>", text)
        self.assertLess(text.index("Site#0"), text.index("Site#1"))

    def test_corrupted_tree_is_fatal(self):
        self.bl.insert_site(self.root, self.b)
        self.bl.root_node().right = None
        with self.assertRaises(BeachLineError):
            self.bl.find_arc_above(self.c, 20)

    def test_empty_tree_has_no_arc_above(self):
        with self.assertRaises(BeachLineError):
            BeachLine().find_arc_above(self.a, 0)


if __name__ == "__main__":
    unittest.main()
