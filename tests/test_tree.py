import unittest

from xmlcsv.tree import TreeNode, count_nodes, make_root, postorder_nodes, traverse_all_nodes


def _sample_tree() -> TreeNode:
    root = make_root()
    library = root.add_child("library")
    book = library.add_child("book")
    book.add_child("title", "Dune")
    book.add_child("year", "1965")
    library.add_child("owner", "Ann")
    return root


class TreeNodeTests(unittest.TestCase):
    def test_path_excludes_synthetic_root(self) -> None:
        root = _sample_tree()
        title = root.children[0].children[0].children[0]

        self.assertEqual(title.path(), ["library", "book", "title"])
        self.assertEqual(root.path(), [])

    def test_add_child_sets_parent_and_order(self) -> None:
        root = make_root()
        first = root.add_child("a")
        second = root.add_child("b", "data")

        self.assertIs(first.parent, root)
        self.assertEqual([node.name for node in root.children], ["a", "b"])
        self.assertEqual(second.data, "data")
        self.assertTrue(second.is_leaf)
        self.assertFalse(root.is_leaf)

    def test_equality_ignores_parent(self) -> None:
        detached = TreeNode(name="title", data="Dune")
        attached = make_root().add_child("title", "Dune")
        self.assertEqual(detached, attached)

    def test_traversal_orders(self) -> None:
        root = _sample_tree()

        self.assertEqual(
            [node.name for node in traverse_all_nodes(root)],
            ["root", "library", "book", "title", "year", "owner"],
        )
        self.assertEqual(
            [node.name for node in postorder_nodes(root)],
            ["title", "year", "book", "owner", "library", "root"],
        )

    def test_count_nodes_excludes_root(self) -> None:
        self.assertEqual(count_nodes(_sample_tree()), (5, 3))


if __name__ == "__main__":
    unittest.main()
