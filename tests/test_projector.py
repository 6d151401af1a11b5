import unittest

from xmlcsv.parser import parse_markup
from xmlcsv.projector import collect_columns, project_table, render_table
from xmlcsv.tree import make_root


RECORDS = """<?xml version="1.0"?>
<list>
  <a>
    <x>1</x>
    <y>2</y>
  </a>
  <a>
    <x>3</x>
    <y>4</y>
  </a>
</list>
"""


class CollectColumnsTests(unittest.TestCase):
    def test_keys_are_full_paths_in_first_seen_order(self) -> None:
        table = collect_columns(parse_markup(RECORDS))

        self.assertEqual(list(table.columns), ["list/a/x", "list/a/y"])
        self.assertEqual(table.columns["list/a/x"], ["1", "3"])
        self.assertEqual(table.titles, ["x", "y"])

    def test_row_counter_counts_every_non_leaf(self) -> None:
        table = collect_columns(parse_markup(RECORDS))
        # two records, the list element and the synthetic root
        self.assertEqual(table.row_count, 4)
        self.assertEqual(table.row(1), ["3", "4"])
        self.assertEqual(table.row(2), [])

    def test_sparse_column_is_padded_to_current_row(self) -> None:
        table = collect_columns(parse_markup("<r><a><x>1</x></a><a><y>2</y></a></r>"))
        self.assertEqual(table.columns["r/a/y"], ["", "2"])

    def test_repeated_leaf_in_one_row_keeps_last_value(self) -> None:
        table = collect_columns(parse_markup("<a><x>1</x><x>2</x></a>"))
        self.assertEqual(table.columns["a/x"], ["2"])

    def test_populated_rows_skip_rows_closed_by_containers(self) -> None:
        table = collect_columns(parse_markup(RECORDS))
        self.assertEqual(table.populated_rows(), [["1", "2"], ["3", "4"]])


class ProjectTableTests(unittest.TestCase):
    def test_sibling_groups_become_rows(self) -> None:
        self.assertEqual(project_table(parse_markup(RECORDS)), "x,y\n1,2\n3,4\n")

    def test_column_order_follows_document(self) -> None:
        output = project_table(parse_markup("<r><a><z>1</z><b>2</b></a></r>"))
        self.assertEqual(output, "z,b\n1,2\n")

    def test_empty_leaves_do_not_create_columns(self) -> None:
        output = project_table(parse_markup("<a><x></x><y>v</y></a>"))
        self.assertEqual(output, "y\nv\n")

    def test_ragged_rows_are_kept_by_default(self) -> None:
        root = parse_markup("<r><a><x>1</x></a><a><y>2</y></a></r>")
        self.assertEqual(project_table(root), "x,y\n1,\n2\n")

    def test_pad_rows_fills_to_header_width(self) -> None:
        root = parse_markup("<r><a><x>1</x></a><a><y>2</y></a></r>")
        self.assertEqual(project_table(root, pad_rows=True), "x,y\n1,\n2,\n")

    def test_custom_delimiter(self) -> None:
        self.assertEqual(project_table(parse_markup(RECORDS), delimiter=";"), "x;y\n1;2\n3;4\n")

    def test_render_table_matches_project_table(self) -> None:
        root = parse_markup("<r><a><x>1</x></a><a><y>2</y></a></r>")
        table = collect_columns(root)

        self.assertEqual(render_table(table, pad_rows=True), project_table(root, pad_rows=True))
        self.assertEqual(render_table(table, delimiter="|"), "x|y\n1|\n2\n")

    def test_empty_tree_yields_blank_header(self) -> None:
        self.assertEqual(project_table(make_root()), "\n")


if __name__ == "__main__":
    unittest.main()
