"""Flatten a document tree into delimiter-separated rows."""

from __future__ import annotations

from dataclasses import dataclass, field

from xmlcsv.tree import TreeNode, postorder_nodes


PATH_SEPARATOR = "/"


@dataclass
class ColumnTable:
    """Column values keyed by element path, in first-seen order."""

    columns: dict[str, list[str]] = field(default_factory=dict)
    row_count: int = 0

    @property
    def titles(self) -> list[str]:
        return [key.split(PATH_SEPARATOR)[-1] for key in self.columns]

    def row(self, index: int) -> list[str]:
        return [values[index] for values in self.columns.values() if len(values) > index]

    def populated_rows(self) -> list[list[str]]:
        """Rows that carry at least one value, in row order."""
        rows = (self.row(index) for index in range(self.row_count))
        return [fields for fields in rows if fields]


def collect_columns(root: TreeNode) -> ColumnTable:
    """Collect leaf values per path in document order.

    Post-order visits every leaf before its parent, so each non-leaf node
    closes one row after its children. A column is resized to the current
    row before each value is appended, so sparse columns stay aligned and a
    repeated leaf within one row keeps only its last value.
    """
    table = ColumnTable()

    for node in postorder_nodes(root):
        if not node.is_leaf:
            table.row_count += 1
            continue
        if not node.name or not node.data:
            continue
        key = PATH_SEPARATOR.join(node.path())
        values = table.columns.setdefault(key, [])
        del values[table.row_count:]
        values.extend([""] * (table.row_count - len(values)))
        values.append(node.data)

    return table


def render_table(table: ColumnTable, delimiter: str = ",", pad_rows: bool = False) -> str:
    """Render a header line plus one line per populated row.

    Rows whose columns ran out early are shorter than the header unless
    ``pad_rows`` is set.
    """
    width = len(table.columns)
    lines = [delimiter.join(table.titles)]

    for fields in table.populated_rows():
        if pad_rows:
            fields.extend([""] * (width - len(fields)))
        lines.append(delimiter.join(fields))

    return "\n".join(lines) + "\n"


def project_table(root: TreeNode, delimiter: str = ",", pad_rows: bool = False) -> str:
    return render_table(collect_columns(root), delimiter=delimiter, pad_rows=pad_rows)
