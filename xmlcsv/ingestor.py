"""Rebuild a synthetic document tree from delimiter-separated rows."""

from __future__ import annotations

import logging

from xmlcsv.errors import TableFormatError
from xmlcsv.tree import TreeNode, make_root


LOGGER = logging.getLogger(__name__)

INNER_ROOT_NAME = "root2"
ELEMENT_NAME = "element"


def split_table(text: str, delimiter: str = ",") -> tuple[list[str], list[list[str]]]:
    """Return (column titles, data rows). Fields are split verbatim; no quoting."""
    lines = [line.rstrip("\r") for line in text.strip().split("\n")]
    if len(lines) < 2:
        raise TableFormatError("no entries in CSV file")

    columns = lines[0].split(delimiter)
    rows = [line.split(delimiter) for line in lines[1:]]
    return columns, rows


def ingest_table(
    text: str,
    delimiter: str = ",",
    inner_root_name: str = INNER_ROOT_NAME,
    element_name: str = ELEMENT_NAME,
) -> TreeNode:
    """Build root -> inner root -> one element per row -> one leaf per column."""
    columns, rows = split_table(text, delimiter)
    root = make_root()
    inner_root = root.add_child(inner_root_name)

    for row_index, row in enumerate(rows):
        if len(row) > len(columns):
            LOGGER.debug("Row %d has %d extra fields; ignoring them", row_index, len(row) - len(columns))
        element = inner_root.add_child(element_name)
        for key_index, column in enumerate(columns):
            if key_index >= len(row):
                raise TableFormatError(f"expected key `{key_index}` for row `{row_index}`")
            element.add_child(column, row[key_index])

    return root
