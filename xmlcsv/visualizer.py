"""Tree rendering and serialization utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from xmlcsv.tree import TreeNode, count_nodes


def _data_preview(data: str, max_chars: int) -> str:
    return " ".join(data.split())[:max_chars]


def _node_to_dict(node: TreeNode) -> dict[str, Any]:
    return {
        "name": node.name,
        "data": node.data,
        "path": "/".join(node.path()),
        "is_leaf": node.is_leaf,
        "children": [_node_to_dict(child) for child in node.children],
    }


def tree_to_dict(root: TreeNode) -> dict[str, Any]:
    """Serialize a parsed tree into a JSON-compatible dictionary."""
    node_count, leaf_count = count_nodes(root)
    return {
        "node_count": node_count,
        "leaf_count": leaf_count,
        "tree": _node_to_dict(root),
    }


def export_tree_json(root: TreeNode, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(tree_to_dict(root), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def print_tree(root: TreeNode, title: str = "document", data_preview_chars: int = 40) -> None:
    """Print a readable ASCII tree with leaf markers and data previews."""
    node_count, leaf_count = count_nodes(root)
    print(f"Document Tree: {title} ({node_count} nodes, {leaf_count} leaves)")
    print("=" * 60)

    def print_node(node: TreeNode, prefix: str, is_last: bool) -> None:
        connector = "`-- " if is_last else "|-- "
        leaf_mark = " <- LEAF" if node.is_leaf else ""
        preview = _data_preview(node.data, data_preview_chars)
        data_text = f' "{preview}"' if preview else ""
        print(f"{prefix}{connector}<{node.name}>{data_text}{leaf_mark}")

        child_prefix = prefix + ("    " if is_last else "|   ")
        for index, child in enumerate(node.children):
            print_node(child, child_prefix, index == len(node.children) - 1)

    for index, child in enumerate(root.children):
        print_node(child, "", index == len(root.children) - 1)
