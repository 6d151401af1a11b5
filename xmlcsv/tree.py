"""Document tree data model shared by both conversion directions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


ROOT_NAME = "root"


@dataclass
class TreeNode:
    name: str
    data: str = ""
    parent: Optional["TreeNode"] = field(default=None, repr=False, compare=False)
    children: list["TreeNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def add_child(self, name: str, data: str = "") -> "TreeNode":
        child = TreeNode(name=name, data=data, parent=self)
        self.children.append(child)
        return child

    def path(self) -> list[str]:
        """Return ancestor names from the document root, excluding the synthetic root."""
        names: list[str] = []
        node: Optional[TreeNode] = self
        while node is not None and node.parent is not None:
            names.append(node.name)
            node = node.parent
        names.reverse()
        return names


def make_root() -> TreeNode:
    return TreeNode(name=ROOT_NAME)


def traverse_all_nodes(root: TreeNode) -> list[TreeNode]:
    """Return all nodes in pre-order, including root."""
    ordered: list[TreeNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        ordered.append(node)
        stack.extend(reversed(node.children))
    return ordered


def postorder_nodes(root: TreeNode) -> list[TreeNode]:
    """Return tree nodes in post-order, including root as the last element."""
    ordered: list[TreeNode] = []

    def visit(node: TreeNode) -> None:
        for child in node.children:
            visit(child)
        ordered.append(node)

    visit(root)
    return ordered


def count_nodes(root: TreeNode) -> tuple[int, int]:
    """Return (node_count, leaf_count) excluding the synthetic root."""
    nodes = [node for node in traverse_all_nodes(root) if node is not root]
    return len(nodes), sum(1 for node in nodes if node.is_leaf)
