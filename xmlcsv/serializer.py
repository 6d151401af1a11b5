"""Turn a document tree back into indented markup."""

from __future__ import annotations

from xmlcsv.terms import ClosingTag, OpeningTag, Term, Text, render_term
from xmlcsv.tree import TreeNode


XML_DECLARATION = '<?xml version="1.0"?>\n'
DEFAULT_INDENT = "  "


def _serialize_node(node: TreeNode, terms: list[Term], depth: int, indent: str) -> None:
    padding = indent * depth
    terms.append(Text(padding))
    terms.append(OpeningTag(node.name))
    if node.data:
        terms.append(Text(node.data))

    if node.children:
        terms.append(Text("\n"))
        for child in node.children:
            _serialize_node(child, terms, depth + 1, indent)
        terms.append(Text(padding))

    terms.append(ClosingTag(node.name))
    terms.append(Text("\n"))


def serialize_terms(root: TreeNode, indent: str = DEFAULT_INDENT) -> list[Term]:
    """Emit terms for the first top-level element under the synthetic root.

    Additional top-level siblings are not emitted.
    """
    if not root.children:
        raise ValueError("Invalid tree: synthetic root has no top-level element.")

    terms: list[Term] = []
    _serialize_node(root.children[0], terms, 0, indent)
    return terms


def render_markup(terms: list[Term], declaration: str = XML_DECLARATION) -> str:
    return declaration + "".join(render_term(term) for term in terms)


def serialize_markup(root: TreeNode, indent: str = DEFAULT_INDENT) -> str:
    return render_markup(serialize_terms(root, indent=indent))
