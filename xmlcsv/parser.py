"""Stack-based construction of a document tree from lexed terms."""

from __future__ import annotations

import logging
from typing import Iterable

from xmlcsv.errors import TreeError
from xmlcsv.lexer import lex_markup
from xmlcsv.terms import ClosingTag, NoTerm, OpeningTag, Term, Text
from xmlcsv.tree import TreeNode, make_root


LOGGER = logging.getLogger(__name__)


def parse_terms(terms: Iterable[Term], strict: bool = False) -> TreeNode:
    """Build a tree under a synthetic root from an ordered term sequence.

    Closing tags must match the innermost open tag exactly; there is no
    recovery. Tags still open at the end are accepted unless ``strict``.
    """
    root = make_root()
    stack: list[TreeNode] = [root]

    for term in terms:
        top = stack[-1]
        if isinstance(term, OpeningTag):
            stack.append(top.add_child(term.name))
        elif isinstance(term, ClosingTag):
            if len(stack) == 1:
                raise TreeError(f"unexpected closing tag `{term.name}`: no open tag")
            if term.name != top.name:
                raise TreeError(
                    f"unexpected closing tag: found `{term.name}`, expected `{top.name}`"
                )
            stack.pop()
        elif isinstance(term, Text):
            top.data += term.content
        elif isinstance(term, NoTerm):
            continue
        else:
            raise TypeError(f"Unknown term type: {type(term).__name__}")

    if len(stack) > 1:
        unclosed = ", ".join(f"`{node.name}`" for node in stack[1:])
        if strict:
            raise TreeError(f"unclosed tag: {unclosed}")
        LOGGER.warning("Input ended with unclosed tags: %s", unclosed)

    return root


def parse_markup(text: str, strict: bool = False) -> TreeNode:
    """Lex and parse markup text into a tree."""
    return parse_terms(lex_markup(text), strict=strict)
