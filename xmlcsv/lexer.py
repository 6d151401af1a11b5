"""Character-level lexer for the tag/text markup subset."""

from __future__ import annotations

from typing import Optional

from xmlcsv.errors import LexError
from xmlcsv.terms import ClosingTag, OpeningTag, Term, Text


TermKind = Optional[type]


def _flush(terms: list[Term], kind: TermKind, buffer: list[str]) -> TermKind:
    """Emit the trimmed accumulator if it carries anything, then reset it."""
    value = "".join(buffer).strip()
    buffer.clear()
    if value and kind is not None:
        terms.append(kind(value))
    return None


def lex_markup(text: str) -> list[Term]:
    """Convert markup text into an ordered list of terms.

    Processing-instruction lines (anything from a ``?`` to the end of its line)
    are skipped. Raises ``LexError`` on the first malformed character; no
    partial result is returned. An accumulator still open at end of input is
    dropped.
    """
    terms: list[Term] = []
    kind: TermKind = None
    buffer: list[str] = []
    previous_char = ""
    skip_until_next_line = False
    line, column = 1, 0

    for char in text:
        if char == "\n":
            line, column = line + 1, 0
        else:
            column += 1

        if char == "\n" and skip_until_next_line:
            skip_until_next_line = False
            previous_char = ""
            kind = None
            buffer.clear()
        if skip_until_next_line:
            continue

        if char == "<":
            if kind is Text:
                kind = _flush(terms, kind, buffer)
            if kind is not None:
                raise LexError(char, line, column)
            kind = OpeningTag
        elif char == ">":
            if kind is not OpeningTag and kind is not ClosingTag:
                raise LexError(char, line, column)
            kind = _flush(terms, kind, buffer)
        elif char == "/" and kind is not Text:
            if kind is not OpeningTag or previous_char != "<":
                raise LexError(char, line, column)
            # The name collected so far (always empty here) carries over.
            kind = ClosingTag
        elif char == "?":
            skip_until_next_line = True
        else:
            if kind is None:
                kind = Text
            buffer.append(char)

        previous_char = char

    return terms
