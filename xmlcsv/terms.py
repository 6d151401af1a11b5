"""Lexical and formatting units shared by the lexer and serializer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class OpeningTag:
    name: str


@dataclass(frozen=True, slots=True)
class ClosingTag:
    name: str


@dataclass(frozen=True, slots=True)
class Text:
    content: str


@dataclass(frozen=True, slots=True)
class NoTerm:
    pass


Term = Union[OpeningTag, ClosingTag, Text, NoTerm]

NO_TERM = NoTerm()


def render_term(term: Term) -> str:
    if isinstance(term, OpeningTag):
        return f"<{term.name}>"
    if isinstance(term, ClosingTag):
        return f"</{term.name}>"
    if isinstance(term, Text):
        return term.content
    if isinstance(term, NoTerm):
        return ""
    raise TypeError(f"Unknown term type: {type(term).__name__}")
