"""Exception types raised by the conversion pipeline."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for lex, parse and ingest failures."""


class LexError(ConversionError):
    def __init__(self, character: str, line: int, column: int) -> None:
        super().__init__(f"unexpected '{character}' at line {line}, column {column}")
        self.character = character
        self.line = line
        self.column = column


class TreeError(ConversionError):
    """Raised when the term sequence does not describe a well-nested tree."""


class TableFormatError(ConversionError):
    """Raised when tabular input is missing rows or fields."""
