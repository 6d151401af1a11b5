"""Bidirectional conversion between tag/text markup and delimiter-separated tables."""

from xmlcsv.config import ConverterConfig, load_converter_config
from xmlcsv.converter import (
    ConsoleNotifier,
    ConversionReport,
    LoggingNotifier,
    export_markup_to_table,
    import_table_to_markup,
    markup_to_table,
    table_to_markup,
)
from xmlcsv.errors import ConversionError, LexError, TableFormatError, TreeError
from xmlcsv.ingestor import ingest_table
from xmlcsv.lexer import lex_markup
from xmlcsv.parser import parse_markup, parse_terms
from xmlcsv.projector import ColumnTable, collect_columns, project_table
from xmlcsv.serializer import render_markup, serialize_markup, serialize_terms
from xmlcsv.terms import ClosingTag, NoTerm, OpeningTag, Term, Text
from xmlcsv.tree import TreeNode, postorder_nodes, traverse_all_nodes
from xmlcsv.visualizer import export_tree_json, print_tree, tree_to_dict

__all__ = [
    "ClosingTag",
    "ColumnTable",
    "ConsoleNotifier",
    "ConversionError",
    "ConversionReport",
    "ConverterConfig",
    "LexError",
    "LoggingNotifier",
    "NoTerm",
    "OpeningTag",
    "TableFormatError",
    "Term",
    "Text",
    "TreeError",
    "TreeNode",
    "collect_columns",
    "export_markup_to_table",
    "export_tree_json",
    "import_table_to_markup",
    "ingest_table",
    "lex_markup",
    "load_converter_config",
    "markup_to_table",
    "parse_markup",
    "parse_terms",
    "postorder_nodes",
    "print_tree",
    "project_table",
    "render_markup",
    "serialize_markup",
    "serialize_terms",
    "table_to_markup",
    "traverse_all_nodes",
    "tree_to_dict",
]
