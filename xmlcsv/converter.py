"""File-level export (markup -> table) and import (table -> markup) pipelines."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
import sys
from typing import Any, Protocol

from xmlcsv.config import ConverterConfig
from xmlcsv.errors import ConversionError
from xmlcsv.ingestor import ingest_table
from xmlcsv.lexer import lex_markup
from xmlcsv.parser import parse_terms
from xmlcsv.projector import collect_columns, project_table, render_table
from xmlcsv.serializer import render_markup, serialize_terms
from xmlcsv.tree import TreeNode


LOGGER = logging.getLogger(__name__)

EXPORT = "export"
IMPORT = "import"


class Notifier(Protocol):
    def info(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        ...


class LoggingNotifier:
    def info(self, message: str) -> None:
        LOGGER.info(message)

    def error(self, message: str) -> None:
        LOGGER.error(message)


class ConsoleNotifier:
    """Prints user-facing status lines; errors go to stderr."""

    def info(self, message: str) -> None:
        print(f"Info: {message}")

    def error(self, message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)


@dataclass
class ConversionReport:
    direction: str
    input_path: Path
    output_path: Path
    stages: list[str] = field(default_factory=list)
    output_text: str = ""
    written: bool = False
    write_error: str | None = None
    row_count: int = 0
    column_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "direction": self.direction,
            "input_path": str(self.input_path),
            "output_path": str(self.output_path),
            "stages": list(self.stages),
            "written": self.written,
            "write_error": self.write_error,
            "row_count": self.row_count,
            "column_count": self.column_count,
        }


def markup_to_table(text: str, config: ConverterConfig | None = None) -> str:
    config = config or ConverterConfig()
    root = parse_terms(lex_markup(text), strict=config.strict)
    return project_table(root, delimiter=config.delimiter, pad_rows=config.pad_rows)


def table_to_markup(text: str, config: ConverterConfig | None = None) -> str:
    config = config or ConverterConfig()
    root = ingest_table(
        text,
        delimiter=config.delimiter,
        inner_root_name=config.inner_root_name,
        element_name=config.element_name,
    )
    return render_markup(serialize_terms(root, indent=config.indent))


def _stage(report: ConversionReport, notifier: Notifier, message: str) -> None:
    report.stages.append(message)
    notifier.info(message)


def _read_input(path: Path, kind: str, config: ConverterConfig, notifier: Notifier) -> str:
    try:
        return path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        notifier.error(f"Could not open {kind} file {path}: {exc}")
        raise


def _write_output(
    report: ConversionReport,
    kind: str,
    config: ConverterConfig,
    notifier: Notifier,
) -> None:
    try:
        report.output_path.write_text(report.output_text, encoding=config.encoding)
    except (OSError, UnicodeEncodeError) as exc:
        report.write_error = str(exc)
        notifier.error(f"Could not write to {kind} file: {exc}")
        return
    report.written = True
    _stage(report, notifier, f"{kind} File written successfully")


def _count_import_shape(root: TreeNode) -> tuple[int, int]:
    elements = root.children[0].children
    if not elements:
        return 0, 0
    return len(elements), len(elements[0].children)


def export_markup_to_table(
    input_path: Path,
    output_path: Path,
    config: ConverterConfig | None = None,
    notifier: Notifier | None = None,
) -> ConversionReport:
    """Read markup, flatten it to a table and write the result.

    Read and conversion failures are notified and re-raised. A write failure
    is notified and recorded on the report; the converted text is kept.
    """
    config = config or ConverterConfig()
    notifier = notifier or LoggingNotifier()
    report = ConversionReport(direction=EXPORT, input_path=input_path, output_path=output_path)

    text = _read_input(input_path, "XML", config, notifier)
    _stage(report, notifier, "File read successfully")

    try:
        terms = lex_markup(text)
        _stage(report, notifier, "Completed lexical analysis")
        root = parse_terms(terms, strict=config.strict)
        _stage(report, notifier, "Completed parsing")
    except ConversionError as exc:
        notifier.error(str(exc))
        raise

    table = collect_columns(root)
    report.column_count = len(table.columns)
    report.row_count = len(table.populated_rows())
    report.output_text = render_table(table, delimiter=config.delimiter, pad_rows=config.pad_rows)
    _stage(report, notifier, "Completed CSV formatting")
    LOGGER.debug("Projected %d columns over %d rows", report.column_count, report.row_count)

    _write_output(report, "CSV", config, notifier)
    return report


def import_table_to_markup(
    input_path: Path,
    output_path: Path,
    config: ConverterConfig | None = None,
    notifier: Notifier | None = None,
) -> ConversionReport:
    """Read a table, rebuild a tree from its rows and write it as markup."""
    config = config or ConverterConfig()
    notifier = notifier or LoggingNotifier()
    report = ConversionReport(direction=IMPORT, input_path=input_path, output_path=output_path)

    text = _read_input(input_path, "CSV", config, notifier)
    _stage(report, notifier, "File read successfully")

    try:
        root = ingest_table(
            text,
            delimiter=config.delimiter,
            inner_root_name=config.inner_root_name,
            element_name=config.element_name,
        )
    except ConversionError as exc:
        notifier.error(f"Could not parse CSV file: {exc}")
        raise
    report.row_count, report.column_count = _count_import_shape(root)

    terms = serialize_terms(root, indent=config.indent)
    _stage(report, notifier, "Completed XML reverse parsing")
    report.output_text = render_markup(terms)
    _stage(report, notifier, "Completed XML formatting")

    _write_output(report, "XML", config, notifier)
    return report
