"""CLI entrypoint for markup/table conversion."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from xmlcsv.config import ConverterConfig, load_converter_config, parse_delimiter
from xmlcsv.converter import (
    EXPORT,
    IMPORT,
    ConsoleNotifier,
    ConversionReport,
    export_markup_to_table,
    import_table_to_markup,
)
from xmlcsv.errors import ConversionError
from xmlcsv.parser import parse_markup
from xmlcsv.visualizer import export_tree_json, print_tree


LOGGER = logging.getLogger(__name__)

DEFAULT_SUFFIXES = {EXPORT: ".csv", IMPORT: ".xml"}


def _build_parser(config: ConverterConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert between XML-style markup and CSV tables.")
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity for progress output.",
    )
    parser.add_argument("--delimiter", default=None, help="Tabular field delimiter (default from config).")
    parser.add_argument("--strict", action="store_true", help="Treat tags left open at end of input as errors.")
    parser.add_argument("--pad-rows", action="store_true", help="Pad short rows to the header width.")
    sub = parser.add_subparsers(dest="command", required=True)

    export_parser = sub.add_parser(EXPORT, help="Convert markup to a table")
    export_parser.add_argument("input", help="Input markup file")
    export_parser.add_argument("output", nargs="?", default=None, help="Output table file. Defaults to <input>.csv")

    import_parser = sub.add_parser(IMPORT, help="Convert a table to markup")
    import_parser.add_argument("input", help="Input table file")
    import_parser.add_argument("output", nargs="?", default=None, help="Output markup file. Defaults to <input>.xml")

    inspect_parser = sub.add_parser("inspect", help="Print the parsed tree of a markup file")
    inspect_parser.add_argument("input", help="Input markup file")
    inspect_parser.add_argument("--json", type=Path, default=None, help="Also export the tree as JSON")
    return parser


def _configure_logging(level: str) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="[%(levelname)s] %(message)s",
        stream=sys.stdout,
        force=True,
    )


def _apply_overrides(config: ConverterConfig, args: argparse.Namespace) -> None:
    if args.delimiter is not None:
        config.delimiter = parse_delimiter(args.delimiter)
    if args.strict:
        config.strict = True
    if args.pad_rows:
        config.pad_rows = True


def _print_report(report: ConversionReport) -> None:
    print(
        "Conversion report: "
        f"direction={report.direction}, "
        f"rows={report.row_count}, "
        f"columns={report.column_count}, "
        f"written={report.written}"
    )


def _run_inspect(args: argparse.Namespace, config: ConverterConfig) -> int:
    input_path = Path(args.input)
    try:
        text = input_path.read_text(encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Failed to read markup file: {exc}", file=sys.stderr)
        return 1

    try:
        root = parse_markup(text, strict=config.strict)
    except ConversionError as exc:
        print(str(exc), file=sys.stderr)
        return 3

    print_tree(root, title=input_path.name)
    if args.json is not None:
        try:
            export_tree_json(root, args.json)
        except OSError as exc:
            print(f"Failed to write JSON output: {exc}", file=sys.stderr)
            return 1
        print(f"JSON exported to: {args.json}")
    return 0


def run_cli(argv: list[str] | None = None) -> int:
    try:
        config = load_converter_config(load_dotenv=True)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    parser = _build_parser(config)
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        _apply_overrides(config, args)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    input_name = args.input.strip()
    if not input_name:
        print("Please select an input file!", file=sys.stderr)
        return 2
    args.input = input_name
    LOGGER.info("Starting command '%s' (delimiter=%r strict=%s)", args.command, config.delimiter, config.strict)

    if args.command == "inspect":
        return _run_inspect(args, config)

    if args.output is None:
        output_path = Path(input_name).with_suffix(DEFAULT_SUFFIXES[args.command])
    elif not args.output.strip():
        print("Please select an output file!", file=sys.stderr)
        return 2
    else:
        output_path = Path(args.output.strip())

    convert = export_markup_to_table if args.command == EXPORT else import_table_to_markup
    try:
        report = convert(Path(input_name), output_path, config=config, notifier=ConsoleNotifier())
    except (OSError, UnicodeDecodeError):
        return 1
    except ConversionError:
        return 3

    _print_report(report)
    return 0 if report.written else 1


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
