"""Runtime configuration for conversions."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Callable, TypeVar

from xmlcsv.env import load_env
from xmlcsv.ingestor import ELEMENT_NAME, INNER_ROOT_NAME


T = TypeVar("T")


@dataclass
class ConverterConfig:
    delimiter: str = ","
    indent_width: int = 2
    strict: bool = False
    pad_rows: bool = False
    inner_root_name: str = INNER_ROOT_NAME
    element_name: str = ELEMENT_NAME
    encoding: str = "utf-8"
    log_level: str = "INFO"

    @property
    def indent(self) -> str:
        return " " * self.indent_width


TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}


def _parse_bool(raw: str) -> bool:
    lowered = raw.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _from_env(name: str, default: T, convert: Callable[[str], T]) -> T:
    """Convert an environment value, rejecting malformed settings by name."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return convert(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid value for {name}: {exc}") from exc


def _parse_indent_width(raw: str) -> int:
    width = int(raw)
    if width < 0:
        raise ValueError(f"indent width must not be negative, got {width}")
    return width


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, "").strip() or default


def parse_delimiter(raw: str) -> str:
    """Accept a single character, or the escapes ``\\t`` / ``tab``."""
    if raw in {"\\t", "tab"}:
        return "\t"
    if len(raw) != 1:
        raise ValueError(f"Delimiter must be a single character, got {raw!r}.")
    return raw


def load_converter_config(load_dotenv: bool = True) -> ConverterConfig:
    if load_dotenv:
        load_env()

    raw_delimiter = os.getenv("XMLCSV_DELIMITER", "")
    return ConverterConfig(
        delimiter=parse_delimiter(raw_delimiter) if raw_delimiter else ",",
        indent_width=_from_env("XMLCSV_INDENT_WIDTH", 2, _parse_indent_width),
        strict=_from_env("XMLCSV_STRICT", False, _parse_bool),
        pad_rows=_from_env("XMLCSV_PAD_ROWS", False, _parse_bool),
        inner_root_name=_get_str("XMLCSV_INNER_ROOT_NAME", INNER_ROOT_NAME),
        element_name=_get_str("XMLCSV_ELEMENT_NAME", ELEMENT_NAME),
        encoding=_get_str("XMLCSV_ENCODING", "utf-8"),
        log_level=_get_str("XMLCSV_LOG_LEVEL", "INFO").upper(),
    )
