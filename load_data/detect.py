"""
Format detection for load-data.

Two decisions live here:

- **Format dispatch**: a locator's format is the text after the final
  ``.`` of its address path (or ``Resource.format`` when set). Unknown
  formats fail immediately, before anything is fetched.
- **Annotation detection**: whether a tokenized TSV body contains
  annotation marker rows, which decides between the plain TSV and the
  ATSV result shape for ``.tsv`` locators.

Design: Strategy Pattern
- get_parser() returns the parser class registered for a format.
- The registry is built lazily to avoid circular imports with the
  parsers, which use is_annotated().
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from load_data.exceptions import UnrecognisedFormatError
from load_data.locator import Resource, address_path
from load_data.parsers.base import BaseParser
from load_data.rows import Row, is_marker_row

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "csv", "tsv", "atsv", "txt")

# Maps format name to parser class
_PARSER_MAP: dict[str, type[BaseParser]] = {}


def _get_parser_map() -> dict[str, type[BaseParser]]:
    """Lazily build the parser map to avoid circular imports."""
    if not _PARSER_MAP:
        from load_data.parsers.annotated import AtsvParser
        from load_data.parsers.delimited import CsvParser, TsvParser
        from load_data.parsers.structured import JsonParser

        _PARSER_MAP["json"] = JsonParser
        _PARSER_MAP["csv"] = CsvParser
        _PARSER_MAP["tsv"] = TsvParser
        _PARSER_MAP["atsv"] = AtsvParser
        _PARSER_MAP["txt"] = AtsvParser
    return _PARSER_MAP


def get_extension(address: str) -> str:
    """Return the lower-cased text after the final ``.`` of *address*'s path.

    URL query strings and fragments are ignored (see ``address_path``).
    Returns ``""`` when the last path segment has no ``.``.
    """
    segment = address_path(address).rsplit("/", 1)[-1]
    if "." not in segment:
        return ""
    return segment.rsplit(".", 1)[-1].lower()


def resolve_format(resource: Resource) -> str:
    """Determine the format of *resource* without fetching it.

    Raises:
        UnrecognisedFormatError: If the format is not supported.
    """
    fmt = resource.format.lower() if resource.format else get_extension(resource.url)
    if fmt not in SUPPORTED_FORMATS:
        raise UnrecognisedFormatError(
            f"Unrecognised format {fmt!r} for {resource.display_name} ({resource.url}). "
            f"Supported formats: {list(SUPPORTED_FORMATS)}"
        )
    logger.debug("Resolved format %r for %s", fmt, resource.display_name)
    return fmt


def get_parser(fmt: str) -> type[BaseParser]:
    """Return the parser class for a supported format.

    Raises:
        UnrecognisedFormatError: If *fmt* has no parser.
    """
    parser_cls = _get_parser_map().get(fmt)
    if parser_cls is None:
        raise UnrecognisedFormatError(
            f"No parser for format {fmt!r}. Supported formats: {list(SUPPORTED_FORMATS)}"
        )
    return parser_cls


def is_annotated(rows: Sequence[Row], prefix: str = "&") -> bool:
    """Return True if a tokenized TSV body contains annotation rows.

    Bodies with fewer than two rows are never annotated.
    """
    if len(rows) < 2:
        return False
    return any(is_marker_row(row, prefix) for row in rows)
