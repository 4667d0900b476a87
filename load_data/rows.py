"""
Row tokenizer and annotation marker predicate.

Both the annotation detector and the ATSV transforms work on tokenized
rows (``list[str]``), so the tokenizer and the single marker predicate
live here, below everything except the shared pandas reader.

Tokenizing follows standard delimited-text quoting: a field that starts
with ``"`` may contain delimiters, newlines and doubled quotes. Blank
lines are skipped, and rows are padded with ``""`` to the widest line.
"""

from __future__ import annotations

from collections.abc import Iterable

from load_data.tabular import read_rows

Row = list[str]

TAB = "\t"


def tokenize_rows(text: str, delimiter: str = TAB) -> list[Row]:
    """Split *text* into rows of fields.

    Args:
        text: The decoded body.
        delimiter: Field separator (tab for TSV-family bodies).

    Returns:
        One list of strings per non-blank line, padded to the widest line.

    Raises:
        ParsingError: If the body cannot be tokenized.
    """
    return read_rows(text, sep=delimiter)


def is_marker_row(row: Row, prefix: str = "&") -> bool:
    """Return True if *row* is an annotation marker row.

    A marker row's first field starts with *prefix* and every other
    field is empty. The bare prefix on its own is the sentinel header
    cell, never a marker.
    """
    if not row or not row[0].startswith(prefix) or row[0] == prefix:
        return False
    return all(field == "" for field in row[1:])


def count_marker_rows(rows: Iterable[Row], prefix: str = "&") -> int:
    """Number of rows in *rows* that are annotation marker rows."""
    return sum(1 for row in rows if is_marker_row(row, prefix))
