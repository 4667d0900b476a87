"""
Data row filter for ATSV bodies.

Removes marker rows, keeping header and data rows in their original
order. When the first column of the header is the bare annotation
prefix (a column reserved for annotation syntax), it is renamed so the
output still has a usable column name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from load_data.rows import Row, is_marker_row

logger = logging.getLogger(__name__)


def rename_sentinel_header(rows: list[Row], prefix: str = "&", sentinel_name: str = "date") -> list[Row]:
    """Rename a bare *prefix* in the first field of the first row.

    Returns *rows* unchanged when there is nothing to rename, otherwise a
    new list whose first row is a renamed copy.
    """
    if not rows or not rows[0] or rows[0][0] != prefix:
        return rows
    logger.debug("Renaming sentinel header %r to %r", prefix, sentinel_name)
    header = [sentinel_name, *rows[0][1:]]
    return [header, *rows[1:]]


def filter_data_rows(
    rows: Iterable[Row],
    prefix: str = "&",
    sentinel_name: str = "date",
) -> list[Row]:
    """Keep the rows that are not annotation markers.

    Args:
        rows: Tokenized rows of the whole body.
        prefix: The annotation prefix.
        sentinel_name: Replacement for a bare prefix in the header's first field.

    Returns:
        Header plus data rows, as copies; the input rows are not modified.
    """
    kept = [list(row) for row in rows if not is_marker_row(row, prefix)]
    return rename_sentinel_header(kept, prefix, sentinel_name)
