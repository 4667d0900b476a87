"""
Metadata extractor for ATSV bodies.

Marker rows carry one ``key=value`` annotation in their first field,
e.g. ``&title=Estimated sales`` followed by empty cells. The extractor
collects them into a flat mapping. Rows without ``=`` are tolerated and
produce no entry.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from load_data.rows import Row, is_marker_row

logger = logging.getLogger(__name__)


def parse_annotation(field: str, prefix: str = "&") -> tuple[str, str] | None:
    """Split one marker field into a trimmed ``(key, value)`` pair.

    Only the first ``=`` separates key from value, so values may contain
    ``=`` themselves. Returns ``None`` when the field has no ``=``.
    """
    body = field[len(prefix):] if field.startswith(prefix) else field
    key, sep, value = body.partition("=")
    if not sep:
        return None
    return key.strip(), value.strip()


def extract_metadata(rows: Iterable[Row], prefix: str = "&") -> dict[str, str]:
    """Build the metadata mapping from every marker row in *rows*.

    Later rows overwrite earlier ones with the same key.

    Args:
        rows: Tokenized rows of the whole body (header included).
        prefix: The annotation prefix.

    Returns:
        Mapping of trimmed keys to trimmed values.
    """
    meta: dict[str, str] = {}
    for row in rows:
        if not is_marker_row(row, prefix):
            continue
        entry = parse_annotation(row[0], prefix)
        if entry is None:
            logger.debug("Ignoring annotation row without '=': %r", row[0])
            continue
        key, value = entry
        if key in meta:
            logger.warning(
                "Duplicate metadata key %r: %r replaces %r", key, value, meta[key]
            )
        meta[key] = value
    return meta
