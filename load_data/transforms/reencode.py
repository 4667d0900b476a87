"""
Tabular re-encoder for ATSV bodies.

Filtered rows (header + data) are formatted as CSV and handed to the
same reader the plain CSV parser uses, so annotated and plain bodies
produce identically shaped records. CSV quoting makes the step
lossless: commas, quotes and newlines inside fields survive the trip.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

import pandas as pd

from load_data.rows import Row
from load_data.tabular import Record, read_records


def reencode_rows(rows: Iterable[Row]) -> str:
    """Format *rows* as CSV text with minimal quoting."""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL)
    writer.writerows(rows)
    return buf.getvalue()


def rows_to_records(rows: Iterable[Row], as_frame: bool = False) -> list[Record] | pd.DataFrame:
    """Re-encode *rows* as CSV and parse them back with the first row as header."""
    return read_records(reencode_rows(rows), sep=",", as_frame=as_frame)
