"""
Delimited-text reader shared by the CSV/TSV parsers, the row tokenizer
and the ATSV re-encoder.

Bodies are read with pandas, every cell as a string (no numeric or NA
coercion). The first row becomes the column names verbatim, so blank or
duplicate header cells are kept exactly as written instead of being
mangled into ``Unnamed: 0`` / ``a.1``.
"""

from __future__ import annotations

import io
import logging

import pandas as pd

from load_data.exceptions import ParsingError

logger = logging.getLogger(__name__)

Record = dict[str, str]


def _read_raw(text: str, sep: str, width: int | None = None) -> pd.DataFrame | None:
    """Read *text* with no header into a DataFrame of strings.

    With *width*, every row is read into that many columns (shorter rows
    padded with ``""``); otherwise the first row fixes the width. Returns
    None for a body with no rows.

    Raises:
        ParsingError: If a row has more fields than the width.
    """
    try:
        raw = pd.read_csv(
            io.StringIO(text),
            sep=sep,
            header=None,
            names=list(range(width)) if width else None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return None
    except pd.errors.ParserError as exc:
        raise ParsingError(f"Could not parse delimited body: {exc}") from exc
    if raw.empty:
        return None
    return raw.fillna("")


def read_rows(text: str, sep: str = "\t") -> list[list[str]]:
    """Read every non-blank line of *text* as a list of field strings.

    Rows are padded with ``""`` to the widest line, so annotation rows
    written without trailing separators may precede a wider header.
    Trailing columns that are empty in every row are dropped.
    """
    width = max((line.count(sep) + 1 for line in text.split("\n") if line), default=0)
    if not width:
        return []
    raw = _read_raw(text, sep, width=width)
    if raw is None:
        return []
    while raw.shape[1] > 1 and (raw.iloc[:, -1] == "").all():
        raw = raw.iloc[:, :-1]
    return raw.values.tolist()


def read_table(text: str, sep: str = ",") -> pd.DataFrame:
    """Read a delimited body with a header row into a DataFrame of strings.

    Rows shorter than the header are padded with ``""``.

    Raises:
        ParsingError: If a data row has more fields than the header.
    """
    raw = _read_raw(text, sep)
    if raw is None:
        return pd.DataFrame()

    header = [str(c) for c in raw.iloc[0]]
    frame = raw.iloc[1:].reset_index(drop=True)
    frame.columns = header
    return frame


def frame_to_records(frame: pd.DataFrame) -> list[Record]:
    """Convert a DataFrame into one dict per row keyed by column name.

    Built by hand rather than with ``DataFrame.to_dict`` so that duplicate
    column names resolve last-wins instead of raising.
    """
    header = [str(c) for c in frame.columns]
    return [
        dict(zip(header, values))
        for values in frame.itertuples(index=False, name=None)
    ]


def read_records(
    text: str,
    sep: str = ",",
    as_frame: bool = False,
) -> list[Record] | pd.DataFrame:
    """Parse a delimited body with a header row.

    Args:
        text: The decoded body.
        sep: Field separator.
        as_frame: Return the DataFrame itself instead of records.

    Returns:
        Records (one per data row) or a DataFrame of strings.
    """
    frame = read_table(text, sep=sep)
    logger.debug("Read %d rows x %d columns", len(frame), len(frame.columns))
    if as_frame:
        return frame
    return frame_to_records(frame)
