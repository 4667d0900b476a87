"""
ATSV pipeline orchestrator for load-data.

Turns tokenized rows of an annotated body into an ``AnnotatedDocument``.
The step order is fixed:

1. **Metadata extraction**: collect ``key=value`` pairs from marker rows.
2. **Row filtering**: drop marker rows, rename a bare-prefix header cell.
3. **Re-encoding**: format the remaining rows as CSV and parse them into
   records (or a DataFrame, per ``ParseConfig.as_frame``).

Metadata extraction sees the unfiltered rows; row filtering and
re-encoding see only what the previous step returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from load_data.config import ParseConfig
from load_data.rows import Row, count_marker_rows
from load_data.tabular import Record, frame_to_records
from load_data.transforms.data_rows import filter_data_rows
from load_data.transforms.meta import extract_metadata
from load_data.transforms.reencode import rows_to_records

logger = logging.getLogger(__name__)


@dataclass
class AnnotatedDocument:
    """Parsed result of one annotated body.

    Attributes:
        meta: Annotation key -> value, trimmed, last write wins.
        data: One record per data row keyed by the header names, or a
            DataFrame of strings when frame output is configured.
    """

    meta: dict[str, str] = field(default_factory=dict)
    data: list[Record] | pd.DataFrame = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return ``{"meta": ..., "data": [...]}`` with records for data."""
        data = self.data
        if isinstance(data, pd.DataFrame):
            data = frame_to_records(data)
        return {"meta": dict(self.meta), "data": list(data)}


class AnnotationPipeline:
    """Runs the ATSV steps over one body's rows.

    The pipeline is **stateless** -- each call to ``run()`` processes a
    fresh row list independently.
    """

    def __init__(self, config: ParseConfig | None = None) -> None:
        self.config = config or ParseConfig()

    def run(self, rows: list[Row]) -> AnnotatedDocument:
        """Run all steps and return the annotated document.

        Args:
            rows: Tokenized rows of the whole body, header first.

        Returns:
            ``AnnotatedDocument`` with metadata and data records.
        """
        prefix = self.config.annotation_prefix

        logger.info(
            "Step 1/3: Extracting metadata (%d marker rows)",
            count_marker_rows(rows, prefix),
        )
        meta = extract_metadata(rows, prefix)

        logger.info("Step 2/3: Filtering data rows")
        data_rows = filter_data_rows(rows, prefix, self.config.sentinel_name)

        logger.info("Step 3/3: Re-encoding %d rows", len(data_rows))
        data = rows_to_records(data_rows, as_frame=self.config.as_frame)

        return AnnotatedDocument(meta=meta, data=data)
