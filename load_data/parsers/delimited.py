"""
CSV and TSV parsers for load-data.

Plain delimited bodies become one record per data row, keyed by the
header row, with every value left as a string.

TSV is the one format whose parser depends on content: the body is
tokenized first and, if it contains annotation marker rows, parsing is
handed to ``AtsvParser`` so the result carries ``meta`` as well.
"""

from __future__ import annotations

import logging

import pandas as pd

from load_data.detect import is_annotated
from load_data.parsers.annotated import AtsvParser
from load_data.parsers.base import BaseParser
from load_data.rows import TAB, tokenize_rows
from load_data.tabular import Record, read_records
from load_data.transforms.pipeline import AnnotatedDocument

logger = logging.getLogger(__name__)


class CsvParser(BaseParser):
    """Parser for comma-separated bodies with a header row."""

    format_name = "csv"
    delimiter = ","

    def parse(self, text: str) -> list[Record] | pd.DataFrame:
        records = read_records(text, sep=self.delimiter, as_frame=self.config.as_frame)
        logger.info("Parsed %s body: %d records", self.format_name, len(records))
        return records


class TsvParser(CsvParser):
    """Parser for tab-separated bodies, annotated or not."""

    format_name = "tsv"
    delimiter = TAB

    def parse(self, text: str) -> list[Record] | pd.DataFrame | AnnotatedDocument:
        rows = tokenize_rows(text, delimiter=self.delimiter)
        if is_annotated(rows, self.config.annotation_prefix):
            logger.info("TSV body contains annotation rows, parsing as ATSV")
            return AtsvParser(self.config).parse_rows(rows)
        return super().parse(text)
