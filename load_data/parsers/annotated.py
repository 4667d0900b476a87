"""
ATSV parser for load-data.

Used unconditionally for ``.atsv`` and ``.txt`` locators, and for
``.tsv`` locators whose body contains annotation rows.
"""

from __future__ import annotations

import logging

from load_data.parsers.base import BaseParser
from load_data.rows import Row, tokenize_rows
from load_data.transforms.pipeline import AnnotatedDocument, AnnotationPipeline

logger = logging.getLogger(__name__)


class AtsvParser(BaseParser):
    """Parser for annotated tab-separated bodies."""

    format_name = "atsv"

    def parse(self, text: str) -> AnnotatedDocument:
        return self.parse_rows(tokenize_rows(text))

    def parse_rows(self, rows: list[Row]) -> AnnotatedDocument:
        """Parse already tokenized rows (used by ``TsvParser``)."""
        document = AnnotationPipeline(self.config).run(rows)
        logger.info(
            "Parsed ATSV body: %d metadata entries, %d records",
            len(document.meta),
            len(document.data),
        )
        return document
