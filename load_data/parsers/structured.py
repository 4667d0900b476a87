"""
JSON parser for load-data.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from load_data.exceptions import ParsingError
from load_data.parsers.base import BaseParser

logger = logging.getLogger(__name__)


class JsonParser(BaseParser):
    """Returns the decoded JSON value unchanged."""

    format_name = "json"

    def parse(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ParsingError(f"Invalid JSON body: {exc}") from exc
