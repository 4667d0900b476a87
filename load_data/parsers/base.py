"""
Base parser ABC for load-data.

All format-specific parsers implement ``parse(text)``, taking an already
decoded body and returning that format's result shape. Parsing is
synchronous; fetching and decoding happen before a parser is involved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from load_data.config import ParseConfig


class BaseParser(ABC):
    """Abstract base class for body parsers.

    Subclasses set ``format_name`` and implement ``parse()``.
    """

    format_name: ClassVar[str] = ""

    def __init__(self, config: ParseConfig | None = None) -> None:
        self.config = config or ParseConfig()

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse a decoded body.

        Args:
            text: The body as a string.

        Returns:
            The parsed result for this format.

        Raises:
            ParsingError: If the body structure is unusable.
        """
