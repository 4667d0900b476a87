"""
Parsers sub-package for load-data.

Contains format-specific parsers that convert a decoded body into its
result shape.

Design: Strategy Pattern
- base.py defines the BaseParser ABC (protocol).
- structured.py implements JsonParser.
- delimited.py implements CsvParser and TsvParser; TsvParser inspects the
  body and defers to AtsvParser when it finds annotation rows.
- annotated.py implements AtsvParser (``atsv`` / ``txt`` bodies).

The format dispatcher (detect.py) selects the parser class at runtime
from the locator's extension.
"""
