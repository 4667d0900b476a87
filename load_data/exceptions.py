"""
Custom exception hierarchy for load-data.

Transport failures are deliberately absent: whatever the fetch
collaborator raises (``httpx.HTTPError``, ``OSError``, ...) reaches the
caller unchanged.
"""


class LoadDataError(Exception):
    """Base exception for all load-data errors."""


class UnrecognisedFormatError(LoadDataError, ValueError):
    """Raised when a locator's format is not one of the supported formats.

    Always raised before any fetch is attempted for the request.
    """


class ParsingError(LoadDataError):
    """Raised when a fetched body cannot be parsed.

    For example, invalid JSON, or a delimited data row with more fields
    than the header row.
    """


class ConfigValidationError(LoadDataError):
    """Raised when a YAML loader config is empty or unusable."""
