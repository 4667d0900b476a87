"""
Resource locators for load-data.

A request is either a single locator or a sequence of them. A locator is
one of:

- a URL or filesystem path string,
- an ``os.PathLike`` (e.g. ``pathlib.Path``),
- a ``Resource`` (fetchable address plus display name),
- a mapping with the same keys as ``Resource`` (validated into one).

``normalize_request()`` flattens all of these into a list of
``Resource`` objects so the loader deals with a single shape.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from typing import Any, Union
from urllib.parse import unquote, urlsplit

from pydantic import BaseModel, ConfigDict, Field


def is_local(address: str) -> bool:
    """True for bare paths, ``file://`` URLs and Windows drive paths."""
    scheme = urlsplit(address).scheme
    return scheme in ("", "file") or len(scheme) == 1


def address_path(address: str) -> str:
    """The path part of *address*, without query string or fragment.

    Bare filesystem paths are returned as written, so a local file name
    containing ``#`` or ``?`` keeps its extension. ``file://`` and
    ``http(s)://`` addresses are split as URLs and percent-decoded.
    """
    parts = urlsplit(address)
    if parts.scheme == "" or len(parts.scheme) == 1:
        return address
    return unquote(parts.path) or address


class Resource(BaseModel):
    """A fetchable address with an optional display name and format override."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="URL or local path to fetch")
    name: str | None = Field(None, description="Human-readable name used in logs")
    format: str | None = Field(
        None,
        description="Explicit format; overrides the extension of url when set",
    )

    @property
    def path(self) -> str:
        """The path part of the address (no query string or fragment)."""
        return address_path(self.url)

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        tail = self.path.rstrip("/").rsplit("/", 1)[-1]
        return tail or self.url


Locator = Union[str, os.PathLike, Resource, Mapping[str, Any]]


def to_resource(locator: Locator) -> Resource:
    """Convert one locator into a ``Resource``.

    Raises:
        TypeError: If *locator* is not a supported locator type.
        pydantic.ValidationError: If a mapping lacks a usable ``url``.
    """
    if isinstance(locator, Resource):
        return locator
    if isinstance(locator, str):
        return Resource(url=locator)
    if isinstance(locator, os.PathLike):
        return Resource(url=os.fspath(locator))
    if isinstance(locator, Mapping):
        return Resource.model_validate(dict(locator))
    raise TypeError(
        f"Unsupported locator type {type(locator).__name__!r}; expected a string, "
        "a path, a Resource, or a mapping with a 'url' key"
    )


def is_single(request: Locator | Sequence[Locator]) -> bool:
    """True if *request* is one locator rather than a sequence of them."""
    return isinstance(request, (str, os.PathLike, Resource, Mapping))


def normalize_request(request: Locator | Sequence[Locator]) -> list[Resource]:
    """Flatten a single locator or a sequence of locators into resources.

    Order is preserved.
    """
    if is_single(request):
        return [to_resource(request)]
    if not isinstance(request, Sequence):
        raise TypeError(
            f"Expected a locator or a sequence of locators, got {type(request).__name__!r}"
        )
    return [to_resource(locator) for locator in request]
