"""
load-data: load JSON, CSV, TSV and annotated TSV resources.

Public API surface:

- ``load(request, ...)`` -- **recommended entry point**. Coroutine.
  Accepts one locator or a sequence of locators, fetches them
  concurrently, and parses each according to its extension.

- ``load_sync(request, ...)`` -- Blocking wrapper around ``load()`` for
  scripts and notebooks without a running event loop.

Result shapes per format:

- ``.json`` -> the decoded JSON value.
- ``.csv`` / plain ``.tsv`` -> list of records (``dict[str, str]``).
- ``.atsv`` / ``.txt`` / annotated ``.tsv`` -> ``AnnotatedDocument`` with
  ``meta`` (annotation key -> value) and ``data`` (records).
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Sequence
from typing import Any

from load_data._loader import load_resources
from load_data.config import LoaderConfig, resolve_config
from load_data.exceptions import (
    LoadDataError,
    ParsingError,
    UnrecognisedFormatError,
)
from load_data.fetch import Fetch, HttpFetcher
from load_data.locator import Locator, Resource, normalize_request
from load_data.transforms.pipeline import AnnotatedDocument

__all__ = [
    "load",
    "load_sync",
    "Resource",
    "AnnotatedDocument",
    "LoaderConfig",
    "HttpFetcher",
    "LoadDataError",
    "ParsingError",
    "UnrecognisedFormatError",
]

logger = logging.getLogger(__name__)


async def load(
    request: Locator | Sequence[Locator],
    *,
    config: LoaderConfig | str | os.PathLike | None = None,
    fetch: Fetch | None = None,
) -> Any:
    """Fetch and parse one or more resources.

    All resources are fetched concurrently. When the request produces a
    single result it is returned directly; otherwise a list of results
    in request order is returned.

    Args:
        request: A locator (URL/path string, ``Path``, ``Resource`` or a
            mapping with a ``url`` key) or a sequence of locators.
        config: A ``LoaderConfig``, a path to a YAML config, or ``None``
            for defaults.
        fetch: Optional fetch collaborator, ``async (address) -> bytes | str``.
            Defaults to an ``HttpFetcher`` built from ``config.fetch``.

    Returns:
        The parsed result, or a list of parsed results.

    Raises:
        UnrecognisedFormatError: If any locator has an unsupported format.
            Raised before any fetch starts.
        ParsingError: If a body cannot be parsed.
        Exception: Whatever the fetch collaborator raises, unchanged
            (e.g. ``httpx.HTTPStatusError``, ``FileNotFoundError``).

    Examples::

        data = await load_data.load("https://example.com/sales.tsv")
        chart, table = await load_data.load([
            "https://example.com/chart.atsv",
            Resource(url="https://example.com/api/table", format="csv"),
        ])
    """
    loader_config = resolve_config(config)
    resources = normalize_request(request)
    results = await load_resources(resources, loader_config, fetch=fetch)
    if len(results) == 1:
        return results[0]
    return results


def load_sync(
    request: Locator | Sequence[Locator],
    *,
    config: LoaderConfig | str | os.PathLike | None = None,
    fetch: Fetch | None = None,
) -> Any:
    """Blocking wrapper around ``load()``.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(load(request, config=config, fetch=fetch))
