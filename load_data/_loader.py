"""
Internal batch loading for load-data.

Every resource in a request is fetched and parsed in its own task and
all tasks run concurrently on the event loop. Results come back in the
order of the request, whatever order the fetches complete in.

A batch is all-or-nothing: the first failure is re-raised to the caller
unchanged and the remaining tasks are cancelled, so no partial results
are ever returned.

This module is **not** part of the public API.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from load_data.config import LoaderConfig
from load_data.detect import get_parser, resolve_format
from load_data.fetch import Fetch, HttpFetcher, decode_body
from load_data.locator import Resource

logger = logging.getLogger(__name__)


async def load_resource(
    resource: Resource,
    fmt: str,
    fetch: Fetch,
    config: LoaderConfig,
) -> Any:
    """Fetch, decode and parse one resource whose format is already known."""
    logger.info("Fetching %s (%s)", resource.display_name, fmt)
    body = await fetch(resource.url)
    text = decode_body(body, config.fetch.encoding)

    parser = get_parser(fmt)(config.parse)
    result = parser.parse(text)
    logger.info("Loaded %s", resource.display_name)
    return result


async def _gather_all_or_nothing(coros: list) -> list[Any]:
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def load_resources(
    resources: list[Resource],
    config: LoaderConfig,
    fetch: Fetch | None = None,
) -> list[Any]:
    """Load *resources* concurrently and return their results in order.

    Formats for the whole batch are resolved before anything is fetched.

    Args:
        resources: The normalised request.
        config: Loader configuration.
        fetch: Fetch collaborator; a fresh ``HttpFetcher`` (closed on
            return) is used when ``None``.

    Returns:
        One result per resource, in the same order.

    Raises:
        UnrecognisedFormatError: If any resource has an unsupported format.
    """
    formats = [resolve_format(resource) for resource in resources]
    logger.info("Loading %d resource(s): %s", len(resources), formats)

    if fetch is not None:
        return await _gather_all_or_nothing(
            [load_resource(r, fmt, fetch, config) for r, fmt in zip(resources, formats)]
        )

    async with HttpFetcher(config.fetch) as fetcher:
        return await _gather_all_or_nothing(
            [load_resource(r, fmt, fetcher, config) for r, fmt in zip(resources, formats)]
        )
