"""
Fetch collaborator for load-data.

A fetcher is any ``async (address) -> bytes | str`` callable. The default,
``HttpFetcher``, uses ``httpx.AsyncClient`` for ``http(s)`` addresses and
reads addresses without a scheme (or with ``file://``) from local disk in
a worker thread.

Failures are not wrapped or retried: ``httpx.HTTPError`` (including
``HTTPStatusError`` from ``raise_for_status()``) and ``OSError`` reach the
caller as raised.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Union

import httpx

from load_data.config import FetchConfig
from load_data.locator import address_path, is_local

logger = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[Union[bytes, str]]]


def local_path(address: str) -> Path:
    """Filesystem path for a local *address* (bare path or ``file://`` URL)."""
    return Path(address_path(address))


def decode_body(body: bytes | str, encoding: str = "utf-8-sig") -> str:
    """Decode a fetched body; strings pass through unchanged."""
    if isinstance(body, str):
        return body
    return body.decode(encoding)


def create_client(config: FetchConfig | None = None) -> httpx.AsyncClient:
    """Create the async HTTP client used by ``HttpFetcher``."""
    config = config or FetchConfig()
    return httpx.AsyncClient(
        headers=config.headers,
        timeout=config.timeout,
        follow_redirects=config.follow_redirects,
    )


class HttpFetcher:
    """Default fetcher: HTTP(S) via httpx, local paths via the filesystem.

    Usage::

        async with HttpFetcher() as fetch:
            body = await fetch("https://example.com/data.tsv")

    A client passed in by the caller is used as-is and is not closed by
    the fetcher; a client the fetcher creates itself is closed on exit.
    """

    def __init__(
        self,
        config: FetchConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or FetchConfig()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = create_client(self.config)
        return self._client

    async def __call__(self, address: str) -> bytes:
        if is_local(address):
            path = local_path(address)
            logger.debug("Reading local file %s", path)
            return await asyncio.to_thread(path.read_bytes)

        logger.debug("GET %s", address)
        response = await self.client.get(address)
        response.raise_for_status()
        logger.debug(
            "GET %s -> %d (%d bytes)", address, response.status_code, len(response.content)
        )
        return response.content

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpFetcher:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
