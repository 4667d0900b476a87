"""
Unit tests for the fetch collaborator (load_data.fetch).

HTTP is served by ``httpx.MockTransport`` (see ``mock_client`` in
conftest.py); local reads use ``tmp_path``.
"""

from __future__ import annotations

import asyncio

import httpx
import pytest

from load_data.config import FetchConfig
from load_data.fetch import HttpFetcher, create_client, decode_body, is_local, local_path
from tests.conftest import CSV_FILE, WEBROOT


class TestDecodeBody:
    def test_str_passthrough(self):
        assert decode_body("a\tb") == "a\tb"

    def test_bytes_utf8(self):
        assert decode_body("café".encode("utf-8")) == "café"

    def test_strips_bom(self):
        assert decode_body(b"\xef\xbb\xbfa,b\n") == "a,b\n"

    def test_custom_encoding(self):
        assert decode_body("café".encode("latin-1"), encoding="latin-1") == "café"

    def test_undecodable_raises(self):
        with pytest.raises(UnicodeDecodeError):
            decode_body(b"\xff\xfe\xfa", encoding="utf-8")


class TestIsLocal:
    @pytest.mark.parametrize(
        "address, expected",
        [
            ("data/test.csv", True),
            ("/abs/test.csv", True),
            ("file:///abs/test.csv", True),
            ("C:\\data\\test.csv", True),
            ("http://example.com/test.csv", False),
            ("https://example.com/test.csv", False),
        ],
    )
    def test_is_local(self, address, expected):
        assert is_local(address) is expected

    def test_file_url_path(self):
        assert str(local_path("file:///tmp/my%20data.csv")).endswith("my data.csv")

    def test_bare_path_kept_verbatim(self):
        assert local_path("data/report#1.csv").name == "report#1.csv"
        assert local_path("data/my%20data.csv").name == "my%20data.csv"


class TestCreateClient:
    def test_applies_config(self):
        client = create_client(FetchConfig(timeout=3.0, headers={"X-Test": "1"}))
        try:
            assert client.timeout.read == 3.0
            assert client.headers["X-Test"] == "1"
            assert client.follow_redirects is True
        finally:
            asyncio.run(client.aclose())


class TestHttpFetcher:
    """Tests for HttpFetcher.__call__()."""

    def test_http_get(self, mock_client, served_requests):
        fetcher = HttpFetcher(client=mock_client)
        body = asyncio.run(fetcher(f"{WEBROOT}/test.csv"))
        assert body == CSV_FILE.read_bytes()
        assert served_requests == ["/test.csv"]

    def test_http_error_status_propagates(self, mock_client):
        fetcher = HttpFetcher(client=mock_client)
        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(fetcher(f"{WEBROOT}/missing.csv"))

    def test_transport_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        try:
            with pytest.raises(httpx.ConnectError, match="connection refused"):
                asyncio.run(HttpFetcher(client=client)(f"{WEBROOT}/test.csv"))
        finally:
            asyncio.run(client.aclose())

    def test_local_path(self, tmp_path):
        path = tmp_path / "data.tsv"
        path.write_bytes(b"a\tb\n")
        assert asyncio.run(HttpFetcher()(str(path))) == b"a\tb\n"

    def test_file_url(self, tmp_path):
        path = tmp_path / "data.tsv"
        path.write_bytes(b"a\tb\n")
        assert asyncio.run(HttpFetcher()(path.as_uri())) == b"a\tb\n"

    def test_missing_local_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            asyncio.run(HttpFetcher()(str(tmp_path / "nope.csv")))

    def test_supplied_client_not_closed(self, mock_client):
        async def run() -> None:
            async with HttpFetcher(client=mock_client) as fetcher:
                await fetcher(f"{WEBROOT}/test.csv")

        asyncio.run(run())
        assert mock_client.is_closed is False

    def test_owned_client_closed(self, tmp_path):
        fetcher = HttpFetcher()
        client = fetcher.client

        async def run() -> None:
            async with fetcher:
                pass

        asyncio.run(run())
        assert client.is_closed is True

    def test_local_file_name_with_hash(self, tmp_path):
        path = tmp_path / "report#1.tsv"
        path.write_bytes(b"a\tb\n")
        assert asyncio.run(HttpFetcher()(str(path))) == b"a\tb\n"


class TestMockClientFixture:
    """The shared ``mock_client`` fixture is closed when its test ends."""

    @pytest.fixture
    def used_clients(self):
        # Requested before mock_client, so this teardown runs after its close.
        clients: list[httpx.AsyncClient] = []
        yield clients
        assert clients and all(client.is_closed for client in clients)

    def test_closed_on_teardown(self, used_clients, mock_client):
        used_clients.append(mock_client)
        asyncio.run(HttpFetcher(client=mock_client)(f"{WEBROOT}/test.csv"))
        assert mock_client.is_closed is False
