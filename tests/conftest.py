"""
Shared test fixtures and path constants for load-data tests.

All fixture file paths are defined here as module-level constants for
easy discovery and modification. HTTP tests serve these files through
``httpx.MockTransport`` under ``WEBROOT`` -- no real network access.
"""

import asyncio
from pathlib import Path

import httpx
import pytest

# ---------------------------------------------------------------------------
# Fixture file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

JSON_FILE = FIXTURE_DIR / "test.json"
CSV_FILE = FIXTURE_DIR / "test.csv"
TSV_FILE = FIXTURE_DIR / "test.tsv"
ATSV_FILE = FIXTURE_DIR / "test.atsv"
ATSV_TSV_FILE = FIXTURE_DIR / "test.atsv.tsv"
TXT_FILE = FIXTURE_DIR / "test.txt"

WEBROOT = "http://testserver"

# Expected parse results shared by the fixture files
RESULT = [
    {"date": "2015", "value": "5.5", "note": "actual"},
    {"date": "2016", "value": "7.2", "note": "actual"},
    {"date": "2017", "value": "10.9", "note": "est., revised"},
]

RESULT_META = {
    "title": "Estimated ecommerce sales in Greater Southeast Asia",
    "subtitle": "$bn",
    "source": "Sea S1 filing",
    "footnote": "delete if not required",
    "comment": "Any message you want Graphics to see during processing; delete if not required",
    "doublescale": "0",
    "accumulate": "false",
}


def _serve_fixtures(request: httpx.Request) -> httpx.Response:
    """MockTransport handler: map ``/<name>`` to ``FIXTURE_DIR/<name>``."""
    path = FIXTURE_DIR / request.url.path.lstrip("/")
    if not path.is_file():
        return httpx.Response(404, content=b"not found")
    return httpx.Response(200, content=path.read_bytes())


@pytest.fixture
def served_requests() -> list[str]:
    """Paths requested from the mock server, in request order."""
    return []


@pytest.fixture
def mock_client(served_requests):
    """An ``httpx.AsyncClient`` whose transport serves the fixture directory.

    Closed on teardown; ``HttpFetcher`` leaves a caller-supplied client open.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        served_requests.append(request.url.path)
        return _serve_fixtures(request)

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    yield client
    asyncio.run(client.aclose())


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (loads fixture files end to end)",
    )
