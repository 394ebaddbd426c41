"""Pytest fixtures for google_search tests."""

from unittest.mock import MagicMock

import pytest
import requests

from google_search_mcp.search.clients import GoogleSearchClient
from google_search_mcp.search.search_orchestrator import SearchOrchestrator
from google_search_mcp.search.support import RateGate


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def _make_response(status_code: int = 200, json_body=None, reason: str = "OK"):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.reason = reason
    response.json.return_value = json_body if json_body is not None else {}
    return response


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_gate(clock):
    return RateGate(max_per_minute=10, clock=clock)


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return GoogleSearchClient(api_key="test-key", engine_id="test-cx", session=session)


@pytest.fixture
def orchestrator(client, rate_gate):
    return SearchOrchestrator(client=client, rate_gate=rate_gate)


@pytest.fixture
def two_items_body():
    """Trimmed Custom Search response with two organic items."""
    return {
        "kind": "customsearch#search",
        "searchInformation": {"totalResults": "2"},
        "items": [
            {
                "kind": "customsearch#result",
                "title": "Best Italian Restaurants in Boston",
                "link": "https://example.com/boston-italian",
                "displayLink": "example.com",
                "snippet": "Our picks for pasta in the North End.",
            },
            {
                "kind": "customsearch#result",
                "title": "North End Dining Guide",
                "link": "https://example.org/north-end",
                "displayLink": "example.org",
                "snippet": "Where to eat in Boston's Little Italy.",
            },
        ],
    }


@pytest.fixture
def make_response():
    """Build a stand-in for requests.Response."""
    return _make_response
