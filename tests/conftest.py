"""
Pytest configuration and fixtures for the Elasticsearch client tests.
"""

import json
from typing import Callable, List

import httpx
import pytest

from esclient.client import Client
from esclient.utils import connection


ES_URL = "http://localhost:9200"


class RecordingHandler:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body = {"acknowledged": True}
        self.error: Exception = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.method == "HEAD":
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode("utf-8"))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def es_url():
    """Base URL of the fake cluster."""
    return ES_URL


@pytest.fixture
def handler():
    """Request recorder behind the shared transport."""
    return RecordingHandler()


@pytest.fixture
def mock_transport(monkeypatch, handler):
    """Install an httpx client backed by a MockTransport as the shared transport."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    monkeypatch.setattr(connection, "_http_client", http_client)
    yield http_client


@pytest.fixture
def es_client(mock_transport, es_url):
    """Client wired to the mock transport."""
    return Client(es_url)


@pytest.fixture
def sample_query():
    """Sample query body, as the JSON text callers pass in."""
    return json.dumps({"query": {"match_all": {}}})
