"""
End-to-end tests against a real Elasticsearch cluster.

Run with ELASTIC_URL set, e.g. ``python run_tests.py manual``.
"""

import json
import os
import uuid

import pytest
import pytest_asyncio

from esclient.client import Client
from esclient.utils import connection


@pytest_asyncio.fixture
async def live_client():
    es_url = os.getenv("ELASTIC_URL")
    if not es_url:
        pytest.skip("ELASTIC_URL not set - skipping real ES test")

    connection.reset_http_client()
    yield Client(es_url)
    await connection.shutdown()
    connection.reset_http_client()


@pytest.mark.manual
class TestLiveCluster:
    """Round trips against a running cluster."""

    @pytest.mark.asyncio
    async def test_cluster_health(self, live_client):
        response = await live_client.health(level="cluster")

        assert response.status_code == 200
        assert response.json()["status"] in ("green", "yellow", "red")

    @pytest.mark.asyncio
    async def test_index_lifecycle(self, live_client):
        name = f"esclient-test-{uuid.uuid4().hex[:8]}"

        try:
            response = await live_client.create_index(name)
            assert response.status_code == 200

            response = await live_client.verify_index(name)
            assert response.status_code == 200

            response = await live_client.search(name, json.dumps({"query": {"match_all": {}}}))
            assert response.status_code == 200
        finally:
            await live_client.delete_index(name)

        response = await live_client.verify_index(name)
        assert response.status_code == 404
