"""
Shared HTTP transport management.

One httpx.AsyncClient is shared by every Client in the process. Closing it
with shutdown() affects all of them.
"""

import logging
from typing import Optional

import httpx


logger = logging.getLogger(__name__)

_http_client: Optional[httpx.AsyncClient] = None


def get_http_client() -> httpx.AsyncClient:
    """
    Get or create the process-wide HTTP client.

    Returns:
        The shared httpx.AsyncClient
    """
    global _http_client

    if _http_client is None:
        _http_client = httpx.AsyncClient()
    return _http_client


async def shutdown() -> None:
    """
    Close every connection held by the shared transport, idle and active.

    The closed client stays installed, so requests issued afterwards fail,
    even when no request was made before the shutdown. Call
    reset_http_client() to start over with a fresh transport.
    """
    logger.info("Shutting down shared HTTP transport")
    await get_http_client().aclose()


def reset_http_client() -> None:
    """Forget the shared client so the next request creates a new one."""
    global _http_client
    _http_client = None


async def test_connection(es_url: str) -> bool:
    """
    Check that an Elasticsearch cluster answers at the given URL.

    Args:
        es_url: Base URL of the cluster

    Returns:
        True if the cluster answered with a 2xx status
    """
    try:
        response = await get_http_client().head(es_url)
    except httpx.HTTPError as e:
        logger.warning("Connection test against %s failed: %s", es_url, e)
        return False
    return response.is_success
