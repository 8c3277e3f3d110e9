"""
FastMCP server exposing Elasticsearch operations as tools.

Tools:
- health: Check connectivity and configuration
- cluster_health: Cluster health report
- search_index / count_documents: Query DSL searches and counts
- get_document / index_document: Single document access
- index_exists / list_aliases: Index metadata
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
from dotenv import load_dotenv
from fastmcp import FastMCP

from esclient.client import Client
from esclient.config import get_current_environment, get_elasticsearch_config
from esclient.utils.connection import test_connection


logger = logging.getLogger(__name__)

# Load environment variables
load_dotenv()

# Initialize MCP server
mcp = FastMCP("esclient")


def get_client() -> Client:
    """Build a client for the configured cluster."""
    return Client(get_elasticsearch_config()["url"])


def response_to_result(response: httpx.Response) -> Dict[str, Any]:
    """
    Convert a raw response into a JSON-serializable tool result.

    Args:
        response: Response returned by a Client operation

    Returns:
        Dictionary with the status code and the decoded body
    """
    try:
        body = response.json() if response.content else None
    except ValueError:
        body = response.text
    return {"status": response.status_code, "body": body}


async def _run(operation) -> Dict[str, Any]:
    try:
        response = await operation
    except httpx.HTTPError as e:
        logger.warning("Elasticsearch request failed: %s", e)
        return {"error": True, "message": f"Elasticsearch request failed: {str(e)}"}
    return response_to_result(response)


# ========== HEALTH TOOL ==========

@mcp.tool()
async def health() -> Dict[str, Any]:
    """
    Check connectivity and configuration for the Elasticsearch cluster.
    """
    env = get_current_environment()
    url = get_elasticsearch_config()["url"]
    connected = await test_connection(url)

    return {
        "overall_status": "healthy" if connected else "degraded",
        "environment": env,
        "services": {
            "elasticsearch": {
                "service": "elasticsearch",
                "connected": connected,
                "url": url,
            }
        },
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ========== PRIMITIVE TOOLS ==========

@mcp.tool()
async def cluster_health(
    indices: Optional[List[str]] = None,
    level: Optional[str] = None,
    wait_for_status: Optional[str] = None,
    timeout: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Cluster health report.

    Args:
        indices: Restrict the report to these indices
        level: One of cluster, indices or shards
        wait_for_status: Wait for green, yellow or red
        timeout: How long to wait (e.g. "30s")
    """
    return await _run(get_client().health(
        indices=indices or [],
        level=level,
        wait_for_status=wait_for_status,
        timeout=timeout,
    ))


@mcp.tool()
async def search_index(index: str, query: Dict[str, Any]) -> Dict[str, Any]:
    """
    Run a search request body against an index.

    Args:
        index: Index name or pattern (e.g. "logs-*")
        query: Full search request body (query, size, sort, aggs...)
    """
    return await _run(get_client().search(index, json.dumps(query)))


@mcp.tool()
async def count_documents(
    indices: List[str],
    query: Dict[str, Any],
    types: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """
    Count the documents matching a query.

    Args:
        indices: Index names
        query: Request body containing the query
        types: Optional document types
    """
    return await _run(get_client().count(indices, types or [], json.dumps(query)))


@mcp.tool()
async def get_document(index: str, doc_type: str, doc_id: str) -> Dict[str, Any]:
    """Fetch a single document by ID."""
    return await _run(get_client().get(index, doc_type, doc_id))


@mcp.tool()
async def index_document(
    index: str,
    doc_type: str,
    document: Dict[str, Any],
    doc_id: Optional[str] = None,
    refresh: bool = False,
) -> Dict[str, Any]:
    """
    Add or replace a document.

    Args:
        index: Target index
        doc_type: Document type
        document: The document body
        doc_id: Optional ID; generated by Elasticsearch when omitted
        refresh: Make the document searchable immediately
    """
    return await _run(get_client().index(
        index, doc_type, json.dumps(document), doc_id=doc_id, refresh=refresh
    ))


@mcp.tool()
async def index_exists(index: str) -> Dict[str, Any]:
    """Check whether an index exists."""
    result = await _run(get_client().verify_index(index))
    if result.get("error"):
        return result
    return {"index": index, "exists": result["status"] == 200}


@mcp.tool()
async def list_aliases(index: Optional[str] = None, pattern: str = "*") -> Dict[str, Any]:
    """
    List aliases.

    Args:
        index: Optional index to restrict the lookup to
        pattern: Alias name pattern, wildcards allowed
    """
    return await _run(get_client().get_aliases(index, pattern))


if __name__ == "__main__":
    mcp.run()
