"""
Utility functions for the Elasticsearch client.
"""

from .connection import get_http_client, reset_http_client, shutdown, test_connection
from .request_builder import (
    bool_param,
    build_url,
    csv,
    fold_query_params,
    quote_segment,
)

__all__ = [
    # Connection
    "get_http_client",
    "reset_http_client",
    "shutdown",
    "test_connection",
    # Request building
    "bool_param",
    "build_url",
    "csv",
    "fold_query_params",
    "quote_segment",
]
