"""
Type definitions for the Elasticsearch client.
"""

from .request import ElasticRequest, HttpMethod

__all__ = [
    "ElasticRequest",
    "HttpMethod",
]
