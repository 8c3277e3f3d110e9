"""
Asynchronous client for the Elasticsearch HTTP API.
"""

from .client import Client
from .es_types import ElasticRequest, HttpMethod
from .utils.connection import shutdown

__all__ = [
    "Client",
    "ElasticRequest",
    "HttpMethod",
    "shutdown",
]
