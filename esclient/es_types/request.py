"""
Request descriptor types for the Elasticsearch client.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from esclient.utils.request_builder import build_url, fold_query_params


class HttpMethod(str, Enum):
    """HTTP verbs used by the Elasticsearch API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"


@dataclass(frozen=True)
class ElasticRequest:
    """
    A single request against an Elasticsearch cluster.

    Path segments and parameters are stored as tuples, so a descriptor
    cannot change once built. Lists are accepted and copied.
    """
    method: HttpMethod
    path: Tuple[str, ...]
    params: Tuple[Tuple[str, Optional[str]], ...] = ()
    body: Optional[str] = None
    trailing_slash: bool = False

    def __post_init__(self):
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "params", tuple(tuple(pair) for pair in self.params))

    def url(self, base_url: str) -> str:
        """Build the full URL (without query string) against a base URL."""
        return build_url(base_url, self.path, trailing_slash=self.trailing_slash)

    def query_params(self) -> List[Tuple[str, str]]:
        """Query parameters that were actually supplied."""
        return fold_query_params(self.params)

    def content(self) -> Optional[bytes]:
        if self.body is None:
            return None
        return self.body.encode("utf-8")
