"""
URL and query string building utilities for Elasticsearch requests.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
from urllib.parse import quote


# Characters Elasticsearch uses as syntax inside a path segment:
# index lists, wildcards and cross-cluster prefixes.
SEGMENT_SAFE_CHARS = ",*:"


def csv(values: Iterable[str]) -> str:
    """
    Join names into Elasticsearch's multi-index / multi-type syntax.

    Args:
        values: Index or type names, in order

    Returns:
        Comma separated names ("" for an empty sequence)
    """
    return ",".join(values)


def quote_segment(segment: str) -> str:
    """URL-escape a single path segment."""
    return quote(segment, safe=SEGMENT_SAFE_CHARS)


def build_url(
    base_url: str,
    segments: Sequence[str],
    trailing_slash: bool = False,
) -> str:
    """
    Join path segments onto a base URL.

    Empty segments are kept, so an empty index list still occupies its
    position in the path.

    Args:
        base_url: Cluster URL, e.g. "http://localhost:9200"
        segments: Ordered path segments
        trailing_slash: Append "/" to the final URL

    Returns:
        The full URL without a query string
    """
    url = base_url.rstrip("/")
    for segment in segments:
        url = f"{url}/{quote_segment(segment)}"
    if trailing_slash:
        url += "/"
    return url


def fold_query_params(
    params: Iterable[Tuple[str, Optional[str]]],
) -> List[Tuple[str, str]]:
    """
    Keep only the parameters that were supplied, preserving their order.

    Args:
        params: (wire name, optional value) pairs

    Returns:
        (wire name, value) pairs with every None value dropped
    """
    return [(name, value) for name, value in params if value is not None]


def bool_param(value: bool) -> str:
    """Render a flag the way Elasticsearch expects it in a query string."""
    return "true" if value else "false"
