"""
Elasticsearch HTTP API client.

Every operation builds an ElasticRequest, sends it through the shared
transport and hands back the raw httpx.Response. Status codes are not
interpreted: a 404 or 500 is returned like any other response, and
transport failures propagate as httpx exceptions.
"""

import logging
from typing import Optional, Sequence

import httpx

from esclient.es_types.request import ElasticRequest, HttpMethod
from esclient.utils import connection
from esclient.utils.request_builder import bool_param, csv


logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class Client:
    """Client for the Elasticsearch administrative and search API."""

    def __init__(self, es_url: str):
        self.es_url = es_url

    async def _do_request(self, request: ElasticRequest) -> httpx.Response:
        """
        Send a request through the shared transport.

        Args:
            request: The request to issue

        Returns:
            The response, whatever its status
        """
        url = request.url(self.es_url)
        logger.debug("%s: %s", request.method.value, url)

        client = connection.get_http_client()
        return await client.request(
            method=request.method.value,
            url=url,
            params=request.query_params(),
            content=request.content(),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    @staticmethod
    async def shutdown() -> None:
        """
        Disconnect every remaining connection, idle and active.

        This closes the transport shared by all clients in the process.
        """
        await connection.shutdown()

    async def count(
        self, indices: Sequence[str], types: Sequence[str], query: str
    ) -> httpx.Response:
        """
        Count the documents matching a query.

        Args:
            indices: Index names to count in
            types: Document types to count in
            query: The query, as a JSON string
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.GET,
            path=(csv(indices), csv(types), "_count"),
            body=query,
        ))

    async def create_alias(self, actions: str) -> httpx.Response:
        """
        Create aliases.

        The actions fragment is placed verbatim inside the "actions" array,
        for example::

            '{ "add": { "index": "index1", "alias": "alias1" } }, '
            '{ "add": { "index": "index2", "alias": "alias2" } }'

        Args:
            actions: JSON text of one or more alias actions
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.POST,
            path=("_aliases",),
            body='{ "actions": [ ' + actions + ' ] }',
        ))

    async def create_index(self, name: str, settings: Optional[str] = None) -> httpx.Response:
        """
        Create an index, optionally with settings.

        Args:
            name: The name of the index
            settings: Optional settings as a JSON string
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.PUT,
            path=(name,),
            body=settings,
            trailing_slash=True,
        ))

    async def delete(self, index: str, doc_type: str, doc_id: str) -> httpx.Response:
        """
        Delete a document.

        Args:
            index: The name of the index
            doc_type: The type of the document
            doc_id: The ID of the document
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.DELETE,
            path=(index, doc_type, doc_id),
            trailing_slash=True,
        ))

    async def delete_alias(self, index: str, alias: str) -> httpx.Response:
        """Delete an index alias."""
        return await self._do_request(ElasticRequest(
            method=HttpMethod.DELETE,
            path=(index, "_alias", alias),
        ))

    async def delete_by_query(
        self, indices: Sequence[str], types: Sequence[str], query: str
    ) -> httpx.Response:
        """
        Delete the documents matching a query.

        Args:
            indices: Index names to delete from
            types: Document types to delete from
            query: The query, as a JSON string
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.DELETE,
            path=(csv(indices), csv(types), "_query"),
            body=query,
        ))

    async def delete_index(self, name: str) -> httpx.Response:
        """Delete an index."""
        return await self._do_request(ElasticRequest(
            method=HttpMethod.DELETE,
            path=(name,),
        ))

    async def explain(
        self, index: str, doc_type: str, doc_id: str, query: str
    ) -> httpx.Response:
        """
        Explain how a query scores a document.

        Args:
            index: The name of the index
            doc_type: The type of the document
            doc_id: The ID of the document
            query: The query, as a JSON string
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.POST,
            path=(index, doc_type, doc_id, "_explain"),
            body=query,
        ))

    async def get(self, index: str, doc_type: str, doc_id: str) -> httpx.Response:
        """Get a document by ID."""
        return await self._do_request(ElasticRequest(
            method=HttpMethod.GET,
            path=(index, doc_type, doc_id),
        ))

    async def get_aliases(self, index: Optional[str] = None, pattern: str = "*") -> httpx.Response:
        """
        Get aliases for indices.

        Args:
            index: Optional index name. All indices are checked when omitted.
            pattern: Alias names to return. Supports wildcards and comma
                separated lists.
        """
        path = (index,) if index is not None else ()
        return await self._do_request(ElasticRequest(
            method=HttpMethod.GET,
            path=path + ("_alias", pattern),
        ))

    async def get_mapping(self, indices: Sequence[str], types: Sequence[str]) -> httpx.Response:
        """
        Get the mappings for indices and types.

        Args:
            indices: Index names for which mappings will be fetched
            types: Types for which mappings will be fetched
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.GET,
            path=(csv(indices), csv(types), "_mapping"),
        ))

    async def health(
        self,
        indices: Sequence[str] = (),
        level: Optional[str] = None,
        wait_for_status: Optional[str] = None,
        wait_for_relocating_shards: Optional[str] = None,
        wait_for_nodes: Optional[str] = None,
        timeout: Optional[str] = None,
    ) -> httpx.Response:
        """
        Query cluster health.

        Args:
            indices: Index names to restrict the report to
            level: One of cluster, indices or shards
            wait_for_status: Wait until the cluster reaches green, yellow or red
            wait_for_relocating_shards: Number of relocating shards to wait for
            wait_for_nodes: Number of nodes to wait for. A string, since
                ">N" and "ge(N)" notations are allowed.
            timeout: How long to wait when one of the wait_for options is set
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.GET,
            path=("_cluster", "health", csv(indices)),
            params=(
                ("level", level),
                ("wait_for_status", wait_for_status),
                ("wait_for_relocating_shards", wait_for_relocating_shards),
                ("wait_for_nodes", wait_for_nodes),
                ("timeout", timeout),
            ),
        ))

    async def index(
        self,
        index: str,
        doc_type: str,
        data: str,
        doc_id: Optional[str] = None,
        refresh: bool = False,
    ) -> httpx.Response:
        """
        Add or update a JSON document.

        With a doc_id the document is PUT at that ID; without one it is
        POSTed and Elasticsearch generates the ID.

        Args:
            index: The index in which to place the document
            doc_type: The type of the document
            data: The document, as a JSON string
            doc_id: Optional document ID
            refresh: Refresh the index so the document is searchable at once
        """
        if doc_id is None:
            method = HttpMethod.POST
            path = (index, doc_type)
        else:
            method = HttpMethod.PUT
            path = (index, doc_type, doc_id)

        return await self._do_request(ElasticRequest(
            method=method,
            path=path,
            params=(("refresh", bool_param(refresh)),),
            body=data,
        ))

    async def put_mapping(
        self, indices: Sequence[str], doc_type: str, body: str
    ) -> httpx.Response:
        """
        Put a mapping for indices.

        Args:
            indices: Index names to which the mapping will be added
            doc_type: The type the mapping applies to
            body: The mapping, as a JSON string
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.PUT,
            path=(csv(indices), doc_type, "_mapping"),
            body=body,
        ))

    async def refresh(self, index: str) -> httpx.Response:
        """Make all operations since the last refresh available for search."""
        return await self._do_request(ElasticRequest(
            method=HttpMethod.POST,
            path=(index, "_refresh"),
        ))

    async def search(self, index: str, query: str) -> httpx.Response:
        """
        Search for documents.

        Args:
            index: The index to search
            query: The query, as a JSON string
        """
        return await self._do_request(ElasticRequest(
            method=HttpMethod.POST,
            path=(index, "_search"),
            body=query,
        ))

    async def validate(
        self,
        index: str,
        query: str,
        doc_type: Optional[str] = None,
        explain: bool = False,
    ) -> httpx.Response:
        """
        Validate a query.

        Args:
            index: The name of the index
            query: The query, as a JSON string
            doc_type: Optional type to validate against
            explain: Ask for detailed information about the query
        """
        path = (index,) if doc_type is None else (index, doc_type)
        return await self._do_request(ElasticRequest(
            method=HttpMethod.POST,
            path=path + ("_validate", "query"),
            params=(("explain", bool_param(explain)),),
            body=query,
        ))

    async def verify_index(self, name: str) -> httpx.Response:
        """Check that an index exists. A 200 status means it does."""
        return await self._do_request(ElasticRequest(
            method=HttpMethod.HEAD,
            path=(name,),
        ))

    async def verify_type(self, index: str, doc_type: str) -> httpx.Response:
        """Check that a type exists in an index. A 200 status means it does."""
        return await self._do_request(ElasticRequest(
            method=HttpMethod.HEAD,
            path=(index, doc_type),
        ))
