"""OSDFClient facade over the OSDF REST API.

Architecture:
    Each public method maps to one endpoint in the registry and is executed
    by RestRunner over a shared RESTTransport. The two ``*_all`` searches
    are the exception: they hand the matching single-page search to a
    PageAggregator, which walks pages until one comes back empty.

Design Decisions:
    - Every operation is a coroutine; ``callback_compatible`` adds the
      error-first callback convention at the boundary only
    - Transport injection allows testing without a server
    - Context manager pattern ensures the HTTP session is released

See Also:
    - PageAggregator: The pagination loop behind query_all/oql_query_all
    - ClientSettings: Connection configuration
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..config import ClientSettings
from ..endpoints import get_endpoint_adapter, get_endpoint_spec
from ..models import Node, SearchPage, SearchResults, ServerInfo, ValidationReport
from ..runtime.paging import FIRST_PAGE, PageAggregator
from ..runtime.rest import RESTTransport, RestRunner
from .callbacks import callback_compatible

logger = logging.getLogger(__name__)

NodeData = Node | Mapping[str, Any]


def _require(value: Any, name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{name} must be a non-empty value")


def _require_page(page: Any) -> None:
    if isinstance(page, bool) or not isinstance(page, int) or page < FIRST_PAGE:
        raise ValueError(f"page must be an integer >= {FIRST_PAGE}, got {page!r}")


class OSDFClient:
    """Client for an OSDF server.

    Every operation can be awaited, or called with ``callback=`` to receive
    ``callback(error, result)`` on completion.

    Example:
        >>> async with OSDFClient(host="osdf.example.org", auth="user:pass") as osdf:
        ...     info = await osdf.info()
        ...     everything = await osdf.query_all({"query": {"match_all": {}}}, "test")
        ...     print(info.title, everything.result_count)
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        host: str | None = None,
        port: int | str | None = None,
        auth: str | None = None,
        ssl: bool | None = None,
        timeout: float | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Connection settings (defaults to a local server)
            host, port, auth, ssl, timeout: Overrides applied on top of settings
            transport: Optional RESTTransport instance (built from settings if
                not provided)
        """
        overrides = {
            "host": host,
            "port": port,
            "auth": auth,
            "ssl": ssl,
            "timeout": timeout,
        }
        base = settings.model_dump() if settings is not None else {}
        self.settings = ClientSettings.from_mapping(
            {**base, **{k: v for k, v in overrides.items() if v is not None}}
        )
        self._transport = transport or RESTTransport(
            self.settings.base_url,
            timeout=self.settings.timeout,
            auth=self.settings.credentials,
        )
        self._runner = RestRunner(self._transport)
        logger.debug("osdf_client_created", extra={"base_url": self.settings.base_url})

    @classmethod
    def setup(cls, settings: Mapping[str, Any]) -> OSDFClient:
        """Create a client from a ``{"host", "port", "auth", "ssl"}`` mapping."""
        return cls(ClientSettings.from_mapping(settings))

    @classmethod
    def from_env(cls) -> OSDFClient:
        """Create a client configured from ``OSDF_*`` environment variables."""
        return cls(ClientSettings.from_env())

    @property
    def base_url(self) -> str:
        return self.settings.base_url

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Execute a registered endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "get_node", "query_page")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    # ----------------------
    # Server
    # ----------------------
    @callback_compatible
    async def info(self) -> ServerInfo:
        """Fetch server metadata, including administrative contacts."""
        return await self.fetch("info", {})

    # ----------------------
    # Nodes
    # ----------------------
    @callback_compatible
    async def get_node(self, node_id: str) -> Node:
        """Fetch the latest version of a node."""
        _require(node_id, "node_id")
        return await self.fetch("get_node", {"node_id": node_id})

    @callback_compatible
    async def get_node_by_version(self, node_id: str, version: int) -> Node:
        """Fetch a specific version of a node."""
        _require(node_id, "node_id")
        _require(version, "version")
        return await self.fetch("get_node_by_version", {"node_id": node_id, "version": version})

    @callback_compatible
    async def get_node_in_links(self, node_id: str) -> SearchPage:
        """Fetch the nodes that link TO this node."""
        _require(node_id, "node_id")
        return await self.fetch("get_node_in_links", {"node_id": node_id})

    @callback_compatible
    async def get_node_out_links(self, node_id: str) -> SearchPage:
        """Fetch the nodes this node links to."""
        _require(node_id, "node_id")
        return await self.fetch("get_node_out_links", {"node_id": node_id})

    @callback_compatible
    async def insert_node(self, node: NodeData) -> str:
        """Create a node and return the ID the server assigned to it."""
        return await self.fetch("insert_node", {"node": node})

    @callback_compatible
    async def edit_node(self, node_id: str, node: NodeData) -> None:
        """Replace a node's document.

        The server rejects edits whose ``ver`` is not the node's current
        version.
        """
        _require(node_id, "node_id")
        await self.fetch("edit_node", {"node_id": node_id, "node": node})

    @callback_compatible
    async def delete_node(self, node_id: str) -> None:
        _require(node_id, "node_id")
        await self.fetch("delete_node", {"node_id": node_id})

    @callback_compatible
    async def validate_node(self, node: NodeData) -> ValidationReport:
        """Check a document against node structure rules and its node_type schema.

        An invalid document is not an error: the report has ``valid=False``
        and the server's explanation in ``message``.
        """
        return await self.fetch("validate_node", {"node": node})

    # ----------------------
    # Namespaces
    # ----------------------
    @callback_compatible
    async def get_namespaces(self) -> Any:
        return await self.fetch("get_namespaces", {})

    @callback_compatible
    async def get_namespace(self, namespace: str) -> Any:
        _require(namespace, "namespace")
        return await self.fetch("get_namespace", {"namespace": namespace})

    # ----------------------
    # Schemas
    # ----------------------
    @callback_compatible
    async def get_schemas(self, namespace: str) -> Any:
        """Fetch every schema registered in a namespace, keyed by name."""
        _require(namespace, "namespace")
        return await self.fetch("get_schemas", {"namespace": namespace})

    @callback_compatible
    async def get_schema(self, namespace: str, name: str) -> Any:
        _require(namespace, "namespace")
        _require(name, "name")
        return await self.fetch("get_schema", {"namespace": namespace, "name": name})

    @callback_compatible
    async def insert_schema(self, namespace: str, name: str, schema: Any) -> None:
        """Register a JSON-Schema for nodes whose node_type is ``name``."""
        _require(namespace, "namespace")
        _require(name, "name")
        await self.fetch(
            "insert_schema", {"namespace": namespace, "name": name, "schema": schema}
        )

    @callback_compatible
    async def edit_schema(self, namespace: str, name: str, schema: Any) -> None:
        """Replace a schema. Later node inserts and edits must satisfy it."""
        _require(namespace, "namespace")
        _require(name, "name")
        await self.fetch("edit_schema", {"namespace": namespace, "name": name, "schema": schema})

    @callback_compatible
    async def delete_schema(self, namespace: str, name: str) -> None:
        _require(namespace, "namespace")
        _require(name, "name")
        await self.fetch("delete_schema", {"namespace": namespace, "name": name})

    # ----------------------
    # Auxiliary schemas
    # ----------------------
    @callback_compatible
    async def get_aux_schemas(self, namespace: str) -> Any:
        _require(namespace, "namespace")
        return await self.fetch("get_aux_schemas", {"namespace": namespace})

    @callback_compatible
    async def get_aux_schema(self, namespace: str, name: str) -> Any:
        _require(namespace, "namespace")
        _require(name, "name")
        return await self.fetch("get_aux_schema", {"namespace": namespace, "name": name})

    @callback_compatible
    async def insert_aux_schema(self, namespace: str, name: str, aux_schema: Any) -> None:
        _require(namespace, "namespace")
        _require(name, "name")
        await self.fetch(
            "insert_aux_schema", {"namespace": namespace, "name": name, "schema": aux_schema}
        )

    @callback_compatible
    async def edit_aux_schema(self, namespace: str, name: str, aux_schema: Any) -> None:
        _require(namespace, "namespace")
        _require(name, "name")
        await self.fetch(
            "edit_aux_schema", {"namespace": namespace, "name": name, "schema": aux_schema}
        )

    @callback_compatible
    async def delete_aux_schema(self, namespace: str, name: str) -> None:
        _require(namespace, "namespace")
        _require(name, "name")
        await self.fetch("delete_aux_schema", {"namespace": namespace, "name": name})

    # ----------------------
    # Search
    # ----------------------
    @callback_compatible
    async def query(self, es_query: Any, namespace: str) -> SearchPage:
        """Search with an ElasticSearch DSL query; returns the first page."""
        _require(namespace, "namespace")
        return await self.fetch("query", {"query": es_query, "namespace": namespace})

    @callback_compatible
    async def query_page(self, es_query: Any, namespace: str, page: int) -> SearchPage:
        """Fetch one page of ElasticSearch DSL query results."""
        _require(namespace, "namespace")
        _require_page(page)
        return await self.fetch(
            "query_page", {"query": es_query, "namespace": namespace, "page": page}
        )

    @callback_compatible
    async def query_all(self, es_query: Any, namespace: str) -> SearchResults:
        """Fetch every page of ElasticSearch DSL query results.

        This can take a long time and a lot of memory for broad queries;
        page through ``query_page`` instead when the result set is large.
        """
        _require(namespace, "namespace")
        aggregator = PageAggregator(endpoint_id="query_all")
        return await aggregator.aggregate_all(
            es_query, lambda query, page: self.query_page(query, namespace, page)
        )

    @callback_compatible
    async def oql_query(self, oql_query: str, namespace: str) -> SearchPage:
        """Search with an OQL (OSDF Query Language) string; returns the first page."""
        _require(namespace, "namespace")
        return await self.fetch("oql_query", {"query": oql_query, "namespace": namespace})

    @callback_compatible
    async def oql_query_page(self, oql_query: str, namespace: str, page: int) -> SearchPage:
        """Fetch one page of OQL query results."""
        _require(namespace, "namespace")
        _require_page(page)
        return await self.fetch(
            "oql_query_page", {"query": oql_query, "namespace": namespace, "page": page}
        )

    @callback_compatible
    async def oql_query_all(self, oql_query: str, namespace: str) -> SearchResults:
        """Fetch every page of OQL query results.

        Same trade-offs as ``query_all``.
        """
        _require(namespace, "namespace")
        aggregator = PageAggregator(endpoint_id="oql_query_all")
        return await aggregator.aggregate_all(
            oql_query, lambda query, page: self.oql_query_page(query, namespace, page)
        )

    # ----------------------
    # Lifecycle
    # ----------------------
    async def close(self) -> None:
        """Release the HTTP session. The client stays usable afterwards."""
        await self._transport.close()

    async def __aenter__(self) -> OSDFClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
