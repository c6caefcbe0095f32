"""OSDF REST endpoint registry.

This module collects every endpoint specification and the adapter that
parses its response, keyed by endpoint ID.
"""

from __future__ import annotations

from osdf.client.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import aux_schemas, namespaces, nodes, queries, schemas
from .common import JSONAdapter, NoContentAdapter, SearchPageAdapter
from .info import SPEC as InfoSpec  # noqa: N811
from .info import Adapter as InfoAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "info": (InfoSpec, InfoAdapter),
    # Nodes
    "get_node": (nodes.GET_SPEC, nodes.NodeAdapter),
    "get_node_by_version": (nodes.GET_VERSION_SPEC, nodes.NodeAdapter),
    "get_node_in_links": (nodes.IN_LINKS_SPEC, SearchPageAdapter),
    "get_node_out_links": (nodes.OUT_LINKS_SPEC, SearchPageAdapter),
    "insert_node": (nodes.INSERT_SPEC, nodes.InsertAdapter),
    "edit_node": (nodes.EDIT_SPEC, NoContentAdapter),
    "delete_node": (nodes.DELETE_SPEC, NoContentAdapter),
    "validate_node": (nodes.VALIDATE_SPEC, nodes.ValidationAdapter),
    # Namespaces
    "get_namespaces": (namespaces.LIST_SPEC, JSONAdapter),
    "get_namespace": (namespaces.GET_SPEC, JSONAdapter),
    # Schemas
    "get_schemas": (schemas.LIST_SPEC, JSONAdapter),
    "get_schema": (schemas.GET_SPEC, JSONAdapter),
    "insert_schema": (schemas.INSERT_SPEC, NoContentAdapter),
    "edit_schema": (schemas.EDIT_SPEC, NoContentAdapter),
    "delete_schema": (schemas.DELETE_SPEC, NoContentAdapter),
    # Auxiliary schemas
    "get_aux_schemas": (aux_schemas.LIST_SPEC, JSONAdapter),
    "get_aux_schema": (aux_schemas.GET_SPEC, JSONAdapter),
    "insert_aux_schema": (aux_schemas.INSERT_SPEC, NoContentAdapter),
    "edit_aux_schema": (aux_schemas.EDIT_SPEC, NoContentAdapter),
    "delete_aux_schema": (aux_schemas.DELETE_SPEC, NoContentAdapter),
    # Search
    "query": (queries.QUERY_SPEC, SearchPageAdapter),
    "query_page": (queries.QUERY_PAGE_SPEC, SearchPageAdapter),
    "oql_query": (queries.OQL_QUERY_SPEC, SearchPageAdapter),
    "oql_query_page": (queries.OQL_QUERY_PAGE_SPEC, SearchPageAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "get_node", "query_page")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "get_node", "query_page")

    Returns:
        Adapter class if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return sorted(_ENDPOINT_REGISTRY)


__all__ = ["get_endpoint_spec", "get_endpoint_adapter", "list_endpoints"]
