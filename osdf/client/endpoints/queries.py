"""Search endpoint definitions.

Two dialects are supported. ElasticSearch queries are JSON documents posted
to ``/nodes/query/{namespace}``; OQL queries are strings posted verbatim to
``/nodes/oql/{namespace}``. Either may be suffixed with ``/page/{page}``.
Bodies are passed through untouched: the transport sends strings as text and
anything else as JSON.
"""

from __future__ import annotations

from typing import Any

from osdf.client.runtime.rest import RestEndpointSpec, segment


def _search_path(kind: str, params: dict[str, Any]) -> str:
    path = f"/nodes/{kind}/{segment(params['namespace'])}"
    if params.get("page") is not None:
        path = f"{path}/page/{int(params['page'])}"
    return path


def _query_body(params: dict[str, Any]) -> Any:
    return params["query"]


QUERY_SPEC = RestEndpointSpec(
    id="query",
    method="POST",
    build_path=lambda p: _search_path("query", p),
    build_body=_query_body,
)

QUERY_PAGE_SPEC = RestEndpointSpec(
    id="query_page",
    method="POST",
    build_path=lambda p: _search_path("query", p),
    build_body=_query_body,
)

OQL_QUERY_SPEC = RestEndpointSpec(
    id="oql_query",
    method="POST",
    build_path=lambda p: _search_path("oql", p),
    build_body=_query_body,
)

OQL_QUERY_PAGE_SPEC = RestEndpointSpec(
    id="oql_query_page",
    method="POST",
    build_path=lambda p: _search_path("oql", p),
    build_body=_query_body,
)
