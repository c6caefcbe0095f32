"""Node endpoint definitions and adapters.

Nodes are addressed as ``/nodes/{node_id}``; versions, inbound links and
outbound links hang off that path.
"""

from __future__ import annotations

from typing import Any

from osdf.client.core import RequestError
from osdf.client.models import Node, ValidationReport
from osdf.client.runtime.rest import (
    HTTPResponse,
    ResponseAdapter,
    RestEndpointSpec,
    segment,
)

from .common import CREATED, NO_CONTENT, UPDATED


def node_path(params: dict[str, Any]) -> str:
    return f"/nodes/{segment(params['node_id'])}"


def node_body(params: dict[str, Any]) -> dict[str, Any]:
    """Serialize the ``node`` param, accepting a Node or a plain mapping."""
    node = params["node"]
    if isinstance(node, Node):
        return node.to_document()
    return dict(node)


GET_SPEC = RestEndpointSpec(id="get_node", method="GET", build_path=node_path)

GET_VERSION_SPEC = RestEndpointSpec(
    id="get_node_by_version",
    method="GET",
    build_path=lambda p: f"{node_path(p)}/ver/{segment(p['version'])}",
)

IN_LINKS_SPEC = RestEndpointSpec(
    id="get_node_in_links",
    method="GET",
    build_path=lambda p: f"{node_path(p)}/in",
)

OUT_LINKS_SPEC = RestEndpointSpec(
    id="get_node_out_links",
    method="GET",
    build_path=lambda p: f"{node_path(p)}/out",
)

INSERT_SPEC = RestEndpointSpec(
    id="insert_node",
    method="POST",
    build_path=lambda p: "/nodes",
    build_body=node_body,
    ok_statuses=CREATED,
)

EDIT_SPEC = RestEndpointSpec(
    id="edit_node",
    method="PUT",
    build_path=node_path,
    build_body=node_body,
    ok_statuses=UPDATED,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_node",
    method="DELETE",
    build_path=node_path,
    ok_statuses=NO_CONTENT,
)

# 200: document is valid, 422: document is invalid. Both carry a report.
VALIDATE_SPEC = RestEndpointSpec(
    id="validate_node",
    method="POST",
    build_path=lambda p: "/nodes/validate",
    build_body=node_body,
    ok_statuses=frozenset({200, 422}),
)


class NodeAdapter(ResponseAdapter):
    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> Node:
        return Node.model_validate(response.json())


class InsertAdapter(ResponseAdapter):
    """Extracts the new node's ID from the ``Location`` header."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> str:
        location = response.header("location")
        if not location:
            raise RequestError(
                "Server did not return a Location for the inserted node",
                status_code=response.status,
            )
        return location.rstrip("/").rsplit("/", 1)[-1]


class ValidationAdapter(ResponseAdapter):
    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> ValidationReport:
        return ValidationReport(valid=response.status == 200, message=response.body)
