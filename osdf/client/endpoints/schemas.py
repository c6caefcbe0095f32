"""Schema endpoint definitions.

Schemas live under ``/namespaces/{namespace}/schemas``. Inserts and edits
send a ``{"name": ..., "schema": ...}`` document.
"""

from __future__ import annotations

from typing import Any

from osdf.client.runtime.rest import RestEndpointSpec, segment

from .common import CREATED, NO_CONTENT, UPDATED


def schemas_path(params: dict[str, Any]) -> str:
    return f"/namespaces/{segment(params['namespace'])}/schemas"


def schema_path(params: dict[str, Any]) -> str:
    return f"{schemas_path(params)}/{segment(params['name'])}"


def schema_document(params: dict[str, Any]) -> dict[str, Any]:
    return {"name": params["name"], "schema": params["schema"]}


LIST_SPEC = RestEndpointSpec(
    id="get_schemas",
    method="GET",
    build_path=lambda p: f"{schemas_path(p)}/",
)

GET_SPEC = RestEndpointSpec(id="get_schema", method="GET", build_path=schema_path)

INSERT_SPEC = RestEndpointSpec(
    id="insert_schema",
    method="POST",
    build_path=schemas_path,
    build_body=schema_document,
    ok_statuses=CREATED,
)

EDIT_SPEC = RestEndpointSpec(
    id="edit_schema",
    method="PUT",
    build_path=schema_path,
    build_body=schema_document,
    ok_statuses=UPDATED,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_schema",
    method="DELETE",
    build_path=schema_path,
    ok_statuses=NO_CONTENT,
)
