"""Auxiliary schema endpoint definitions.

Auxiliary schemas are reusable fragments that regular schemas reference.
They live under ``/namespaces/{namespace}/schemas/aux``. Unlike regular
schemas, an edit sends the bare schema rather than a name/schema document.
"""

from __future__ import annotations

from typing import Any

from osdf.client.runtime.rest import RestEndpointSpec, segment

from .common import CREATED, NO_CONTENT, UPDATED
from .schemas import schema_document, schemas_path


def aux_schemas_path(params: dict[str, Any]) -> str:
    return f"{schemas_path(params)}/aux"


def aux_schema_path(params: dict[str, Any]) -> str:
    return f"{aux_schemas_path(params)}/{segment(params['name'])}"


LIST_SPEC = RestEndpointSpec(
    id="get_aux_schemas",
    method="GET",
    build_path=lambda p: f"{aux_schemas_path(p)}/",
)

GET_SPEC = RestEndpointSpec(id="get_aux_schema", method="GET", build_path=aux_schema_path)

INSERT_SPEC = RestEndpointSpec(
    id="insert_aux_schema",
    method="POST",
    build_path=aux_schemas_path,
    build_body=schema_document,
    ok_statuses=CREATED,
)

EDIT_SPEC = RestEndpointSpec(
    id="edit_aux_schema",
    method="PUT",
    build_path=aux_schema_path,
    build_body=lambda p: p["schema"],
    ok_statuses=UPDATED,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_aux_schema",
    method="DELETE",
    build_path=aux_schema_path,
    ok_statuses=NO_CONTENT,
)
