"""Namespace endpoint definitions."""

from __future__ import annotations

from osdf.client.runtime.rest import RestEndpointSpec, segment

LIST_SPEC = RestEndpointSpec(
    id="get_namespaces",
    method="GET",
    build_path=lambda p: "/namespaces",
)

GET_SPEC = RestEndpointSpec(
    id="get_namespace",
    method="GET",
    build_path=lambda p: f"/namespaces/{segment(p['namespace'])}",
)
