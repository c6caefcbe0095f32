"""Server info endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from osdf.client.models import ServerInfo
from osdf.client.runtime.rest import HTTPResponse, ResponseAdapter, RestEndpointSpec

SPEC = RestEndpointSpec(
    id="info",
    method="GET",
    build_path=lambda params: "/info",
)


class Adapter(ResponseAdapter):
    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> ServerInfo:
        return ServerInfo.model_validate(response.json())
