"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from time import perf_counter
from typing import Any
from urllib.parse import quote

from ...core.exceptions import AuthenticationError, NotFoundError, RequestError, ResponseError
from .http_client import HTTPResponse
from .transport import RESTTransport

logger = logging.getLogger(__name__)

ERROR_HEADER = "x-osdf-error"

_STATUS_ERRORS: dict[int, type[RequestError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
}


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PUT" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # None accepts any 2xx status
    ok_statuses: frozenset[int] | None = None

    def accepts(self, status: int) -> bool:
        if self.ok_statuses is None:
            return 200 <= status < 300
        return status in self.ok_statuses


class ResponseAdapter:
    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> Any:
        return response.json()


def segment(value: Any) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(str(value), safe="")


def error_from_response(response: HTTPResponse) -> RequestError:
    """Build the exception describing an unaccepted response."""
    message = response.header(ERROR_HEADER) or response.reason or str(response.status)
    error_cls = _STATUS_ERRORS.get(response.status, RequestError)
    return error_cls(message, status_code=response.status)


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        path = spec.build_path(params)
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None

        start = perf_counter()
        response = await self._t.request(spec.method.upper(), path, body=body, headers=headers)
        logger.debug(
            "rest_request",
            extra={
                "endpoint_id": spec.id,
                "method": spec.method.upper(),
                "path": path,
                "status": response.status,
                "latency_ms": (perf_counter() - start) * 1000.0,
            },
        )

        if not spec.accepts(response.status):
            raise error_from_response(response)

        try:
            return adapter.parse(response, params)
        except ValueError as e:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise ResponseError(
                f"Malformed response for {spec.id}: {e}", status_code=response.status
            ) from e
