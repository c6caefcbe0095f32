"""REST runtime abstractions."""

from .http_client import HTTPClient, HTTPResponse
from .runner import (
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
    error_from_response,
    segment,
)
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "error_from_response",
    "segment",
]
