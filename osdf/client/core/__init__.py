"""Core components."""

from .exceptions import (
    AuthenticationError,
    NotFoundError,
    OSDFError,
    RequestError,
    ResponseError,
    TransportError,
)

__all__ = [
    "OSDFError",
    "TransportError",
    "RequestError",
    "ResponseError",
    "AuthenticationError",
    "NotFoundError",
]
