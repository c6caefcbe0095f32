"""OSDF client - async and callback access to the OSDF REST API."""

from .api import Callback, OSDFClient
from .config import ClientSettings
from .core import (
    AuthenticationError,
    NotFoundError,
    OSDFError,
    RequestError,
    ResponseError,
    TransportError,
)
from .models import (
    Node,
    NodeACL,
    SearchPage,
    SearchResults,
    ServerInfo,
    ValidationReport,
)
from .runtime.paging import PageAggregator, aggregate_all

__version__ = "0.1.0"

__all__ = [
    "OSDFClient",
    "ClientSettings",
    "Callback",
    # Errors
    "OSDFError",
    "TransportError",
    "RequestError",
    "ResponseError",
    "AuthenticationError",
    "NotFoundError",
    # Models
    "Node",
    "NodeACL",
    "SearchPage",
    "SearchResults",
    "ServerInfo",
    "ValidationReport",
    # Paging
    "PageAggregator",
    "aggregate_all",
]
