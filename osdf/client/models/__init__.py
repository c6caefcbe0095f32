"""Data models for OSDF documents and responses.

Architecture:
    Pydantic v2 models, frozen so responses cannot be modified in place.
    Server documents keep unknown keys (``extra="allow"``) so newer server
    versions do not break parsing.

Model Categories:
    - Documents: Node, NodeACL
    - Search: SearchPage, SearchResults
    - Metadata: ServerInfo
    - Validation: ValidationReport
"""

from .info import ServerInfo
from .node import Node, NodeACL
from .search import SearchPage, SearchResults
from .validation import ValidationReport

__all__ = [
    "Node",
    "NodeACL",
    "SearchPage",
    "SearchResults",
    "ServerInfo",
    "ValidationReport",
]
