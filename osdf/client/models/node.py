"""Node document model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NodeACL(BaseModel):
    """Read/write access lists of a node."""

    read: list[str] = Field(default_factory=lambda: ["all"])
    write: list[str] = Field(default_factory=lambda: ["all"])

    model_config = ConfigDict(frozen=True)


class Node(BaseModel):
    """An OSDF node document.

    ``id``, ``ver`` and ``hash`` are assigned by the server and are absent
    from documents that have not been inserted yet. Keys the model does not
    know about are preserved so documents survive a read-modify-write cycle.
    """

    ns: str = Field(..., min_length=1)
    node_type: str = Field(..., min_length=1)
    acl: NodeACL = Field(default_factory=NodeACL)
    linkage: dict[str, list[str]] = Field(default_factory=dict)
    meta: dict[str, Any] = Field(default_factory=dict)
    id: str | None = None
    ver: int | None = Field(None, ge=1)
    hash: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    def to_document(self) -> dict[str, Any]:
        """Serialize to the JSON document the server expects."""
        return self.model_dump(mode="json", exclude_none=True)
