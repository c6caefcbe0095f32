"""Response adapters shared by several endpoints."""

from __future__ import annotations

from typing import Any

from osdf.client.models import SearchPage
from osdf.client.runtime.rest import HTTPResponse, ResponseAdapter

CREATED = frozenset({201})
NO_CONTENT = frozenset({204})
UPDATED = frozenset({200})


class JSONAdapter(ResponseAdapter):
    """Returns the decoded JSON body as-is."""


class NoContentAdapter(ResponseAdapter):
    """For operations whose only result is success."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> None:
        return None


class SearchPageAdapter(ResponseAdapter):
    """Parses a page of search or link results."""

    def parse(self, response: HTTPResponse, params: dict[str, Any]) -> SearchPage:
        return SearchPage.model_validate(response.json() or {})
