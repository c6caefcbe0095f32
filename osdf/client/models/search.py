"""Search result models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchPage(BaseModel):
    """One page of search results as returned by the server.

    ``results`` items are node documents; they are kept as the server sent
    them. Link listings (``/nodes/{id}/in``, ``/nodes/{id}/out``) share this
    shape but may omit the total and page fields.
    """

    results: list[Any] = Field(default_factory=list)
    result_count: int = Field(0, ge=0)
    search_result_total: int | None = Field(None, ge=0)
    page: int | None = Field(None, ge=1)

    model_config = ConfigDict(frozen=True, extra="allow")

    @model_validator(mode="before")
    @classmethod
    def default_result_count(cls, data: Any) -> Any:
        """Derive result_count from the result list when the server omits it."""
        if isinstance(data, dict) and data.get("result_count") is None:
            data = {**data, "result_count": len(data.get("results") or [])}
        return data

    @property
    def is_empty(self) -> bool:
        return not self.results


class SearchResults(BaseModel):
    """Results of every page of a query, concatenated in page order.

    ``search_result_total`` is the number of results accumulated, which is
    always equal to ``result_count``.
    """

    results: list[Any] = Field(default_factory=list)
    result_count: int = Field(0, ge=0)
    search_result_total: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_results(cls, results: list[Any]) -> SearchResults:
        return cls(
            results=results,
            result_count=len(results),
            search_result_total=len(results),
        )
