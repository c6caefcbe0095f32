"""Paging definitions shared by the aggregator and its telemetry."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

FIRST_PAGE = 1


class Page(Protocol):
    """Anything carrying an ordered ``results`` list, e.g. ``SearchPage``."""

    @property
    def results(self) -> list[Any]: ...


# fetch_page(query, page_number) -> Page
PageFetcher = Callable[[Any, int], Awaitable[Page]]
