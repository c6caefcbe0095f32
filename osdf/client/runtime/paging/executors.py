"""Paged query aggregation.

This module provides the PageAggregator class that walks a paged search
one page at a time and concatenates every result into a single
SearchResults.
"""

from __future__ import annotations

from time import perf_counter
from typing import Any

from ...models import SearchResults
from .definitions import FIRST_PAGE, PageFetcher
from .telemetry import log_aggregation_complete, log_page_error, log_page_fetched


class PageAggregator:
    """Fetches pages sequentially until the server returns an empty page.

    The aggregator knows nothing about query dialects: callers pick the
    dialect by choosing which single-page fetch function to pass in. Each
    call to ``aggregate_all`` owns its own accumulator, so one aggregator
    can serve concurrent callers.
    """

    def __init__(self, endpoint_id: str = "query_all") -> None:
        """Initialize page aggregator.

        Args:
            endpoint_id: Identifier used in telemetry records
        """
        self.endpoint_id = endpoint_id

    async def aggregate_all(self, query: Any, fetch_page: PageFetcher) -> SearchResults:
        """Fetch every page of ``query`` and concatenate the results.

        Pages are requested in order starting at 1. Page ``n + 1`` is only
        requested after page ``n`` came back non-empty; the first empty page
        ends the run and contributes nothing.

        Args:
            query: Query passed through to ``fetch_page`` untouched
            fetch_page: Async function ``(query, page_number) -> page``

        Returns:
            SearchResults whose counts equal the number of results gathered

        Raises:
            Whatever ``fetch_page`` raised, unchanged. Results gathered
            before the failure are discarded.
        """
        results: list[Any] = []
        page = FIRST_PAGE
        has_next_page = True
        start = perf_counter()

        while has_next_page:
            page_start = perf_counter()
            try:
                page_data = await fetch_page(query, page)
            except Exception as e:
                log_page_error(
                    endpoint_id=self.endpoint_id,
                    page=page,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            items = page_data.results
            log_page_fetched(
                endpoint_id=self.endpoint_id,
                page=page,
                rows=len(items),
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            if items:
                results.extend(items)
                page += 1
            else:
                has_next_page = False

        log_aggregation_complete(
            endpoint_id=self.endpoint_id,
            pages_fetched=page,
            total_results=len(results),
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return SearchResults.from_results(results)


async def aggregate_all(query: Any, fetch_page: PageFetcher) -> SearchResults:
    """Aggregate every page of ``query`` with a default PageAggregator."""
    return await PageAggregator().aggregate_all(query, fetch_page)
