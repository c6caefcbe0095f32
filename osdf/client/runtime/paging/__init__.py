"""Aggregation of paged search results.

The OSDF server returns search results one page at a time. This package
walks the pages of a query in order and concatenates them.

Architecture:
    - definitions.py: Page protocol and the page fetcher signature
    - executors.py: PageAggregator (sequential fetch-until-empty loop)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import FIRST_PAGE, Page, PageFetcher
from .executors import PageAggregator, aggregate_all

__all__ = [
    "FIRST_PAGE",
    "Page",
    "PageFetcher",
    "PageAggregator",
    "aggregate_all",
]
