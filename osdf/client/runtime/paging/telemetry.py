"""Structured logging for paged query aggregation.

This module provides telemetry hooks for aggregation runs, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully fetched page.

    Args:
        endpoint_id: Endpoint identifier
        page: One-based page number
        rows: Number of results on the page (0 ends the aggregation)
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch failure that aborts the aggregation.

    Args:
        endpoint_id: Endpoint identifier
        page: One-based page number that failed
        error_type: Exception class name (e.g., "TransportError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_aggregation_complete(
    *,
    endpoint_id: str,
    pages_fetched: int,
    total_results: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of an aggregation run.

    Args:
        endpoint_id: Endpoint identifier
        pages_fetched: Fetch calls made, including the terminating empty page
        total_results: Results accumulated across all pages
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "aggregation_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": pages_fetched,
            "total_results": total_results,
            "total_latency_ms": total_latency_ms,
        },
    )
