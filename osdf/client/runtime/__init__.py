"""Runtime components: HTTP execution and paged aggregation."""

from .paging import PageAggregator, aggregate_all
from .rest import RESTTransport, RestRunner

__all__ = [
    "PageAggregator",
    "aggregate_all",
    "RESTTransport",
    "RestRunner",
]
