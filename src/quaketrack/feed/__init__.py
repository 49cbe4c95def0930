from quaketrack.feed.base import QueryExecutor
from quaketrack.feed.usgs import (
    GENERIC_FAILURE_REASON,
    USGS_API_URL,
    RetrievalError,
    USGSQueryExecutor,
)

__all__ = [
    "GENERIC_FAILURE_REASON",
    "QueryExecutor",
    "RetrievalError",
    "USGSQueryExecutor",
    "USGS_API_URL",
]
