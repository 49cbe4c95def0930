"""quaketrack: recent and location-matched earthquakes from the USGS feed."""

from quaketrack.chart import adapt, format_timestamp
from quaketrack.config import QuakeTrackConfig, create_from_config, load_config
from quaketrack.controller import RequestController
from quaketrack.data import (
    ChartData,
    ControllerState,
    Coordinates,
    QueryIntent,
    RecencyIntent,
    ResultSet,
    ResultStatus,
    SearchIntent,
    SeismicEvent,
    Timeframe,
)
from quaketrack.feed.base import QueryExecutor
from quaketrack.feed.usgs import GENERIC_FAILURE_REASON, RetrievalError, USGSQueryExecutor
from quaketrack.processing import process
from quaketrack.timewindow import resolve, search_window_start

__all__ = [
    # Models
    "ChartData",
    "ControllerState",
    "Coordinates",
    "QueryIntent",
    "RecencyIntent",
    "ResultSet",
    "ResultStatus",
    "SearchIntent",
    "SeismicEvent",
    "Timeframe",
    # Functions
    "adapt",
    "format_timestamp",
    "process",
    "resolve",
    "search_window_start",
    # Protocols
    "QueryExecutor",
    # Feed
    "GENERIC_FAILURE_REASON",
    "RetrievalError",
    "USGSQueryExecutor",
    # Controller
    "RequestController",
    # Config
    "QuakeTrackConfig",
    "create_from_config",
    "load_config",
]
