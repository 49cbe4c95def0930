"""Data models for quaketrack."""

from quaketrack.data.models import (
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

__all__ = [
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
]
