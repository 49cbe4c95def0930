"""Core data models for quaketrack."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Literal


class Timeframe(StrEnum):
    """Trailing time windows offered in recency mode."""

    HOUR = "hour"
    DAY = "day"
    WEEK = "week"


class ResultStatus(StrEnum):
    """Outcome tag attached to every ResultSet."""

    OK = "ok"
    EMPTY_FOR_QUERY = "empty_for_query"
    FAILED = "failed"


@dataclass(frozen=True)
class Coordinates:
    """Hypocenter position as reported by the feed (depth in km)."""

    longitude: float
    latitude: float
    depth: float


@dataclass(frozen=True)
class SeismicEvent:
    """A single earthquake record from the feed."""

    id: str
    place: str
    magnitude: float | None
    occurred_at: datetime
    coordinates: Coordinates


@dataclass(frozen=True)
class RecencyIntent:
    """Strongest events within a trailing time window."""

    timeframe: Timeframe
    mode: Literal["recency"] = field(default="recency", init=False)


@dataclass(frozen=True)
class SearchIntent:
    """Events from the past year whose place text matches ``location_text``."""

    location_text: str
    mode: Literal["search"] = field(default="search", init=False)

    def __post_init__(self) -> None:
        if not self.location_text.strip():
            raise ValueError("Search text must not be empty")


QueryIntent = RecencyIntent | SearchIntent


@dataclass(frozen=True)
class ResultSet:
    """Ordered events plus the status of the query that produced them.

    ``query`` carries the search text for ``EMPTY_FOR_QUERY``; ``reason``
    carries the failure description for ``FAILED``.
    """

    events: tuple[SeismicEvent, ...] = ()
    status: ResultStatus = ResultStatus.OK
    query: str | None = None
    reason: str | None = None

    @classmethod
    def ok(cls, events: list[SeismicEvent] | tuple[SeismicEvent, ...]) -> "ResultSet":
        return cls(events=tuple(events))

    @classmethod
    def empty_for_query(cls, query: str) -> "ResultSet":
        return cls(status=ResultStatus.EMPTY_FOR_QUERY, query=query)

    @classmethod
    def failed(cls, reason: str) -> "ResultSet":
        return cls(status=ResultStatus.FAILED, reason=reason)

    def __len__(self) -> int:
        return len(self.events)


@dataclass(frozen=True)
class ChartData:
    """Parallel label/value series for a magnitude-over-time chart."""

    labels: tuple[str, ...] = ()
    values: tuple[float | None, ...] = ()
    series_label: str = "Magnitude"
    x_axis_title: str = "Time of Earthquake"
    y_axis_title: str = "Magnitude"


@dataclass(frozen=True)
class ControllerState:
    """Snapshot published by the RequestController.

    A new instance replaces the previous one on every change; consumers
    never mutate it.
    """

    intent: QueryIntent | None = None
    search_text: str = ""
    result: ResultSet | None = None
    loading: bool = False
    sequence: int = 0

    @property
    def timeframe(self) -> Timeframe | None:
        if isinstance(self.intent, RecencyIntent):
            return self.intent.timeframe
        return None

    @property
    def events(self) -> tuple[SeismicEvent, ...]:
        return self.result.events if self.result is not None else ()

    @property
    def failed(self) -> bool:
        return self.result is not None and self.result.status is ResultStatus.FAILED

    @property
    def empty(self) -> bool:
        return self.result is not None and self.result.status is ResultStatus.EMPTY_FOR_QUERY
