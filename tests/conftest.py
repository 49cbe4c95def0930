"""Shared fixtures for quaketrack tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest

from quaketrack.data import Coordinates, SeismicEvent

NOW = datetime(2026, 3, 15, 12, 0, 0, tzinfo=UTC)


def make_event(
    event_id: str,
    *,
    place: str = "10km N of Reno, NV",
    magnitude: float | None = 4.0,
    hours_ago: float = 1.0,
) -> SeismicEvent:
    return SeismicEvent(
        id=event_id,
        place=place,
        magnitude=magnitude,
        occurred_at=NOW - timedelta(hours=hours_ago),
        coordinates=Coordinates(longitude=-119.8, latitude=39.6, depth=7.5),
    )


def make_feature(
    event_id: str,
    *,
    place: str | None = "10km N of Reno, NV",
    mag: float | None = 4.0,
    hours_ago: float = 1.0,
) -> dict[str, Any]:
    """GeoJSON feature as returned by the USGS query endpoint."""
    occurred = NOW - timedelta(hours=hours_ago)
    return {
        "type": "Feature",
        "id": event_id,
        "properties": {
            "place": place,
            "mag": mag,
            "time": int(occurred.timestamp() * 1000),
        },
        "geometry": {"type": "Point", "coordinates": [-119.8, 39.6, 7.5]},
    }


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: NOW
