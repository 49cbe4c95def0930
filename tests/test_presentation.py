"""Tests for display strings."""

from datetime import UTC

import pytest

from conftest import make_event
from quaketrack.data import RecencyIntent, ResultSet, SearchIntent, Timeframe
from quaketrack.presentation import (
    FAILURE_MESSAGE,
    empty_result_message,
    format_event,
    status_message,
    title_for,
)


@pytest.mark.parametrize(
    ("timeframe", "expected"),
    [
        (Timeframe.HOUR, "Top 10 Strongest Earthquakes in the Last Hour"),
        (Timeframe.DAY, "Top 10 Strongest Earthquakes in the Last Day"),
        (Timeframe.WEEK, "Top 10 Strongest Earthquakes in the Last Week"),
    ],
)
def test_title_for_recency(timeframe: Timeframe, expected: str) -> None:
    assert title_for(RecencyIntent(timeframe)) == expected


def test_title_for_recency_custom_limit() -> None:
    assert title_for(RecencyIntent(Timeframe.DAY), recency_limit=25).startswith("Top 25 ")


def test_title_for_search() -> None:
    assert title_for(SearchIntent("Reno")) == 'Earthquakes in the last year in "Reno"'


def test_status_message_failure() -> None:
    assert status_message(ResultSet.failed("anything")) == FAILURE_MESSAGE
    assert "try again" in FAILURE_MESSAGE


def test_status_message_empty_names_search_text() -> None:
    message = status_message(ResultSet.empty_for_query("Atlantis"))
    assert message == empty_result_message("Atlantis")
    assert message == 'No earthquakes found in "Atlantis" for the past year.'


def test_status_message_none_for_ok_or_missing() -> None:
    assert status_message(ResultSet.ok([make_event("a")])) is None
    assert status_message(None) is None


def test_format_event() -> None:
    event = make_event("a", place="Tokyo, Japan", magnitude=5.3, hours_ago=1)
    assert format_event(event, tz=UTC) == (
        "Tokyo, Japan - Magnitude: 5.3 - Time: 2026-03-15 11:00:00"
    )


def test_format_event_unknown_magnitude() -> None:
    event = make_event("a", magnitude=None)
    assert "Magnitude: unknown" in format_event(event, tz=UTC)
