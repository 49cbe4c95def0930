"""Tests for data models."""

from dataclasses import FrozenInstanceError

import pytest

from conftest import make_event
from quaketrack.data import (
    ControllerState,
    RecencyIntent,
    ResultSet,
    ResultStatus,
    SearchIntent,
    Timeframe,
)


def test_timeframe_values() -> None:
    assert [tf.value for tf in Timeframe] == ["hour", "day", "week"]
    assert Timeframe("week") is Timeframe.WEEK


def test_recency_intent_mode() -> None:
    intent = RecencyIntent(Timeframe.DAY)
    assert intent.mode == "recency"
    assert intent.timeframe is Timeframe.DAY


def test_search_intent_mode() -> None:
    intent = SearchIntent("Reno")
    assert intent.mode == "search"
    assert intent.location_text == "Reno"


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_search_intent_rejects_blank_text(text: str) -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        SearchIntent(text)


def test_seismic_event_is_immutable() -> None:
    event = make_event("a")
    with pytest.raises(FrozenInstanceError):
        event.place = "elsewhere"  # type: ignore[misc]


# -- ResultSet tests --


def test_result_set_ok() -> None:
    events = [make_event("a"), make_event("b")]
    result = ResultSet.ok(events)
    assert result.status is ResultStatus.OK
    assert result.events == tuple(events)
    assert len(result) == 2
    assert result.query is None
    assert result.reason is None


def test_result_set_empty_for_query() -> None:
    result = ResultSet.empty_for_query("Atlantis")
    assert result.status is ResultStatus.EMPTY_FOR_QUERY
    assert result.query == "Atlantis"
    assert result.events == ()


def test_result_set_failed() -> None:
    result = ResultSet.failed("generic retrieval failure")
    assert result.status is ResultStatus.FAILED
    assert result.reason == "generic retrieval failure"
    assert len(result) == 0


# -- ControllerState tests --


def test_controller_state_defaults() -> None:
    state = ControllerState()
    assert state.intent is None
    assert state.search_text == ""
    assert state.timeframe is None
    assert state.events == ()
    assert not state.failed
    assert not state.empty
    assert not state.loading


def test_controller_state_timeframe_only_in_recency_mode() -> None:
    assert ControllerState(intent=RecencyIntent(Timeframe.HOUR)).timeframe is Timeframe.HOUR
    assert ControllerState(intent=SearchIntent("Reno")).timeframe is None


def test_controller_state_flags() -> None:
    assert ControllerState(result=ResultSet.failed("x")).failed
    assert ControllerState(result=ResultSet.empty_for_query("x")).empty
    ok = ControllerState(result=ResultSet.ok([make_event("a")]))
    assert not ok.failed
    assert not ok.empty
    assert len(ok.events) == 1
