"""Display strings for titles, event rows and status messages."""

from datetime import tzinfo

from quaketrack.chart import DEFAULT_TIME_FORMAT, format_timestamp
from quaketrack.data import (
    QueryIntent,
    RecencyIntent,
    ResultSet,
    ResultStatus,
    SearchIntent,
    SeismicEvent,
    Timeframe,
)

FAILURE_MESSAGE = "Failed to load earthquake data. Please try again."

_TIMEFRAME_TEXT: dict[Timeframe, str] = {
    Timeframe.HOUR: "Last Hour",
    Timeframe.DAY: "Last Day",
    Timeframe.WEEK: "Last Week",
}


def title_for(intent: QueryIntent, *, recency_limit: int = 10) -> str:
    """Heading shown above the event list."""
    if isinstance(intent, SearchIntent):
        return f'Earthquakes in the last year in "{intent.location_text}"'
    if isinstance(intent, RecencyIntent):
        return (
            f"Top {recency_limit} Strongest Earthquakes in the "
            f"{_TIMEFRAME_TEXT[intent.timeframe]}"
        )
    msg = f"Unknown intent type: {type(intent)}"
    raise ValueError(msg)


def empty_result_message(query: str) -> str:
    return f'No earthquakes found in "{query}" for the past year.'


def status_message(result: ResultSet | None) -> str | None:
    """User-facing message for a failed or empty result, else None."""
    if result is None:
        return None
    if result.status is ResultStatus.FAILED:
        return FAILURE_MESSAGE
    if result.status is ResultStatus.EMPTY_FOR_QUERY:
        return empty_result_message(result.query or "")
    return None


def format_event(
    event: SeismicEvent,
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    tz: tzinfo | None = None,
) -> str:
    """One list row: place, magnitude and local time."""
    magnitude = "unknown" if event.magnitude is None else f"{event.magnitude}"
    when = format_timestamp(event.occurred_at, time_format=time_format, tz=tz)
    return f"{event.place} - Magnitude: {magnitude} - Time: {when}"
