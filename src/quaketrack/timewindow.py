"""Start instants for the trailing time windows used in feed queries."""

from datetime import UTC, datetime, timedelta

from quaketrack.data import Timeframe

_WINDOWS: dict[Timeframe, timedelta] = {
    Timeframe.HOUR: timedelta(hours=1),
    Timeframe.DAY: timedelta(days=1),
    Timeframe.WEEK: timedelta(days=7),
}


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def resolve(timeframe: Timeframe, now: datetime | None = None) -> datetime:
    """Return the start of the trailing window for ``timeframe``.

    Args:
        timeframe: Symbolic window (hour, day or week).
        now: Reference instant. Defaults to the current UTC time.

    Returns:
        ``now`` minus 1 hour, 1 day or 7 days.
    """
    if now is None:
        now = _utcnow()
    return now - _WINDOWS[timeframe]


def search_window_start(now: datetime | None = None) -> datetime:
    """Return the same instant one calendar year before ``now``.

    29 February rolls over to 1 March of the previous year.
    """
    if now is None:
        now = _utcnow()
    try:
        return now.replace(year=now.year - 1)
    except ValueError:
        return now.replace(year=now.year - 1, month=3, day=1)
