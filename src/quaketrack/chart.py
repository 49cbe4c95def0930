"""Projection of result sets into chart series."""

from datetime import datetime, tzinfo

from quaketrack.data import ChartData, ResultSet

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(
    moment: datetime,
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    tz: tzinfo | None = None,
) -> str:
    """Format ``moment`` in ``tz`` (the local time zone when None)."""
    return moment.astimezone(tz).strftime(time_format)


def adapt(
    result_set: ResultSet,
    *,
    time_format: str = DEFAULT_TIME_FORMAT,
    tz: tzinfo | None = None,
) -> ChartData:
    """Build index-aligned time labels and magnitude values for a chart.

    Args:
        result_set: Processed result set; failed or empty sets give empty series.
        time_format: strftime pattern for the labels.
        tz: Time zone for the labels. Defaults to the local time zone.

    Returns:
        ChartData with one label and one value per event.
    """
    labels = tuple(
        format_timestamp(event.occurred_at, time_format=time_format, tz=tz)
        for event in result_set.events
    )
    values = tuple(event.magnitude for event in result_set.events)
    return ChartData(labels=labels, values=values)
