"""Client-side filtering and ordering of fetched events."""

import logging

from quaketrack.data import QueryIntent, RecencyIntent, ResultSet, SearchIntent, SeismicEvent

logger = logging.getLogger(__name__)


def process(
    raw_events: list[SeismicEvent] | tuple[SeismicEvent, ...],
    intent: QueryIntent,
) -> ResultSet:
    """Turn raw feed events into the display-ready result set.

    Recency results are sorted oldest first (stable, so ties keep feed
    order). Search results keep feed order and only the events whose place
    contains the search text, ignoring case. A search with no matches is
    reported as ``EMPTY_FOR_QUERY``, not as a failure.

    Args:
        raw_events: Events in the order the feed returned them.
        intent: The intent the events were fetched for.

    Returns:
        Processed ResultSet.
    """
    if isinstance(intent, RecencyIntent):
        return ResultSet.ok(sorted(raw_events, key=lambda event: event.occurred_at))

    if isinstance(intent, SearchIntent):
        needle = intent.location_text.casefold()
        matches = [event for event in raw_events if needle in event.place.casefold()]
        logger.info(f"{len(matches)} of {len(raw_events)} events match '{intent.location_text}'")
        if not matches:
            return ResultSet.empty_for_query(intent.location_text)
        return ResultSet.ok(matches)

    msg = f"Unknown intent type: {type(intent)}"
    raise ValueError(msg)
