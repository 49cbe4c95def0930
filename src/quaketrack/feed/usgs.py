"""USGS FDSN event service client."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

import httpx

from quaketrack.data import (
    Coordinates,
    QueryIntent,
    RecencyIntent,
    ResultSet,
    SearchIntent,
    SeismicEvent,
)
from quaketrack.timewindow import resolve, search_window_start

USGS_API_URL = "https://earthquake.usgs.gov/fdsnws/event/1/query"
GENERIC_FAILURE_REASON = "generic retrieval failure"
DEFAULT_RECENCY_LIMIT = 10
DEFAULT_SEARCH_LIMIT = 1000

logger = logging.getLogger(__name__)


class RetrievalError(Exception):
    """Raised for any transport, HTTP or payload problem during a fetch."""


class USGSQueryExecutor:
    """Fetch earthquake events from the USGS GeoJSON query endpoint.

    Recency intents ask for the ``recency_limit`` strongest events since the
    start of the window. Search intents ask for up to ``search_limit`` events
    from the past year; text matching happens client-side because the
    endpoint has no place filter.

    Args:
        base_url: Query endpoint URL.
        recency_limit: Result cap for recency queries.
        search_limit: Result cap for search queries.
        timeout: Request timeout in seconds; None disables it.
        clock: Returns the reference "now"; defaults to the UTC wall clock.
    """

    def __init__(
        self,
        *,
        base_url: str = USGS_API_URL,
        recency_limit: int = DEFAULT_RECENCY_LIMIT,
        search_limit: int = DEFAULT_SEARCH_LIMIT,
        timeout: float | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._base_url = base_url
        self._recency_limit = recency_limit
        self._search_limit = search_limit
        self._timeout = timeout
        self._clock = clock or (lambda: datetime.now(tz=UTC))

    async def execute(self, intent: QueryIntent) -> ResultSet:
        """Run a single query for ``intent``.

        Failures of any kind are logged and reported as a generic failure;
        no retry is attempted.

        Args:
            intent: Recency or search intent.

        Returns:
            ``ResultSet.ok`` with events in feed order, or ``ResultSet.failed``.
        """
        params = self.build_params(intent, self._clock())
        logger.info(f"Querying {self._base_url} with {params}")
        try:
            events = await self._fetch(params)
        except RetrievalError as e:
            logger.warning(f"Earthquake feed request failed. Error: {e}")
            return ResultSet.failed(GENERIC_FAILURE_REASON)

        logger.info(f"Feed returned {len(events)} events")
        return ResultSet.ok(events)

    def build_params(self, intent: QueryIntent, now: datetime) -> dict[str, str | int]:
        """Build the query string parameters for ``intent`` relative to ``now``."""
        params: dict[str, str | int] = {"format": "geojson"}
        if isinstance(intent, RecencyIntent):
            params["starttime"] = _to_iso8601(resolve(intent.timeframe, now))
            params["orderby"] = "magnitude"
            params["limit"] = self._recency_limit
        elif isinstance(intent, SearchIntent):
            params["starttime"] = _to_iso8601(search_window_start(now))
            params["limit"] = self._search_limit
        else:
            msg = f"Unknown intent type: {type(intent)}"
            raise ValueError(msg)
        return params

    async def _fetch(self, params: dict[str, str | int]) -> list[SeismicEvent]:
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.get(self._base_url, params=params)
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise RetrievalError(str(e)) from e

        if not isinstance(data, dict) or not isinstance(data.get("features"), list):
            raise RetrievalError("Response is not a GeoJSON feature collection")

        try:
            return [_parse_feature(feature) for feature in data["features"]]
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise RetrievalError(f"Malformed feature: {e!r}") from e


def _parse_feature(feature: dict[str, Any]) -> SeismicEvent:
    """Convert one GeoJSON feature into a SeismicEvent."""
    props = feature["properties"]
    longitude, latitude, depth = feature["geometry"]["coordinates"][:3]
    magnitude = props.get("mag")

    return SeismicEvent(
        id=str(feature["id"]),
        place=props.get("place") or "",
        magnitude=float(magnitude) if magnitude is not None else None,
        # Feed time is epoch milliseconds
        occurred_at=datetime.fromtimestamp(props["time"] / 1000, tz=UTC),
        coordinates=Coordinates(
            longitude=float(longitude),
            latitude=float(latitude),
            depth=float(depth),
        ),
    )


def _to_iso8601(moment: datetime) -> str:
    """Render ``moment`` as UTC ISO 8601 with milliseconds, e.g. ``2026-01-01T00:00:00.000Z``."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
