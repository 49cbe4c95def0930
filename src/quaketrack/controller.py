"""Request orchestration and published state for the earthquake views."""

import logging
from collections.abc import Callable
from dataclasses import replace

from quaketrack.data import (
    ControllerState,
    QueryIntent,
    RecencyIntent,
    ResultSet,
    ResultStatus,
    SearchIntent,
    Timeframe,
)
from quaketrack.feed.base import QueryExecutor
from quaketrack.feed.usgs import GENERIC_FAILURE_REASON
from quaketrack.processing import process

logger = logging.getLogger(__name__)

StateCallback = Callable[[ControllerState], None]


class RequestController:
    """Owns the active query intent and publishes immutable state snapshots.

    Flow for each trigger:
    1. Clear any failure/empty signal and publish the new intent as loading
    2. Fetch raw events through the executor (the only suspension point)
    3. Filter or sort them with ``process``
    4. Publish the ResultSet, unless a newer trigger was dispatched meanwhile

    Failures and empty searches never raise out of the controller; they are
    exposed through ``state.failed`` and ``state.empty``.

    Args:
        executor: Query executor used for every fetch.
        default_timeframe: Timeframe loaded by ``start``.
        discard_stale_results: Drop completions of superseded triggers. When
            False, whichever request resolves last wins.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        *,
        default_timeframe: Timeframe = Timeframe.DAY,
        discard_stale_results: bool = True,
    ) -> None:
        self._executor = executor
        self._default_timeframe = default_timeframe
        self._discard_stale = discard_stale_results
        self._state = ControllerState()
        self._subscribers: list[StateCallback] = []
        self._dispatched = 0

    @property
    def state(self) -> ControllerState:
        """The latest published snapshot."""
        return self._state

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Call ``callback`` with every new snapshot.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_search_text(self, text: str) -> None:
        """Hold typed search text until ``submit_search``; issues no query."""
        self._publish(replace(self._state, search_text=text))

    async def start(self) -> ResultSet:
        """Initial load with the default timeframe."""
        return await self.select_timeframe(self._default_timeframe)

    async def select_timeframe(self, timeframe: Timeframe) -> ResultSet:
        """Switch to recency mode and load the strongest events for ``timeframe``."""
        return await self._dispatch(RecencyIntent(timeframe), search_text="")

    async def submit_search(self, text: str | None = None) -> ResultSet | None:
        """Switch to search mode for ``text`` (or the held search text).

        Blank text is ignored: no query is issued and None is returned.
        """
        if text is None:
            text = self._state.search_text
        if not text.strip():
            logger.debug("Ignoring blank search")
            return None
        return await self._dispatch(SearchIntent(text), search_text=text)

    async def _dispatch(self, intent: QueryIntent, *, search_text: str) -> ResultSet:
        self._dispatched += 1
        sequence = self._dispatched

        previous = self._state.result
        kept = previous if previous is not None and previous.status is ResultStatus.OK else None
        self._publish(
            ControllerState(
                intent=intent,
                search_text=search_text,
                result=kept,
                loading=True,
                sequence=sequence,
            )
        )
        logger.info(f"Dispatching query #{sequence}: {_describe(intent)}")

        try:
            fetched = await self._executor.execute(intent)
        except Exception as e:
            logger.warning(f"Error executing query #{sequence}. Error: {e}")
            fetched = ResultSet.failed(GENERIC_FAILURE_REASON)

        if fetched.status is ResultStatus.FAILED:
            result = fetched
        else:
            result = process(fetched.events, intent)

        is_latest = sequence == self._dispatched
        if not is_latest and self._discard_stale:
            logger.debug(f"Discarding stale result #{sequence} (latest is #{self._dispatched})")
            return result

        self._publish(
            replace(
                self._state,
                intent=intent,
                # Keep text typed while this request was in flight, if the snapshot is still ours
                search_text=(
                    self._state.search_text
                    if is_latest and self._state.sequence == sequence
                    else search_text
                ),
                result=result,
                loading=False if is_latest else self._state.loading,
                sequence=sequence,
            )
        )
        logger.info(f"Query #{sequence} finished: {result.status} ({len(result)} events)")
        return result

    def _publish(self, state: ControllerState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            callback(state)


def _describe(intent: QueryIntent) -> str:
    if isinstance(intent, RecencyIntent):
        return f"strongest events in the last {intent.timeframe}"
    return f"events in the past year matching '{intent.location_text}'"
