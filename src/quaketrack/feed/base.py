"""Protocol for seismic feed query execution."""

from typing import Protocol

from quaketrack.data import QueryIntent, ResultSet


class QueryExecutor(Protocol):
    """Interface for fetching raw events for a query intent."""

    async def execute(self, intent: QueryIntent) -> ResultSet:
        """Run one remote query for the given intent.

        Args:
            intent: Recency or search intent to build the query from.

        Returns:
            ``ResultSet.ok`` with events in feed order, or ``ResultSet.failed``.
        """
        ...
