"""Tests for protocol compliance."""

from quaketrack.controller import RequestController
from quaketrack.data import QueryIntent, ResultSet, Timeframe
from quaketrack.feed.usgs import USGSQueryExecutor


def test_usgs_executor_matches_protocol() -> None:
    """Verify USGSQueryExecutor structurally matches the QueryExecutor protocol."""
    executor = USGSQueryExecutor()
    assert hasattr(executor, "execute")
    assert callable(executor.execute)


class StaticExecutor:
    """A minimal implementation to verify protocol requirements."""

    async def execute(self, intent: QueryIntent) -> ResultSet:
        return ResultSet.ok([])


async def test_static_executor_satisfies_protocol() -> None:
    """Any class with the right method signature satisfies the protocol."""
    controller = RequestController(StaticExecutor())
    result = await controller.select_timeframe(Timeframe.HOUR)
    assert result == ResultSet.ok([])
