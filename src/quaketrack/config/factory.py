"""Factory functions to create components from configuration."""

from quaketrack.config.models import FeedConfig, QuakeTrackConfig
from quaketrack.controller import RequestController
from quaketrack.feed.usgs import USGSQueryExecutor


def create_executor(config: FeedConfig) -> USGSQueryExecutor:
    """Create the USGS query executor from feed config."""
    return USGSQueryExecutor(
        base_url=config.base_url,
        recency_limit=config.recency_limit,
        search_limit=config.search_limit,
        timeout=config.timeout,
    )


def create_from_config(config: QuakeTrackConfig) -> RequestController:
    """Create a ready-to-use controller from root config.

    Args:
        config: Root configuration.

    Returns:
        RequestController wired to a USGS executor.
    """
    return RequestController(
        create_executor(config.feed),
        default_timeframe=config.display.default_timeframe,
        discard_stale_results=config.controller.discard_stale_results,
    )
