"""Pydantic configuration models for quaketrack."""

from typing import Literal

from pydantic import BaseModel, Field, PositiveFloat, PositiveInt

from quaketrack.chart import DEFAULT_TIME_FORMAT
from quaketrack.data import Timeframe
from quaketrack.feed.usgs import DEFAULT_RECENCY_LIMIT, DEFAULT_SEARCH_LIMIT, USGS_API_URL

# ============================================================
# Feed Config
# ============================================================


class FeedConfig(BaseModel):
    """Configuration for the USGS query executor."""

    base_url: str = USGS_API_URL
    recency_limit: PositiveInt = DEFAULT_RECENCY_LIMIT
    search_limit: PositiveInt = DEFAULT_SEARCH_LIMIT
    timeout: PositiveFloat | None = None

    model_config = {"frozen": True}


# ============================================================
# Display Config
# ============================================================


class DisplayConfig(BaseModel):
    """Configuration for initial view and timestamp labels."""

    default_timeframe: Timeframe = Timeframe.DAY
    time_format: str = DEFAULT_TIME_FORMAT

    model_config = {"frozen": True}


# ============================================================
# Controller Config
# ============================================================


class ControllerConfig(BaseModel):
    """Configuration for the request controller."""

    discard_stale_results: bool = True

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for console logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class QuakeTrackConfig(BaseModel):
    """Root configuration for quaketrack."""

    feed: FeedConfig = Field(default_factory=FeedConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    controller: ControllerConfig = Field(default_factory=ControllerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
