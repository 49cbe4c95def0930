"""Configuration module for quaketrack."""

from quaketrack.config.factory import create_executor, create_from_config
from quaketrack.config.loader import get_default_config_path, load_config
from quaketrack.config.models import (
    ControllerConfig,
    DisplayConfig,
    FeedConfig,
    LoggingConfig,
    QuakeTrackConfig,
)

__all__ = [
    "ControllerConfig",
    "DisplayConfig",
    "FeedConfig",
    "LoggingConfig",
    "QuakeTrackConfig",
    "create_executor",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
