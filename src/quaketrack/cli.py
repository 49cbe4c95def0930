"""CLI for the quaketrack earthquake viewer."""

import argparse
import asyncio
import logging
import sys
from datetime import tzinfo
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from quaketrack.chart import DEFAULT_TIME_FORMAT, adapt
from quaketrack.config import (
    QuakeTrackConfig,
    create_from_config,
    get_default_config_path,
    load_config,
)
from quaketrack.data import ControllerState, Timeframe
from quaketrack.presentation import format_event, status_message, title_for

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    timeframe: Timeframe | None = None
    search: str | None = None
    config: Path | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("search")
    @classmethod
    def search_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Search text must not be empty")
        return v


def resolve_config(path: Path | None) -> QuakeTrackConfig:
    """Load ``path``, else the bundled default config, else built-in defaults."""
    if path is not None:
        return load_config(path)
    default_path = get_default_config_path()
    if default_path.exists():
        return load_config(default_path)
    return QuakeTrackConfig()


def render_state(
    state: ControllerState,
    *,
    recency_limit: int = 10,
    time_format: str = DEFAULT_TIME_FORMAT,
    tz: tzinfo | None = None,
) -> list[str]:
    """Render a controller snapshot as printable lines."""
    lines: list[str] = []

    message = status_message(state.result)
    if message:
        lines.append(message)

    result = state.result
    if result is not None and result.events and state.intent is not None:
        lines.append(title_for(state.intent, recency_limit=recency_limit))
        lines.append("")
        lines.extend(
            format_event(event, time_format=time_format, tz=tz) for event in result.events
        )

        chart = adapt(result, time_format=time_format, tz=tz)
        lines.append("")
        lines.append(f"{chart.x_axis_title} vs {chart.y_axis_title}:")
        for label, value in zip(chart.labels, chart.values, strict=True):
            lines.append(f"  {label}: {value}")

    return lines


async def run(args: CLIArgs) -> ControllerState:
    """Run one query with the given arguments and print the result.

    Args:
        args: Validated CLI arguments.

    Returns:
        The final controller state.
    """
    config = resolve_config(args.config)
    logging.getLogger().setLevel(config.logging.level)
    controller = create_from_config(config)

    if args.search is not None:
        await controller.submit_search(args.search)
    elif args.timeframe is not None:
        await controller.select_timeframe(args.timeframe)
    else:
        await controller.start()

    state = controller.state
    for line in render_state(
        state,
        recency_limit=config.feed.recency_limit,
        time_format=config.display.time_format,
    ):
        print(line)
    return state


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Show recent or location-matched earthquakes.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--timeframe",
        "-t",
        choices=[tf.value for tf in Timeframe],
        help="Show the strongest earthquakes in the last hour, day or week",
    )
    mode.add_argument(
        "--search",
        "-s",
        help="Show earthquakes from the past year whose location contains this text",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()

    try:
        args = CLIArgs(timeframe=ns.timeframe, search=ns.search, config=ns.config)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except (ValidationError, yaml.YAMLError) as e:
        logger.error(f"Invalid config: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
