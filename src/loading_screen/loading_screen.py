from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Sequence

try:
    from .__about__ import __version__
except Exception:  # pragma: no cover - fallback version
    __version__ = "0.0.0-unknown"
from .plugins import PluginsStatus, read_plugins_status
from .screen_constants import DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH
from .settings import ModSettings, SettingsError, load_settings
from .widgets import (
    build_level_counter,
    build_loading_label,
    build_quest_messages,
    build_tips,
)

logger = logging.getLogger(__name__)

_BUILDERS: dict[str, Callable[[ModSettings, tuple[float, float]], Any]] = {
    "loading_counter": build_loading_label,
    "tips": build_tips,
    "quest_messages": build_quest_messages,
    "level_counter": build_level_counter,
}


def parse_screen_size(text: str) -> tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a pair of positive ints."""
    try:
        width_text, height_text = text.lower().split("x", 1)
        width, height = int(width_text), int(height_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected WIDTHxHEIGHT, got {text!r}"
        ) from exc
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"screen size must be positive: {text!r}")
    return width, height


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def collect_layouts(
    settings: ModSettings,
    screen_size: tuple[float, float],
    *,
    include_disabled: bool = False,
) -> dict[str, Any]:
    """Build the layouts for every enabled widget as plain dicts."""
    status: PluginsStatus = read_plugins_status(settings)
    layouts: dict[str, Any] = {}
    for name, builder in _BUILDERS.items():
        if include_disabled or getattr(status, name):
            layouts[name] = asdict(builder(settings, screen_size))
    return {"plugins": asdict(status), "layouts": layouts}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loading-screen-layout",
        description="Print the resolved loading screen widget layouts as JSON.",
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="settings file (JSON)"
    )
    parser.add_argument(
        "--screen",
        type=parse_screen_size,
        default=(DEFAULT_SCREEN_WIDTH, DEFAULT_SCREEN_HEIGHT),
        metavar="WIDTHxHEIGHT",
        help="screen size to resolve against (default: %(default)s)",
    )
    parser.add_argument(
        "--all", action="store_true", help="include widgets that are switched off"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


# --- Main Entry Point ---
def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.config)
    try:
        payload = collect_layouts(settings, args.screen, include_disabled=args.all)
    except (SettingsError, ValueError) as exc:
        logger.error("Cannot resolve layouts: %s", exc)
        return 1

    json.dump(payload, sys.stdout, indent=2, default=_json_default)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
