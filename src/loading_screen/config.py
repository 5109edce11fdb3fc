import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Tuple

from platformdirs import user_config_dir

APP_NAME = "LoadingScreen"

logger = logging.getLogger(__name__)

LOADING_LABEL_SECTION = "LoadingLabel"
TIPS_SECTION = "Tips"
EXPERIMENTAL_SECTION = "Experimental"

# Defaults for all configurable options, keyed by section then key
DEFAULT_CONFIG: Dict[str, Any] = {
    LOADING_LABEL_SECTION: {
        "LoadingCounter": True,
        "LabelText": "Loading",
        "LabelTextFinish": "Press any key to continue",
        "Position": [-20.0, -10.0],
        "Font": 7,
        "FontSize": 35,
        "FontStyle": 0,
        "FontColor": "#FFFFFFFF",
    },
    TIPS_SECTION: {
        "Tips": True,
        "Language": "en",
        "Position": [50.0, -150.0],
        "Size": [1000.0, 100.0],
        "FontSize": 30,
        "FontStyle": 2,
        "FontColor": "#C8C8C8FF",
    },
    EXPERIMENTAL_SECTION: {
        "QuestMessages": False,
        "QuestPosition": [50.0, 50.0],
        "QuestColor": "#FFFFFFFF",
        "LevelCounter": False,
        "LevelPosition": [-150.0, 50.0],
        "LevelColor": "#FFD700FF",
        "LcUppercase": True,
    },
}


def user_config_path() -> Path:
    """Return the platform-specific config file path."""
    return Path(user_config_dir(APP_NAME, APP_NAME)) / "config.json"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge dictionaries, with override winning on conflicts."""
    merged: Dict[str, Any] = deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_config(path: Path | None = None) -> Tuple[Dict[str, Any], Path]:
    """Load config from disk, falling back to defaults on errors."""
    config_path = path or user_config_path()
    config: Dict[str, Any] = deepcopy(DEFAULT_CONFIG)

    try:
        if config_path.exists():
            loaded = json.loads(config_path.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                config = _deep_merge(config, loaded)
            else:
                logger.warning(
                    "Ignoring config %s: top level is %s, not an object",
                    config_path,
                    type(loaded).__name__,
                )
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load config (%s): %s", config_path, exc)

    return config, config_path
