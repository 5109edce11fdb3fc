"""Screen and widget size constants."""

from __future__ import annotations

DEFAULT_SCREEN_WIDTH = 1920  # Used by the preview CLI when no size is given
DEFAULT_SCREEN_HEIGHT = 1080

# Logical bounding boxes for widgets that do not read their size from settings
LABEL_SIZE: tuple[float, float] = (50, 10)
LEVEL_COUNTER_SIZE: tuple[float, float] = (50, 10)
QUEST_MESSAGES_SIZE: tuple[float, float] = (1000, 100)

LEVEL_COUNTER_FONT_SIZE = 35

FONT_STYLE_MIN = 0
FONT_STYLE_MAX = 3

__all__ = [
    "DEFAULT_SCREEN_WIDTH",
    "DEFAULT_SCREEN_HEIGHT",
    "LABEL_SIZE",
    "LEVEL_COUNTER_SIZE",
    "QUEST_MESSAGES_SIZE",
    "LEVEL_COUNTER_FONT_SIZE",
    "FONT_STYLE_MIN",
    "FONT_STYLE_MAX",
]
