"""Corner-anchored rectangle resolution for loading screen widgets.

Positions are signed offsets. A positive component is measured from the
left/top edge of the screen, zero or negative from the right/bottom edge.
The corner picked per axis also decides how text is aligned inside the rect.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame


class CornerAnchor(Enum):
    """Screen corner a widget is anchored to; doubles as text alignment."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True)
class ScreenOffset:
    x: float
    y: float


@dataclass(frozen=True)
class LogicalSize:
    width: float
    height: float


@dataclass(frozen=True)
class ScreenRect:
    """Absolute rectangle in screen space."""

    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def as_pygame_rect(self) -> pygame.Rect:
        return pygame.Rect(
            round(self.x), round(self.y), round(self.width), round(self.height)
        )


_ANCHORS: dict[tuple[bool, bool], CornerAnchor] = {
    (True, True): CornerAnchor.TOP_LEFT,
    (True, False): CornerAnchor.BOTTOM_LEFT,
    (False, True): CornerAnchor.TOP_RIGHT,
    (False, False): CornerAnchor.BOTTOM_RIGHT,
}


def resolve_anchor_rect(
    offset: ScreenOffset,
    size: LogicalSize,
    screen_width: float,
    screen_height: float,
) -> tuple[ScreenRect, CornerAnchor]:
    """Return the absolute rect for ``offset``/``size`` and its corner anchor.

    Zero counts as non-positive, so an offset of 0 sticks to the right or
    bottom edge. Values are used as-is; range checks belong to the settings.
    """
    from_left = offset.x > 0
    from_top = offset.y > 0
    x = offset.x if from_left else screen_width + offset.x
    y = offset.y if from_top else screen_height + offset.y
    rect = ScreenRect(x, y, size.width, size.height)
    return rect, _ANCHORS[(from_left, from_top)]


__all__ = [
    "CornerAnchor",
    "ScreenOffset",
    "LogicalSize",
    "ScreenRect",
    "resolve_anchor_rect",
]
