"""Presentation descriptors for the loading screen widgets.

Each ``build_*`` function reads its widget's settings, resolves the rect and
corner alignment for the current screen size, and returns a frozen layout the
host renderer can draw. Nothing is cached; call again after a resolution
change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntFlag

from .colors import Rgba
from .config import EXPERIMENTAL_SECTION, LOADING_LABEL_SECTION, TIPS_SECTION
from .font_utils import FontReference, resolve_font
from .layout import (
    CornerAnchor,
    LogicalSize,
    ScreenOffset,
    ScreenRect,
    resolve_anchor_rect,
)
from .screen_constants import (
    FONT_STYLE_MAX,
    FONT_STYLE_MIN,
    LABEL_SIZE,
    LEVEL_COUNTER_FONT_SIZE,
    LEVEL_COUNTER_SIZE,
    QUEST_MESSAGES_SIZE,
)
from .settings import ModSettings

ScreenSize = tuple[float, float]


class FontStyle(IntFlag):
    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_AND_ITALIC = 3


@dataclass(frozen=True)
class WidgetStyle:
    alignment: CornerAnchor
    font: FontReference | None  # None -> host default font
    font_size: int
    font_style: FontStyle
    text_color: Rgba
    word_wrap: bool = False


@dataclass(frozen=True)
class LoadingLabelLayout:
    rect: ScreenRect
    style: WidgetStyle
    label_text: str
    label_text_finish: str


@dataclass(frozen=True)
class TipsLayout:
    rect: ScreenRect
    style: WidgetStyle
    language: str


@dataclass(frozen=True)
class QuestMessagesLayout:
    rect: ScreenRect
    style: WidgetStyle


@dataclass(frozen=True)
class LevelCounterLayout:
    rect: ScreenRect
    style: WidgetStyle
    upper_case: bool


def _resolve(
    settings: ModSettings,
    section: str,
    key: str,
    size: LogicalSize,
    screen_size: ScreenSize,
) -> tuple[ScreenRect, CornerAnchor]:
    offset = ScreenOffset(*settings.get_float_pair(section, key))
    width, height = screen_size
    return resolve_anchor_rect(offset, size, width, height)


def _font_style(settings: ModSettings, section: str) -> FontStyle:
    return FontStyle(
        settings.get_int(section, "FontStyle", FONT_STYLE_MIN, FONT_STYLE_MAX)
    )


def _shared_font(settings: ModSettings) -> FontReference | None:
    # Every widget draws with the loading label's font selection.
    return resolve_font(settings.get_int(LOADING_LABEL_SECTION, "Font"))


def build_loading_label(
    settings: ModSettings, screen_size: ScreenSize
) -> LoadingLabelLayout:
    section = LOADING_LABEL_SECTION
    rect, alignment = _resolve(
        settings, section, "Position", LogicalSize(*LABEL_SIZE), screen_size
    )
    style = WidgetStyle(
        alignment=alignment,
        font=_shared_font(settings),
        font_size=settings.get_int(section, "FontSize"),
        font_style=_font_style(settings, section),
        text_color=settings.get_color(section, "FontColor"),
    )
    return LoadingLabelLayout(
        rect=rect,
        style=style,
        label_text=settings.get_string(section, "LabelText"),
        label_text_finish=settings.get_string(section, "LabelTextFinish"),
    )


def build_tips_style(settings: ModSettings, alignment: CornerAnchor) -> WidgetStyle:
    """Style shared by tips and the other secondary text widgets."""
    return WidgetStyle(
        alignment=alignment,
        font=_shared_font(settings),
        font_size=settings.get_int(TIPS_SECTION, "FontSize"),
        font_style=_font_style(settings, TIPS_SECTION),
        text_color=settings.get_color(TIPS_SECTION, "FontColor"),
        word_wrap=True,
    )


def build_tips(settings: ModSettings, screen_size: ScreenSize) -> TipsLayout:
    size = LogicalSize(*settings.get_float_pair(TIPS_SECTION, "Size"))
    rect, alignment = _resolve(settings, TIPS_SECTION, "Position", size, screen_size)
    return TipsLayout(
        rect=rect,
        style=build_tips_style(settings, alignment),
        language=settings.get_string(TIPS_SECTION, "Language"),
    )


def build_quest_messages(
    settings: ModSettings, screen_size: ScreenSize
) -> QuestMessagesLayout:
    rect, alignment = _resolve(
        settings,
        EXPERIMENTAL_SECTION,
        "QuestPosition",
        LogicalSize(*QUEST_MESSAGES_SIZE),
        screen_size,
    )
    style = replace(
        build_tips_style(settings, alignment),
        text_color=settings.get_color(EXPERIMENTAL_SECTION, "QuestColor"),
    )
    return QuestMessagesLayout(rect=rect, style=style)


def build_level_counter(
    settings: ModSettings, screen_size: ScreenSize
) -> LevelCounterLayout:
    rect, alignment = _resolve(
        settings,
        EXPERIMENTAL_SECTION,
        "LevelPosition",
        LogicalSize(*LEVEL_COUNTER_SIZE),
        screen_size,
    )
    style = replace(
        build_tips_style(settings, alignment),
        font_size=LEVEL_COUNTER_FONT_SIZE,
        font_style=FontStyle.BOLD,
        text_color=settings.get_color(EXPERIMENTAL_SECTION, "LevelColor"),
        word_wrap=False,
    )
    return LevelCounterLayout(
        rect=rect,
        style=style,
        upper_case=settings.get_bool(EXPERIMENTAL_SECTION, "LcUppercase"),
    )


__all__ = [
    "FontStyle",
    "WidgetStyle",
    "LoadingLabelLayout",
    "TipsLayout",
    "QuestMessagesLayout",
    "LevelCounterLayout",
    "build_loading_label",
    "build_tips_style",
    "build_tips",
    "build_quest_messages",
    "build_level_counter",
]
