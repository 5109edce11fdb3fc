"""Which loading screen widgets the user switched on."""

from __future__ import annotations

from dataclasses import dataclass

from .config import EXPERIMENTAL_SECTION, LOADING_LABEL_SECTION, TIPS_SECTION
from .settings import ModSettings


@dataclass(frozen=True)
class PluginsStatus:
    loading_counter: bool
    tips: bool
    quest_messages: bool
    level_counter: bool

    @property
    def any_enabled(self) -> bool:
        return (
            self.loading_counter
            or self.tips
            or self.quest_messages
            or self.level_counter
        )


def read_plugins_status(settings: ModSettings) -> PluginsStatus:
    return PluginsStatus(
        loading_counter=settings.get_bool(LOADING_LABEL_SECTION, "LoadingCounter"),
        tips=settings.get_bool(TIPS_SECTION, "Tips"),
        quest_messages=settings.get_bool(EXPERIMENTAL_SECTION, "QuestMessages"),
        level_counter=settings.get_bool(EXPERIMENTAL_SECTION, "LevelCounter"),
    )


__all__ = ["PluginsStatus", "read_plugins_status"]
