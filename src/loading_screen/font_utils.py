from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import pygame

logger = logging.getLogger(__name__)

# Font ids exposed in the settings; anything else means "host default".
FONT_RESOURCES: Mapping[int, str] = MappingProxyType(
    {
        1: "Fonts/OpenSans/OpenSans-ExtraBold",
        2: "Fonts/OpenSans/OpenSansBold",
        3: "Fonts/OpenSans/OpenSansSemibold",
        4: "Fonts/OpenSans/OpenSansRegular",
        5: "Fonts/OpenSans/OpenSansLight",
        6: "Fonts/TESFonts/Kingthings Exeter",
        7: "Fonts/TESFonts/Kingthings Petrock",
        8: "Fonts/TESFonts/Kingthings Petrock light",
        9: "Fonts/TESFonts/MorrisRomanBlack",
        10: "Fonts/TESFonts/oblivion-font",
        11: "Fonts/TESFonts/Planewalker",
    }
)

FONT_FILE_SUFFIXES = (".ttf", ".otf")

_FONT_CACHE: dict[tuple[str | None, int], pygame.font.Font] = {}


@dataclass(frozen=True)
class FontReference:
    """Symbolic font resource selected by a settings font id."""

    font_id: int
    resource: str


def font_resource_name(font_id: int) -> str | None:
    """Return the resource path for ``font_id`` or None for the default font."""
    return FONT_RESOURCES.get(font_id)


def resolve_font(font_id: int) -> FontReference | None:
    resource = font_resource_name(font_id)
    if resource is None:
        return None
    return FontReference(font_id, resource)


def _find_font_file(resource: str, search_root: Path | None) -> Path | None:
    if search_root is None:
        return None
    for suffix in FONT_FILE_SUFFIXES:
        candidate = search_root / f"{resource}{suffix}"
        if candidate.is_file():
            return candidate
    return None


def load_font(
    reference: FontReference | None,
    size: int,
    *,
    search_root: Path | None = None,
) -> pygame.font.Font:
    """Load and cache a pygame font for a resolved reference and size.

    Missing files fall back to pygame's default font.
    """
    normalized_size = max(1, int(size))
    path: Path | None = None
    if reference is not None:
        path = _find_font_file(reference.resource, search_root)
        if path is None:
            logger.debug(
                "Font %r not found under %s, using default", reference.resource, search_root
            )

    cache_key = (str(path) if path else None, normalized_size)
    cached = _FONT_CACHE.get(cache_key)
    if cached is not None:
        return cached

    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(str(path) if path else None, normalized_size)
    _FONT_CACHE[cache_key] = font
    return font


def clear_font_cache() -> None:
    _FONT_CACHE.clear()


__all__ = [
    "FONT_RESOURCES",
    "FontReference",
    "font_resource_name",
    "resolve_font",
    "load_font",
    "clear_font_cache",
]
