from __future__ import annotations

from typing import Sequence

import pygame

Rgba = tuple[int, int, int, int]


def parse_color(value: str | Sequence[int] | pygame.Color) -> Rgba:
    """Convert a settings color value to an RGBA tuple.

    Accepts ``"#RRGGBB"``/``"#RRGGBBAA"`` (the ``#`` is optional), pygame color
    names, and sequences of three or four channel values.
    """
    try:
        if isinstance(value, pygame.Color):
            color = pygame.Color(value)
        elif isinstance(value, str):
            text = value.strip()
            if not text.startswith("#") and len(text) in (6, 8):
                try:
                    int(text, 16)
                except ValueError:
                    pass
                else:
                    text = f"#{text}"
            color = pygame.Color(text)
        elif isinstance(value, Sequence) and len(value) in (3, 4):
            color = pygame.Color(*(int(channel) for channel in value))
        else:
            raise ValueError(f"unsupported color value: {value!r}")
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid color {value!r}: {exc}") from exc
    return (color.r, color.g, color.b, color.a)


__all__ = ["Rgba", "parse_color"]
