"""Typed read access to the loading screen settings.

Builders only depend on the :class:`ModSettings` protocol, so any store that
exposes the same typed getters can feed them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Protocol

from .colors import Rgba, parse_color
from .config import load_config

logger = logging.getLogger(__name__)


class SettingsError(Exception):
    """Base class for settings lookup failures."""


class SettingNotFoundError(SettingsError, KeyError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(f"{section}.{key}")
        self.section = section
        self.key = key

    def __str__(self) -> str:
        return f"missing setting {self.section}.{self.key}"


class SettingTypeError(SettingsError, ValueError):
    pass


class ModSettings(Protocol):
    def get_bool(self, section: str, key: str) -> bool: ...

    def get_string(self, section: str, key: str) -> str: ...

    def get_int(
        self,
        section: str,
        key: str,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int: ...

    def get_color(self, section: str, key: str) -> Rgba: ...

    def get_float_pair(self, section: str, key: str) -> tuple[float, float]: ...


class DictModSettings:
    """ModSettings backed by a nested ``{section: {key: value}}`` mapping."""

    def __init__(self, data: Mapping[str, Mapping[str, Any]]) -> None:
        self._data = data

    def _lookup(self, section: str, key: str) -> Any:
        values = self._data.get(section)
        if not isinstance(values, Mapping) or key not in values:
            raise SettingNotFoundError(section, key)
        return values[key]

    def get_bool(self, section: str, key: str) -> bool:
        value = self._lookup(section, key)
        if not isinstance(value, bool):
            raise SettingTypeError(f"{section}.{key} must be a boolean, got {value!r}")
        return value

    def get_string(self, section: str, key: str) -> str:
        value = self._lookup(section, key)
        if not isinstance(value, str):
            raise SettingTypeError(f"{section}.{key} must be a string, got {value!r}")
        return value

    def get_int(
        self,
        section: str,
        key: str,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        """Return an integer setting, clamped to the inclusive bounds given."""
        value = self._lookup(section, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise SettingTypeError(f"{section}.{key} must be an integer, got {value!r}")
        clamped = value
        if min_value is not None:
            clamped = max(min_value, clamped)
        if max_value is not None:
            clamped = min(max_value, clamped)
        if clamped != value:
            logger.info("Clamped %s.%s from %d to %d", section, key, value, clamped)
        return clamped

    def get_color(self, section: str, key: str) -> Rgba:
        value = self._lookup(section, key)
        try:
            return parse_color(value)
        except ValueError as exc:
            raise SettingTypeError(f"{section}.{key}: {exc}") from exc

    def get_float_pair(self, section: str, key: str) -> tuple[float, float]:
        value = self._lookup(section, key)
        if (
            not isinstance(value, (list, tuple))
            or len(value) != 2
            or any(isinstance(v, bool) or not isinstance(v, (int, float)) for v in value)
        ):
            raise SettingTypeError(
                f"{section}.{key} must be a pair of numbers, got {value!r}"
            )
        return (float(value[0]), float(value[1]))


def load_settings(path: Path | None = None) -> DictModSettings:
    """Load the settings file (merged over defaults) as a ModSettings."""
    config, config_path = load_config(path)
    logger.debug("Using settings from %s", config_path)
    return DictModSettings(config)


__all__ = [
    "SettingsError",
    "SettingNotFoundError",
    "SettingTypeError",
    "ModSettings",
    "DictModSettings",
    "load_settings",
]
