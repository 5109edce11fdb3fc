from __future__ import annotations

from copy import deepcopy
from typing import Any

import pytest

from loading_screen.colors import Rgba, parse_color
from loading_screen.config import DEFAULT_CONFIG


class FakeSettings:
    """In-memory ModSettings that records every read."""

    def __init__(self, data: dict[str, dict[str, Any]]) -> None:
        self.data = data
        self.reads: list[tuple[str, str]] = []

    def _get(self, section: str, key: str) -> Any:
        self.reads.append((section, key))
        return self.data[section][key]

    def get_bool(self, section: str, key: str) -> bool:
        return bool(self._get(section, key))

    def get_string(self, section: str, key: str) -> str:
        return str(self._get(section, key))

    def get_int(
        self,
        section: str,
        key: str,
        min_value: int | None = None,
        max_value: int | None = None,
    ) -> int:
        value = int(self._get(section, key))
        if min_value is not None:
            value = max(min_value, value)
        if max_value is not None:
            value = min(max_value, value)
        return value

    def get_color(self, section: str, key: str) -> Rgba:
        return parse_color(self._get(section, key))

    def get_float_pair(self, section: str, key: str) -> tuple[float, float]:
        first, second = self._get(section, key)
        return (float(first), float(second))


@pytest.fixture()
def settings_data() -> dict[str, dict[str, Any]]:
    return deepcopy(DEFAULT_CONFIG)


@pytest.fixture()
def fake_settings(settings_data: dict[str, dict[str, Any]]) -> FakeSettings:
    return FakeSettings(settings_data)
