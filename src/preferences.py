# Geoshapes
# Copyright 2025 - Geoshapes authors
import logging
from typing import Self

import toml
from coloraide import Color

logger = logging.getLogger(__name__)


class Preferences:
    DEFAULT_COLOR = "green"
    DEFAULT_FILLED = True
    DEFAULT_TYPE_PRECISION = 2

    def __init__(self):
        self._color = self.DEFAULT_COLOR
        self._filled = self.DEFAULT_FILLED
        self._type_precision = self.DEFAULT_TYPE_PRECISION

    @classmethod
    def from_dict(cls, d: dict) -> Self:
        prefs = cls()
        shape = d.get("shape", {})
        if "color" in shape:
            prefs.set_default_color(shape["color"])
        if "filled" in shape:
            prefs.set_default_filled(shape["filled"])
        triangle = d.get("triangle", {})
        if "type_precision" in triangle:
            prefs.set_type_precision(triangle["type_precision"])
        return prefs

    def to_dict(self) -> dict:
        return {
            "shape": {"color": self._color, "filled": self._filled},
            "triangle": {"type_precision": self._type_precision},
        }

    @classmethod
    def load_from_filename(cls, filename: str) -> Self | None:
        logger.info(f"Loading preferences from filename {filename}")
        try:
            with open(filename, "r", encoding="utf-8") as f:
                d = toml.load(f)
                if not d:
                    logger.error(f"Failed to load preferences from {filename}")
                    return None
                return cls.from_dict(d)
        except FileNotFoundError as e:
            logger.error(f"Could not load file from {filename}, error: {e}")
            return None

    def get_default_color(self) -> str:
        return self._color

    def set_default_color(self, color: str) -> None:
        try:
            Color(color)
        except (ValueError, TypeError):
            logger.warning(f"Invalid color {color!r}, keeping {self._color!r}")
            return
        self._color = color

    def get_default_filled(self) -> bool:
        return self._filled

    def set_default_filled(self, filled: bool) -> None:
        self._filled = bool(filled)

    def get_type_precision(self) -> int:
        return self._type_precision

    def set_type_precision(self, precision: int) -> None:
        # bool is an int subclass, reject it explicitly
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            logger.warning(f"Invalid precision {precision!r}, keeping {self._type_precision}")
            return
        self._type_precision = precision


_global_preferences = None


# Singleton
def get_global_preferences() -> Preferences:
    global _global_preferences
    if _global_preferences is None:
        _global_preferences = Preferences()
    return _global_preferences


def set_global_preferences(preferences: Preferences | None) -> None:
    """Replaces the global instance. Passing None restores the defaults on next use."""
    global _global_preferences
    _global_preferences = preferences


if __name__ == "__main__":
    preferences = get_global_preferences()
    preferences.set_default_color("#ff8000")

    print(f"Color: {preferences.get_default_color()}")
    print(f"Filled: {preferences.get_default_filled()}")
    print(f"Type precision: {preferences.get_type_precision()}")
