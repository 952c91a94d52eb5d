"""Colours of the terminal interface, resolved from the configured theme."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Optional

from .config import TombConfig

_RGB_HEX = re.compile(r"[#]?([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")


@dataclass(frozen=True)
class Color:
    """A terminal colour: either a named palette entry or an RGB triple."""

    name: str
    rgb: Optional[tuple[int, int, int]] = None

    BLACK: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    RED: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    GRAY: ClassVar["Color"]
    DARK_GRAY: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    LIGHT_BLUE: ClassVar["Color"]
    LIGHT_CYAN: ClassVar["Color"]
    LIGHT_GREEN: ClassVar["Color"]
    LIGHT_MAGENTA: ClassVar["Color"]
    LIGHT_RED: ClassVar["Color"]
    LIGHT_YELLOW: ClassVar["Color"]

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls("rgb", (r, g, b))


Color.BLACK = Color("black")
Color.BLUE = Color("blue")
Color.CYAN = Color("cyan")
Color.GREEN = Color("green")
Color.MAGENTA = Color("magenta")
Color.RED = Color("red")
Color.YELLOW = Color("yellow")
Color.GRAY = Color("gray")
Color.DARK_GRAY = Color("dark_gray")
Color.WHITE = Color("white")
Color.LIGHT_BLUE = Color("light_blue")
Color.LIGHT_CYAN = Color("light_cyan")
Color.LIGHT_GREEN = Color("light_green")
Color.LIGHT_MAGENTA = Color("light_magenta")
Color.LIGHT_RED = Color("light_red")
Color.LIGHT_YELLOW = Color("light_yellow")

_PLAIN = {
    "blue": Color.BLUE,
    "cyan": Color.CYAN,
    "green": Color.GREEN,
    "magenta": Color.MAGENTA,
    "red": Color.RED,
    "yellow": Color.YELLOW,
    "gray": Color.DARK_GRAY,
    "white": Color.WHITE,
}

_LIGHT = {
    "blue": Color.LIGHT_BLUE,
    "cyan": Color.LIGHT_CYAN,
    "green": Color.LIGHT_GREEN,
    "magenta": Color.LIGHT_MAGENTA,
    "red": Color.LIGHT_RED,
    "yellow": Color.LIGHT_YELLOW,
    "white": Color.WHITE,
}


def parse_rgb_hex(color: str) -> Optional[tuple[int, int, int]]:
    """Find the first ``[#]rrggbb`` in ``color`` and return its components."""
    match = _RGB_HEX.search(color)
    if match is None:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return (r, g, b)


def rgb_to_color(color: str) -> Optional[Color]:
    """Turn an RGB hex string into a :class:`Color`, or ``None``."""
    rgb = parse_rgb_hex(color)
    if rgb is None:
        return None
    return Color.from_rgb(*rgb)


def _resolve(value: str, names: dict[str, Color], fallback: Color) -> Color:
    value = value.lower()
    if value in names:
        return names[value]
    return rgb_to_color(value) or fallback


def _config(config: Optional[TombConfig]) -> TombConfig:
    return TombConfig.load() if config is None else config


def color_default(config: Optional[TombConfig] = None) -> Color:
    config = _config(config)
    return _resolve(config.colors.default, _PLAIN, color_default_fg(config))


def color_light(config: Optional[TombConfig] = None) -> Color:
    config = _config(config)
    names = {**_LIGHT, "gray": Color.GRAY}
    return _resolve(config.colors.light, names, color_blurred(config))


def color_blurred(config: Optional[TombConfig] = None) -> Color:
    config = _config(config)
    return _resolve(config.colors.blurred, _PLAIN, Color.DARK_GRAY)


def color_default_fg(config: Optional[TombConfig] = None) -> Color:
    config = _config(config)
    names = {**_LIGHT, "gray": Color.WHITE}
    return _resolve(config.colors.default_fg, names, Color.WHITE)


def color_default_bg(config: Optional[TombConfig] = None) -> Color:
    config = _config(config)
    return _resolve(config.colors.default_bg, _PLAIN, Color.from_rgb(10, 10, 10))


def color_error_fg(config: Optional[TombConfig] = None) -> Color:
    config = _config(config)
    grey = Color.from_rgb(155, 155, 155)
    names = {**_LIGHT, "gray": grey}
    return _resolve(config.colors.error_fg, names, grey)


def color_error_bg(config: Optional[TombConfig] = None) -> Color:
    config = _config(config)
    return _resolve(config.colors.error_bg, _PLAIN, Color.from_rgb(10, 10, 10))