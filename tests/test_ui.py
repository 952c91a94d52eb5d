from dataclasses import replace

import pytest

from tombkeeper.config import ColorTheme, TombConfig
from tombkeeper.ui import (
    Color,
    color_blurred,
    color_default,
    color_default_bg,
    color_default_fg,
    color_error_bg,
    color_error_fg,
    color_light,
    parse_rgb_hex,
    rgb_to_color,
)


def make_config(**colors):
    theme = replace(ColorTheme.builtin(), **colors)
    return TombConfig.create("key.yaml", "tomb.yaml", "tomb.log", theme)


def test_parse_rgb_hex():
    assert parse_rgb_hex("ffffff") == (255, 255, 255)
    assert parse_rgb_hex("#ffffff") == (255, 255, 255)


def test_parse_rgb_hex_invalid():
    assert parse_rgb_hex("not a colour") is None
    assert parse_rgb_hex("#fff") is None


def test_rgb_to_color():
    assert rgb_to_color("ffffff") == Color.from_rgb(255, 255, 255)
    assert rgb_to_color("#ffffff") == Color.from_rgb(255, 255, 255)


def test_rgb_to_color_invalid():
    assert rgb_to_color("zzzzzz") is None


def test_builtin_theme_resolves_to_rgb():
    config = TombConfig.builtin()
    assert color_default(config) == rgb_to_color("#4f5d75")
    assert color_light(config) == rgb_to_color("#ffd400")
    assert color_error_bg(config) == rgb_to_color("#242423")


@pytest.mark.parametrize(
    "name,plain,light",
    [
        ("blue", Color.BLUE, Color.LIGHT_BLUE),
        ("Cyan", Color.CYAN, Color.LIGHT_CYAN),
        ("GREEN", Color.GREEN, Color.LIGHT_GREEN),
        ("red", Color.RED, Color.LIGHT_RED),
    ],
)
def test_named_colors(name, plain, light):
    config = make_config(default=name, light=name, default_fg=name, default_bg=name)
    assert color_default(config) == plain
    assert color_default_bg(config) == plain
    assert color_light(config) == light
    assert color_default_fg(config) == light


def test_gray_mapping_differs_per_role():
    config = make_config(
        default="gray", light="gray", default_fg="gray", error_fg="gray"
    )
    assert color_default(config) == Color.DARK_GRAY
    assert color_light(config) == Color.GRAY
    assert color_default_fg(config) == Color.WHITE
    assert color_error_fg(config) == Color.from_rgb(155, 155, 155)


def test_fallbacks():
    config = make_config(
        default="bogus",
        light="bogus",
        blurred="bogus",
        default_fg="bogus",
        default_bg="bogus",
        error_fg="bogus",
        error_bg="bogus",
    )
    assert color_default_fg(config) == Color.WHITE
    assert color_default(config) == Color.WHITE
    assert color_blurred(config) == Color.DARK_GRAY
    assert color_light(config) == Color.DARK_GRAY
    assert color_default_bg(config) == Color.from_rgb(10, 10, 10)
    assert color_error_bg(config) == Color.from_rgb(10, 10, 10)
    assert color_error_fg(config) == Color.from_rgb(155, 155, 155)


def test_default_falls_back_to_default_fg():
    config = make_config(default="bogus", default_fg="yellow")
    assert color_default(config) == Color.LIGHT_YELLOW


def test_light_falls_back_to_blurred():
    config = make_config(light="bogus", blurred="magenta")
    assert color_light(config) == Color.MAGENTA