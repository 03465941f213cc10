"""Tests for chromagate.colors.conversions."""

from __future__ import annotations

import random

import pytest

from chromagate.colors.conversions import (
    hex_to_rgb,
    hsl_to_rgb,
    parsed_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
)
from chromagate.colors.models import HSLColor, RGBColor
from chromagate.colors.parser import parse_color


def test_hex_to_rgb_expands_short_form() -> None:
    assert hex_to_rgb("#fa0") == RGBColor(255, 170, 0)
    assert hex_to_rgb("#FFAA00") == RGBColor(255, 170, 0)


@pytest.mark.parametrize("raw", ["fff", "#ff", "#11223344", "#zzzzzz", "", None])
def test_hex_to_rgb_rejects_other_shapes(raw: object) -> None:
    assert hex_to_rgb(raw) is None  # type: ignore[arg-type]


@pytest.mark.parametrize("hex_code", ["#000000", "#ffffff", "#1a2b3c", "#7f7f7f", "#c0ffee"])
def test_hex_round_trip(hex_code: str) -> None:
    rgb = hex_to_rgb(hex_code)
    assert rgb is not None
    assert rgb_to_hex(rgb) == hex_code


def _channel_sweep() -> list[RGBColor]:
    colors = []
    for value in range(256):
        colors.append(RGBColor(value, 0, 0))
        colors.append(RGBColor(17, value, 200))
        colors.append(RGBColor(255, 128, value))
    rng = random.Random(20240101)
    for _ in range(500):
        colors.append(RGBColor(rng.randrange(256), rng.randrange(256), rng.randrange(256)))
    return colors


def test_rgb_hex_round_trip_over_channel_range() -> None:
    for rgb in _channel_sweep():
        assert hex_to_rgb(rgb_to_hex(rgb)) == rgb


def test_rgb_to_hex_is_lowercase_and_drops_alpha() -> None:
    assert rgb_to_hex(RGBColor(171, 205, 239, 0.5)) == "#abcdef"


def test_rgb_to_hex_clamps_out_of_range_channels() -> None:
    assert rgb_to_hex(RGBColor(300, -5, 16)) == "#ff0010"


@pytest.mark.parametrize(
    ("rgb", "hsl"),
    [
        (RGBColor(255, 0, 0), HSLColor(0, 100, 50)),
        (RGBColor(0, 0, 255), HSLColor(240, 100, 50)),
        (RGBColor(51, 102, 153), HSLColor(210, 50, 40)),
        (RGBColor(255, 255, 255), HSLColor(0, 0, 100)),
        (RGBColor(0, 0, 0), HSLColor(0, 0, 0)),
    ],
)
def test_rgb_to_hsl_known_values(rgb: RGBColor, hsl: HSLColor) -> None:
    assert rgb_to_hsl(rgb) == hsl


def test_hsl_to_rgb_known_values() -> None:
    assert hsl_to_rgb(HSLColor(120, 100, 25)) == RGBColor(0, 128, 0)
    assert hsl_to_rgb(HSLColor(0, 0, 50)) == RGBColor(128, 128, 128)
    assert hsl_to_rgb(HSLColor(60, 100, 50, 0.3)) == RGBColor(255, 255, 0, 0.3)


@pytest.mark.parametrize(
    "rgb",
    [
        RGBColor(255, 0, 0),
        RGBColor(128, 128, 128),
        RGBColor(51, 102, 153),
        RGBColor(255, 255, 0),
        RGBColor(0, 255, 255),
    ],
)
def test_hsl_round_trip_within_one_unit(rgb: RGBColor) -> None:
    back = hsl_to_rgb(rgb_to_hsl(rgb))
    assert abs(back.r - rgb.r) <= 1
    assert abs(back.g - rgb.g) <= 1
    assert abs(back.b - rgb.b) <= 1


def test_conversions_carry_alpha() -> None:
    assert rgb_to_hsl(RGBColor(0, 0, 0, 0.25)).a == 0.25


def test_parsed_to_rgb_covers_every_format() -> None:
    def resolve(raw: str) -> RGBColor | None:
        parsed = parse_color(raw)
        assert parsed is not None
        return parsed_to_rgb(parsed)

    assert resolve("#abc") == RGBColor(170, 187, 204)
    assert resolve("#ff000080") == RGBColor(255, 0, 0, 0.502)
    assert resolve("rgb(1, 2, 3)") == RGBColor(1, 2, 3)
    assert resolve("rgba(1, 2, 3, 0.5)") == RGBColor(1, 2, 3, 0.5)
    assert resolve("hsl(0, 100%, 50%)") == RGBColor(255, 0, 0)
    assert resolve("hsla(240, 100%, 50%, 1)") == RGBColor(0, 0, 255, 1.0)
    assert resolve("green") == RGBColor(0, 128, 0)
    assert resolve("transparent") == RGBColor(0, 0, 0, 0.0)
    assert resolve("currentcolor") is None


def test_color_models_validate_ranges() -> None:
    assert RGBColor(0, 255, 10, 1.0).is_valid()
    assert not RGBColor(0, 256, 10).is_valid()
    assert not RGBColor(0, 0, 0, 1.5).is_valid()
    assert HSLColor(360, 100, 0).is_valid()
    assert not HSLColor(361, 50, 50).is_valid()
    assert RGBColor(1, 2, 3, 0.4).opaque() == RGBColor(1, 2, 3)
