"""Typed color values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorFormat(str, Enum):
    """Grammar a color string was matched against."""

    HEX3 = "hex3"
    HEX6 = "hex6"
    HEX8 = "hex8"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    NAMED = "named"


@dataclass(frozen=True, slots=True)
class ParsedColor:
    """A normalized color string tagged with its detected format.

    ``channels`` holds the numbers captured by the grammar, in source order,
    as text; it is empty for hex and named colors.
    """

    value: str
    format: ColorFormat
    channels: tuple[str, ...] = ()

    @property
    def is_hex(self) -> bool:
        return self.format in (ColorFormat.HEX3, ColorFormat.HEX6, ColorFormat.HEX8)


@dataclass(frozen=True, slots=True)
class RGBColor:
    """sRGB color with 0-255 channels and optional 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float | None = None

    def is_valid(self) -> bool:
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int):
                return False
            if not 0 <= channel <= 255:
                return False
        return _valid_alpha(self.a)

    def opaque(self) -> RGBColor:
        return RGBColor(self.r, self.g, self.b)


@dataclass(frozen=True, slots=True)
class HSLColor:
    """HSL color: hue in degrees, saturation and lightness in percent."""

    h: int
    s: int
    l: int  # noqa: E741
    a: float | None = None

    def is_valid(self) -> bool:
        bounds = ((self.h, 360), (self.s, 100), (self.l, 100))
        for value, upper in bounds:
            if isinstance(value, bool) or not isinstance(value, int):
                return False
            if not 0 <= value <= upper:
                return False
        return _valid_alpha(self.a)


def _valid_alpha(alpha: float | None) -> bool:
    if alpha is None:
        return True
    if isinstance(alpha, bool) or not isinstance(alpha, (int, float)):
        return False
    return 0.0 <= alpha <= 1.0
