"""Conversions between hex, RGB and HSL color representations."""

from __future__ import annotations

import math

from chromagate.colors.models import ColorFormat, HSLColor, ParsedColor, RGBColor

_HEX_DIGITS = frozenset("0123456789abcdef")

NAMED_COLOR_RGB: dict[str, RGBColor] = {
    "black": RGBColor(0, 0, 0),
    "white": RGBColor(255, 255, 255),
    "red": RGBColor(255, 0, 0),
    "green": RGBColor(0, 128, 0),
    "blue": RGBColor(0, 0, 255),
    "yellow": RGBColor(255, 255, 0),
    "cyan": RGBColor(0, 255, 255),
    "magenta": RGBColor(255, 0, 255),
    "gray": RGBColor(128, 128, 128),
    "grey": RGBColor(128, 128, 128),
    "transparent": RGBColor(0, 0, 0, 0.0),
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def hex_to_rgb(hex_code: str) -> RGBColor | None:
    """Convert a ``#rgb`` or ``#rrggbb`` string to RGB; None for anything else."""
    if not isinstance(hex_code, str):
        return None
    value = hex_code.strip().lower()
    if not value.startswith("#"):
        return None
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or not set(digits) <= _HEX_DIGITS:
        return None
    return RGBColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def rgb_to_hex(rgb: RGBColor) -> str:
    """Convert RGB channels to a lowercase ``#rrggbb`` string; alpha is dropped."""

    def to_hex(channel: float) -> str:
        return f"{_round_half_up(_clamp(channel, 0, 255)):02x}"

    return f"#{to_hex(rgb.r)}{to_hex(rgb.g)}{to_hex(rgb.b)}"


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to RGB."""
    h = _clamp(hsl.h, 0, 360) / 360
    s = _clamp(hsl.s, 0, 100) / 100
    l = _clamp(hsl.l, 0, 100) / 100  # noqa: E741

    def hue_to_rgb(p: float, q: float, t: float) -> float:
        if t < 0:
            t += 1
        if t > 1:
            t -= 1
        if t < 1 / 6:
            return p + (q - p) * 6 * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_rgb(p, q, h + 1 / 3)
        g = hue_to_rgb(p, q, h)
        b = hue_to_rgb(p, q, h - 1 / 3)

    return RGBColor(
        r=_round_half_up(r * 255),
        g=_round_half_up(g * 255),
        b=_round_half_up(b * 255),
        a=hsl.a,
    )


def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Convert RGB to HSL."""
    r = rgb.r / 255
    g = rgb.g / 255
    b = rgb.b / 255

    high = max(r, g, b)
    low = min(r, g, b)
    l = (high + low) / 2  # noqa: E741

    if high == low:
        h = s = 0.0
    else:
        delta = high - low
        s = delta / (2 - high - low) if l > 0.5 else delta / (high + low)
        if high == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h /= 6

    return HSLColor(
        h=_round_half_up(h * 360),
        s=_round_half_up(s * 100),
        l=_round_half_up(l * 100),
        a=rgb.a,
    )


def parsed_to_rgb(parsed: ParsedColor) -> RGBColor | None:
    """Resolve any parsed color to RGB.

    Returns None for ``currentcolor``, which has no value outside a rendering
    context.
    """
    fmt = parsed.format
    if fmt in (ColorFormat.HEX3, ColorFormat.HEX6):
        return hex_to_rgb(parsed.value)
    if fmt is ColorFormat.HEX8:
        base = hex_to_rgb(parsed.value[:7])
        if base is None:
            return None
        alpha = round(int(parsed.value[7:9], 16) / 255, 3)
        return RGBColor(base.r, base.g, base.b, alpha)
    if fmt in (ColorFormat.RGB, ColorFormat.RGBA):
        r, g, b = (int(part) for part in parsed.channels[:3])
        alpha = float(parsed.channels[3]) if fmt is ColorFormat.RGBA else None
        return RGBColor(r, g, b, alpha)
    if fmt in (ColorFormat.HSL, ColorFormat.HSLA):
        h, s, l = (int(part) for part in parsed.channels[:3])  # noqa: E741
        alpha = float(parsed.channels[3]) if fmt is ColorFormat.HSLA else None
        return hsl_to_rgb(HSLColor(h, s, l, alpha))
    return NAMED_COLOR_RGB.get(parsed.value)
