"""Color string grammar and parsing.

Every accepted color format is described once, in ``COLOR_GRAMMAR``. Numeric
ranges are enforced by the patterns themselves, so a value such as
``hsl(720, 150%, 50%)`` never matches and no post-hoc range check exists that
could drift from the grammar.
"""

from __future__ import annotations

import re

from chromagate.colors.models import ColorFormat, ParsedColor
from chromagate.errors import ColorFormatError

_BYTE = r"(25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_HUE = r"(360|3[0-5]\d|[12]\d\d|[1-9]?\d)"
_PERCENT = r"(100|[1-9]?\d)%"
_ALPHA = r"(0(?:\.\d+)?|1(?:\.0+)?)"
_SEP = r"\s*,\s*"

COLOR_GRAMMAR: tuple[tuple[ColorFormat, re.Pattern[str]], ...] = (
    (ColorFormat.HEX3, re.compile(r"#[0-9a-f]{3}", re.ASCII)),
    (ColorFormat.HEX6, re.compile(r"#[0-9a-f]{6}", re.ASCII)),
    (ColorFormat.HEX8, re.compile(r"#[0-9a-f]{8}", re.ASCII)),
    (
        ColorFormat.RGB,
        re.compile(rf"rgb\(\s*{_BYTE}{_SEP}{_BYTE}{_SEP}{_BYTE}\s*\)", re.ASCII),
    ),
    (
        ColorFormat.RGBA,
        re.compile(rf"rgba\(\s*{_BYTE}{_SEP}{_BYTE}{_SEP}{_BYTE}{_SEP}{_ALPHA}\s*\)", re.ASCII),
    ),
    (
        ColorFormat.HSL,
        re.compile(rf"hsl\(\s*{_HUE}{_SEP}{_PERCENT}{_SEP}{_PERCENT}\s*\)", re.ASCII),
    ),
    (
        ColorFormat.HSLA,
        re.compile(
            rf"hsla\(\s*{_HUE}{_SEP}{_PERCENT}{_SEP}{_PERCENT}{_SEP}{_ALPHA}\s*\)",
            re.ASCII,
        ),
    ),
)

SAFE_NAMED_COLORS: frozenset[str] = frozenset(
    {
        "black",
        "white",
        "red",
        "green",
        "blue",
        "yellow",
        "cyan",
        "magenta",
        "gray",
        "grey",
        "transparent",
        "currentcolor",
    }
)

# Ceiling on accepted input length; longer strings are refused before matching.
_MAX_COLOR_LEN = 64


def parse_color(raw: object) -> ParsedColor | None:
    """Classify ``raw`` against the grammar table; return None when nothing matches."""
    if not isinstance(raw, str):
        return None
    value = raw.strip().lower()
    if not value or len(value) > _MAX_COLOR_LEN:
        return None

    for color_format, pattern in COLOR_GRAMMAR:
        match = pattern.fullmatch(value)
        if match:
            return ParsedColor(value=value, format=color_format, channels=match.groups())

    if value in SAFE_NAMED_COLORS:
        return ParsedColor(value=value, format=ColorFormat.NAMED)
    return None


def require_color(raw: object) -> ParsedColor:
    """Like parse_color, but raise ColorFormatError for unsupported input."""
    parsed = parse_color(raw)
    if parsed is None:
        raise ColorFormatError(f"Unsupported color value: {raw!r}")
    return parsed


def is_valid_color(raw: object) -> bool:
    return parse_color(raw) is not None


def canonical_form(parsed: ParsedColor) -> str:
    """Rebuild a color string from its parsed parts.

    Only captured digits and fixed punctuation reach the output, so nothing
    but the grammar's own alphabet can survive a round through this function.
    """
    fmt = parsed.format
    if parsed.is_hex or fmt is ColorFormat.NAMED:
        return parsed.value

    numbers = [str(int(part)) for part in parsed.channels[:3]]
    if fmt is ColorFormat.RGB:
        return f"rgb({numbers[0]}, {numbers[1]}, {numbers[2]})"
    if fmt is ColorFormat.RGBA:
        alpha = _alpha_text(parsed.channels[3])
        return f"rgba({numbers[0]}, {numbers[1]}, {numbers[2]}, {alpha})"
    if fmt is ColorFormat.HSL:
        return f"hsl({numbers[0]}, {numbers[1]}%, {numbers[2]}%)"
    alpha = _alpha_text(parsed.channels[3])
    return f"hsla({numbers[0]}, {numbers[1]}%, {numbers[2]}%, {alpha})"


def canonical_color(raw: object) -> str | None:
    """Return the canonical string for ``raw``, or None if it does not parse."""
    parsed = parse_color(raw)
    if parsed is None:
        return None
    return canonical_form(parsed)


def _alpha_text(text: str) -> str:
    # "0.500" -> "0.5", "1.0" -> "1"; the result still matches the alpha grammar.
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
