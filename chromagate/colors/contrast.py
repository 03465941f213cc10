"""WCAG 2.1 relative luminance, contrast ratio and grading.

Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chromagate.colors.conversions import parsed_to_rgb
from chromagate.colors.models import RGBColor
from chromagate.colors.parser import parse_color

WCAG_AA_NORMAL = 4.5
WCAG_AAA_NORMAL = 7.0
WCAG_LUMINANCE_OFFSET = 0.05

FALLBACK_FOREGROUND = RGBColor(0, 0, 0)
FALLBACK_BACKGROUND = RGBColor(255, 255, 255)

ContrastGrade = Literal["AAA", "AA", "Fail"]


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """Contrast ratio (rounded to 2 places) with its WCAG grading."""

    ratio: float
    meets_aa: bool
    meets_aaa: bool
    grade: ContrastGrade

    def to_dict(self) -> dict[str, object]:
        return {
            "ratio": self.ratio,
            "meetsAA": self.meets_aa,
            "meetsAAA": self.meets_aaa,
            "grade": self.grade,
        }


def _srgb_to_linear(channel: int) -> float:
    value = channel / 255
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGBColor) -> float:
    return (
        0.2126 * _srgb_to_linear(rgb.r)
        + 0.7152 * _srgb_to_linear(rgb.g)
        + 0.0722 * _srgb_to_linear(rgb.b)
    )


def _resolve(color: object, fallback: RGBColor) -> RGBColor:
    parsed = parse_color(color)
    if parsed is None:
        return fallback
    rgb = parsed_to_rgb(parsed)
    if rgb is None:
        return fallback
    return rgb


def contrast_ratio(foreground: object, background: object) -> float:
    """Contrast ratio between two color strings, from 1.0 to 21.0.

    Never raises: an unusable foreground is treated as black and an unusable
    background as white, so half-typed input still yields a worst-case answer.
    """
    lum_fg = relative_luminance(_resolve(foreground, FALLBACK_FOREGROUND))
    lum_bg = relative_luminance(_resolve(background, FALLBACK_BACKGROUND))
    lighter = max(lum_fg, lum_bg)
    darker = min(lum_fg, lum_bg)
    return (lighter + WCAG_LUMINANCE_OFFSET) / (darker + WCAG_LUMINANCE_OFFSET)


def grade_for_ratio(ratio: float) -> ContrastGrade:
    if ratio >= WCAG_AAA_NORMAL:
        return "AAA"
    if ratio >= WCAG_AA_NORMAL:
        return "AA"
    return "Fail"


def evaluate_contrast(foreground: object, background: object) -> ContrastResult:
    """Grade a foreground/background pair against WCAG AA and AAA."""
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=round(ratio, 2),
        meets_aa=ratio >= WCAG_AA_NORMAL,
        meets_aaa=ratio >= WCAG_AAA_NORMAL,
        grade=grade_for_ratio(ratio),
    )
