"""Color parsing, conversion and contrast exports."""

from chromagate.colors.contrast import ContrastResult, contrast_ratio, evaluate_contrast
from chromagate.colors.conversions import hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl
from chromagate.colors.models import ColorFormat, HSLColor, ParsedColor, RGBColor
from chromagate.colors.parser import canonical_color, is_valid_color, parse_color

__all__ = [
    "ColorFormat",
    "ContrastResult",
    "HSLColor",
    "ParsedColor",
    "RGBColor",
    "canonical_color",
    "contrast_ratio",
    "evaluate_contrast",
    "hex_to_rgb",
    "hsl_to_rgb",
    "is_valid_color",
    "parse_color",
    "rgb_to_hex",
    "rgb_to_hsl",
]
