"""Theme sanitization.

A candidate is validated, its free-text fields are stripped of markup and
script meta-characters, every color is rebuilt from its parsed form, and the
result is validated again. Anything that does not survive all four steps is
refused as a whole.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from chromagate.colors.parser import canonical_color
from chromagate.themes.constants import (
    OPTIONAL_COLOR_KEYS,
    REQUIRED_COLOR_KEYS,
    TEXT_FIELDS,
    UNSAFE_TEXT_CHARS,
)
from chromagate.themes.models import Theme
from chromagate.themes.validator import (
    collect_theme_errors,
    is_valid_theme_mode,
    validate_theme_colors,
)

logger = logging.getLogger(__name__)

_UNSAFE_TABLE = str.maketrans("", "", UNSAFE_TEXT_CHARS)


def sanitize_text(value: str) -> str:
    return value.translate(_UNSAFE_TABLE).strip()


def _sanitize_colors(colors: Mapping[str, Any]) -> dict[str, str] | None:
    cleaned: dict[str, str] = {}
    for key in REQUIRED_COLOR_KEYS + OPTIONAL_COLOR_KEYS:
        if key not in colors:
            continue
        canonical = canonical_color(colors[key])
        if canonical is None:
            return None
        cleaned[key] = canonical
    return cleaned


def sanitize_theme(candidate: object) -> Theme | None:
    """Return a clean Theme built from ``candidate``, or None if it is refused."""
    errors = collect_theme_errors(candidate)
    if errors:
        logger.debug("theme rejected by validation: %s", "; ".join(errors))
        return None

    source: Mapping[str, Any] = (
        candidate.to_dict() if isinstance(candidate, Theme) else candidate  # type: ignore
    )

    cleaned: dict[str, Any] = {"mode": source["mode"]}
    for key in TEXT_FIELDS:
        value = source.get(key)
        if value is not None:
            cleaned[key] = sanitize_text(value)

    tags = source.get("tags")
    if tags is not None:
        stripped = (sanitize_text(tag) for tag in tags)
        cleaned["tags"] = [tag for tag in stripped if tag]

    for key in ("isBuiltIn", "createdAt", "updatedAt"):
        if key in source:
            cleaned[key] = source[key]

    colors = _sanitize_colors(source["colors"])
    if colors is None:
        logger.debug(
            "theme %r rejected: a color did not survive canonicalization", cleaned.get("id")
        )
        return None
    cleaned["colors"] = colors

    errors = collect_theme_errors(cleaned, extended=True)
    if errors:
        logger.debug("theme rejected after sanitization: %s", "; ".join(errors))
        return None
    return Theme.from_sanitized(cleaned)


def build_validated_theme(candidate: object, fallback: Theme) -> tuple[Theme, list[str]]:
    """Merge the valid parts of a user edit onto ``fallback``.

    Used by interactive editors, where a half-finished edit should still
    produce a usable theme. Every field taken from the fallback is reported
    as a warning. Import paths never call this; they refuse invalid input.
    """
    warnings: list[str] = []
    data = candidate.to_dict() if isinstance(candidate, Theme) else candidate
    if not isinstance(data, Mapping):
        return fallback, ["Invalid theme object, using fallback"]

    merged: dict[str, Any] = fallback.to_dict()

    for key, label in (("id", "ID"), ("name", "name")):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            merged[key] = value.strip()
        else:
            warnings.append(f"Invalid or missing theme {label}, using fallback")

    colors = data.get("colors")
    if validate_theme_colors(colors):
        merged_colors = dict(merged["colors"])
        for key in REQUIRED_COLOR_KEYS:
            merged_colors[key] = colors[key]
        for key in OPTIONAL_COLOR_KEYS:
            if key not in colors:
                continue
            if canonical_color(colors[key]) is None:
                warnings.append(f"Invalid color value for {key}, using fallback")
            else:
                merged_colors[key] = colors[key]
        merged["colors"] = merged_colors
    else:
        warnings.append("Invalid colors object, using fallback colors")

    if is_valid_theme_mode(data.get("mode")):
        merged["mode"] = data["mode"]
    else:
        warnings.append("Invalid theme mode, using fallback")

    theme = sanitize_theme(merged)
    if theme is None:
        warnings.append("Edited theme could not be sanitized, using fallback")
        return fallback, warnings
    return theme, warnings
