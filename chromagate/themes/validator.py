"""Structural validation of theme objects.

``collect_theme_errors`` is the single source of truth: it walks an untrusted,
loosely-typed candidate and reports one message per violated constraint, each
naming the offending path. The boolean helpers are thin views over it.
"""

from __future__ import annotations

from datetime import date, time
import re
from typing import Any, Mapping

from chromagate.colors.parser import is_valid_color
from chromagate.themes.constants import (
    MAX_FIELD_LENGTHS,
    MAX_TAG_LEN,
    MAX_TAGS,
    OPTIONAL_COLOR_KEYS,
    REQUIRED_COLOR_KEYS,
    THEME_MODES,
)
from chromagate.themes.models import Theme

_ISO_DATETIME_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2})T(\d{2}:\d{2}:\d{2})(\.\d+)?(Z|[+-]\d{2}:\d{2})",
    re.ASCII | re.IGNORECASE,
)
_ISO_DATE_RE = re.compile(
    r"(\d{4}-\d{2}-\d{2})(?:[T ](\d{2}:\d{2}(?::\d{2})?)(\.\d+)?(Z|[+-]\d{2}:?\d{2})?)?",
    re.ASCII | re.IGNORECASE,
)
_MAX_DATE_LEN = 64


def is_iso_datetime(value: object) -> bool:
    """True for a full ISO-8601 date-time with a timezone designator."""
    if not isinstance(value, str) or len(value) > _MAX_DATE_LEN:
        return False
    match = _ISO_DATETIME_RE.fullmatch(value)
    if match is None:
        return False
    return _valid_offset(match.group(4)) and _valid_calendar(match.group(1), match.group(2))


def is_iso_date(value: object) -> bool:
    """True for an ISO-8601 date, optionally followed by a time and offset."""
    if not isinstance(value, str) or len(value) > _MAX_DATE_LEN:
        return False
    match = _ISO_DATE_RE.fullmatch(value)
    if match is None:
        return False
    return _valid_offset(match.group(4)) and _valid_calendar(match.group(1), match.group(2))


def _valid_calendar(date_part: str, time_part: str | None) -> bool:
    try:
        date.fromisoformat(date_part)
        if time_part:
            time.fromisoformat(time_part)
    except ValueError:
        return False
    return True


def _valid_offset(offset: str | None) -> bool:
    if not offset or offset.upper() == "Z":
        return True
    digits = offset[1:].replace(":", "")
    return int(digits[:2]) <= 23 and int(digits[2:]) <= 59


def is_valid_theme_mode(mode: object) -> bool:
    return isinstance(mode, str) and mode in THEME_MODES


def _as_mapping(candidate: object) -> Mapping[str, Any] | None:
    if isinstance(candidate, Theme):
        return candidate.to_dict()
    if isinstance(candidate, Mapping):
        return candidate
    return None


def _metadata_errors(data: Mapping[str, Any], path: str) -> list[str]:
    errors: list[str] = []

    for key in ("id", "name"):
        value = data.get(key)
        if key not in data or value is None:
            errors.append(f"Missing required property: {path}.{key}")
        elif not isinstance(value, str):
            errors.append(f"Invalid type at {path}.{key}: expected string")
        elif not value.strip():
            errors.append(f"Value too short at {path}.{key}: must not be blank")

    for key in ("description", "author", "version"):
        if key in data and not isinstance(data[key], str):
            errors.append(f"Invalid type at {path}.{key}: expected string")

    for key, limit in MAX_FIELD_LENGTHS.items():
        value = data.get(key)
        if isinstance(value, str) and len(value) > limit:
            errors.append(f"Value too long at {path}.{key}: maximum length is {limit}")

    if "isBuiltIn" in data and not isinstance(data["isBuiltIn"], bool):
        errors.append(f"Invalid type at {path}.isBuiltIn: expected boolean")

    for key in ("createdAt", "updatedAt"):
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            errors.append(f"Invalid type at {path}.{key}: expected string")
        elif not is_iso_date(value):
            errors.append(f"Invalid format at {path}.{key}: expected ISO-8601 date")

    if "tags" in data:
        tags = data["tags"]
        if not isinstance(tags, (list, tuple)):
            errors.append(f"Invalid type at {path}.tags: expected array of strings")
        else:
            if len(tags) > MAX_TAGS:
                errors.append(f"Too many items at {path}.tags: maximum is {MAX_TAGS}")
            for index, tag in enumerate(tags):
                if not isinstance(tag, str):
                    errors.append(f"Invalid type at {path}.tags[{index}]: expected string")
                elif len(tag) > MAX_TAG_LEN:
                    errors.append(
                        f"Value too long at {path}.tags[{index}]: maximum length is {MAX_TAG_LEN}"
                    )
    return errors


def _color_errors(colors: object, path: str, *, extended: bool) -> list[str]:
    if not isinstance(colors, Mapping):
        if colors is None:
            return [f"Missing required property: {path}"]
        return [f"Invalid type at {path}: expected object"]

    errors: list[str] = []
    for key in REQUIRED_COLOR_KEYS:
        if key not in colors:
            errors.append(f"Missing required property: {path}.{key}")
        elif not is_valid_color(colors[key]):
            errors.append(f"Invalid color at {path}.{key}: {_describe(colors[key])}")
    if extended:
        for key in OPTIONAL_COLOR_KEYS:
            if key in colors and not is_valid_color(colors[key]):
                errors.append(f"Invalid color at {path}.{key}: {_describe(colors[key])}")
    return errors


def _describe(value: object) -> str:
    if isinstance(value, str):
        shown = value if len(value) <= 40 else f"{value[:40]}..."
        return f"unsupported value {shown!r}"
    return f"expected string, got {type(value).__name__}"


def collect_theme_errors(
    candidate: object,
    path: str = "theme",
    *,
    extended: bool = False,
) -> list[str]:
    """Return every structural problem with ``candidate``; empty when valid.

    With ``extended=True`` the known optional color roles are checked as well
    when they are present.
    """
    data = _as_mapping(candidate)
    if data is None:
        if candidate is None:
            return [f"Missing required property: {path}"]
        return [f"Invalid type at {path}: expected object"]

    errors = _metadata_errors(data, path)
    if "mode" not in data:
        errors.append(f"Missing required property: {path}.mode")
    elif not is_valid_theme_mode(data["mode"]):
        allowed = ", ".join(THEME_MODES)
        errors.append(f"Invalid value at {path}.mode: must be one of {allowed}")
    errors.extend(_color_errors(data.get("colors"), f"{path}.colors", extended=extended))
    return errors


def validate_theme_metadata(candidate: object) -> bool:
    data = _as_mapping(candidate)
    return data is not None and not _metadata_errors(data, "theme")


def validate_theme_colors(colors: object) -> bool:
    """True when all 11 required color roles are present and valid."""
    return not _color_errors(colors, "colors", extended=False)


def validate_extended_colors(colors: object) -> bool:
    """Like validate_theme_colors, also checking optional roles that are present."""
    return not _color_errors(colors, "colors", extended=True)


def validate_theme(candidate: object) -> bool:
    """True when ``candidate`` satisfies the theme contract. No side effects."""
    return not collect_theme_errors(candidate)
