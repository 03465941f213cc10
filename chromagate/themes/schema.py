"""Export envelope validation and normalization.

The envelope arrives from outside the process (a file or the clipboard),
already decoded from text into plain dicts and lists. Validation reports every
violated constraint; normalization keeps only recognized fields, so anything
the schema does not know about is dropped rather than carried along.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from chromagate.themes.constants import (
    ENVELOPE_FIELDS,
    EXPORT_FORMAT_VERSION,
    MAX_EXPORTED_BY_LEN,
    OPTIONAL_COLOR_KEYS,
    REQUIRED_COLOR_KEYS,
    THEME_FIELDS,
)
from chromagate.themes.models import EnvelopeValidation, ThemeExportEnvelope
from chromagate.themes.sanitizer import sanitize_text, sanitize_theme
from chromagate.themes.validator import collect_theme_errors, is_iso_datetime

logger = logging.getLogger(__name__)


def _envelope_errors(raw: Mapping[str, Any]) -> list[str]:
    errors: list[str] = []

    if "version" not in raw:
        errors.append("Missing required property: version")
    elif not isinstance(raw["version"], str):
        errors.append("Invalid type at version: expected string")
    elif raw["version"] != EXPORT_FORMAT_VERSION:
        errors.append(
            f"Invalid value at version: unsupported format version {raw['version']!r}, "
            f"expected {EXPORT_FORMAT_VERSION!r}"
        )

    if "exportedAt" not in raw:
        errors.append("Missing required property: exportedAt")
    elif not isinstance(raw["exportedAt"], str):
        errors.append("Invalid type at exportedAt: expected string")
    elif not is_iso_datetime(raw["exportedAt"]):
        errors.append("Invalid format at exportedAt: expected ISO-8601 date-time")

    if "exportedBy" in raw:
        exported_by = raw["exportedBy"]
        if not isinstance(exported_by, str):
            errors.append("Invalid type at exportedBy: expected string")
        elif len(exported_by) > MAX_EXPORTED_BY_LEN:
            errors.append(
                f"Value too long at exportedBy: maximum length is {MAX_EXPORTED_BY_LEN}"
            )

    if "theme" not in raw:
        errors.append("Missing required property: theme")
    else:
        errors.extend(collect_theme_errors(raw["theme"], "theme", extended=True))
    return errors


def _envelope_warnings(raw: Mapping[str, Any]) -> list[str]:
    theme = raw.get("theme")
    if not isinstance(theme, Mapping):
        return []
    warnings: list[str] = []
    if not theme.get("description"):
        warnings.append("Theme description is recommended for better user experience")
    if not theme.get("author"):
        warnings.append("Theme author information is recommended")
    if not theme.get("version"):
        warnings.append("Theme version is recommended for compatibility tracking")
    return warnings


def validate_envelope(raw: object) -> EnvelopeValidation:
    """Check an untrusted export envelope; collects all errors, not just the first."""
    if not isinstance(raw, Mapping):
        return EnvelopeValidation(
            is_valid=False,
            errors=["Invalid type at root: expected object"],
        )
    errors = _envelope_errors(raw)
    if errors:
        return EnvelopeValidation(is_valid=False, errors=errors)
    return EnvelopeValidation(is_valid=True, warnings=_envelope_warnings(raw))


def project_theme(theme: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the recognized theme fields and color roles."""
    projected = {key: theme[key] for key in THEME_FIELDS if key in theme and key != "colors"}
    colors = theme.get("colors")
    if isinstance(colors, Mapping):
        known = REQUIRED_COLOR_KEYS + OPTIONAL_COLOR_KEYS
        projected["colors"] = {key: colors[key] for key in known if key in colors}
    elif "colors" in theme:
        projected["colors"] = colors
    return projected


def project_envelope(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Keep only the recognized envelope fields; the theme is projected too."""
    projected = {key: raw[key] for key in ENVELOPE_FIELDS if key in raw}
    theme = projected.get("theme")
    if isinstance(theme, Mapping):
        projected["theme"] = project_theme(theme)
    return projected


def clean_exported_by(value: object) -> str | None:
    """Sanitized ``exportedBy`` label, or None when nothing usable is left."""
    if not isinstance(value, str):
        return None
    return sanitize_text(value) or None


def normalize_envelope(raw: object) -> ThemeExportEnvelope | None:
    """Project, validate and sanitize an envelope; None if any step refuses it."""
    if not isinstance(raw, Mapping):
        return None
    dropped = sorted(str(key) for key in raw.keys() if key not in ENVELOPE_FIELDS)
    if dropped:
        logger.debug("dropping unrecognized envelope fields: %s", ", ".join(dropped))

    projected = project_envelope(raw)
    if not validate_envelope(projected).is_valid:
        return None
    theme = sanitize_theme(projected["theme"])
    if theme is None:
        return None
    return ThemeExportEnvelope(
        version=projected["version"],
        theme=theme,
        exported_at=projected["exportedAt"],
        exported_by=clean_exported_by(projected.get("exportedBy")),
    )
