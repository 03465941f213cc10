"""Theme engine constants."""

from __future__ import annotations

EXPORT_FORMAT_VERSION = "1.0"
DEFAULT_EXPORTED_BY = "Chromagate Theme Customizer"

THEME_MODES: tuple[str, ...] = ("light", "dark")

REQUIRED_COLOR_KEYS: tuple[str, ...] = (
    "primary",
    "secondary",
    "accent",
    "background",
    "surface",
    "text",
    "textSecondary",
    "border",
    "error",
    "warning",
    "success",
)

OPTIONAL_COLOR_KEYS: tuple[str, ...] = (
    "info",
    "muted",
    "hover",
    "focus",
    "selection",
)

TEXT_FIELDS: tuple[str, ...] = ("id", "name", "description", "author", "version")

THEME_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "description",
    "author",
    "version",
    "tags",
    "isBuiltIn",
    "createdAt",
    "updatedAt",
    "mode",
    "colors",
)

ENVELOPE_FIELDS: tuple[str, ...] = ("version", "theme", "exportedAt", "exportedBy")

# Characters removed from free-text fields before a theme is accepted.
UNSAFE_TEXT_CHARS = "<>'\"\\()"

MAX_FIELD_LENGTHS: dict[str, int] = {
    "id": 100,
    "name": 100,
    "description": 500,
    "author": 100,
    "version": 50,
}
MAX_TAGS = 32
MAX_TAG_LEN = 50
MAX_EXPORTED_BY_LEN = 200

MIN_IMPORT_BYTES = 10
MAX_IMPORT_BYTES = 1024 * 1024

JSON_CONTENT_TYPES: frozenset[str] = frozenset({"application/json"})
YAML_CONTENT_TYPES: frozenset[str] = frozenset(
    {"application/yaml", "application/x-yaml", "text/yaml", "text/x-yaml"}
)
JSON_SUFFIXES: tuple[str, ...] = (".json",)
YAML_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")

# Foreground/background role pairs that must meet WCAG AA.
CRITICAL_CONTRAST_PAIRS: tuple[tuple[str, str], ...] = (
    ("text", "background"),
    ("textSecondary", "background"),
    ("text", "surface"),
    ("textSecondary", "surface"),
)
