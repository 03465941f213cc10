"""Theme validation, sanitization and transfer exports."""

from chromagate.errors import ThemeValidationError
from chromagate.themes.accessibility import audit_theme
from chromagate.themes.constants import EXPORT_FORMAT_VERSION, REQUIRED_COLOR_KEYS
from chromagate.themes.models import (
    AccessibilityReport,
    EnvelopeValidation,
    ImportResult,
    Theme,
    ThemeExportEnvelope,
    ThemeSummary,
)
from chromagate.themes.registry import ThemeRegistry
from chromagate.themes.sanitizer import build_validated_theme, sanitize_theme
from chromagate.themes.schema import normalize_envelope, validate_envelope
from chromagate.themes.transfer import (
    copy_theme_to_clipboard,
    create_theme_json,
    export_theme_file,
    import_theme_file,
    import_theme_from_clipboard,
    import_theme_text,
)
from chromagate.themes.validator import validate_theme

__all__ = [
    "EXPORT_FORMAT_VERSION",
    "REQUIRED_COLOR_KEYS",
    "AccessibilityReport",
    "EnvelopeValidation",
    "ImportResult",
    "Theme",
    "ThemeExportEnvelope",
    "ThemeRegistry",
    "ThemeSummary",
    "ThemeValidationError",
    "audit_theme",
    "build_validated_theme",
    "copy_theme_to_clipboard",
    "create_theme_json",
    "export_theme_file",
    "import_theme_file",
    "import_theme_from_clipboard",
    "import_theme_text",
    "normalize_envelope",
    "sanitize_theme",
    "validate_envelope",
    "validate_theme",
]
