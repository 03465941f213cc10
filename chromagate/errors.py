"""Error codes and error handling utilities for Chromagate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for theme engine operations."""

    # Format errors
    COLOR_FORMAT_INVALID = auto()
    DATE_FORMAT_INVALID = auto()
    DOCUMENT_FORMAT_INVALID = auto()

    # Structural errors
    FIELD_MISSING = auto()
    FIELD_WRONG_TYPE = auto()
    VERSION_UNSUPPORTED = auto()
    THEME_INVALID = auto()

    # Security rejections
    SANITIZATION_REJECTED = auto()

    # I/O errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    FILE_TYPE_UNSUPPORTED = auto()
    FILE_TOO_SMALL = auto()
    FILE_TOO_LARGE = auto()
    FILE_UNREADABLE = auto()
    CLIPBOARD_UNAVAILABLE = auto()
    IO_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.COLOR_FORMAT_INVALID: "The color value is not in a supported format.",
    ErrorCode.DATE_FORMAT_INVALID: "The date is not a valid ISO-8601 timestamp.",
    ErrorCode.DOCUMENT_FORMAT_INVALID: "The theme document could not be parsed.",

    ErrorCode.FIELD_MISSING: "A required field is missing.",
    ErrorCode.FIELD_WRONG_TYPE: "A field has the wrong type.",
    ErrorCode.VERSION_UNSUPPORTED: "This theme was exported by an unsupported format version.",
    ErrorCode.THEME_INVALID: "The theme is not valid.",

    ErrorCode.SANITIZATION_REJECTED: "The theme contains content that cannot be used safely.",

    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check file permissions.",
    ErrorCode.FILE_TYPE_UNSUPPORTED: "Theme files must be JSON or YAML documents.",
    ErrorCode.FILE_TOO_SMALL: "The file is too small to be a valid theme.",
    ErrorCode.FILE_TOO_LARGE: "The file is too large (max 1MB).",
    ErrorCode.FILE_UNREADABLE: "The file could not be read as UTF-8 text.",
    ErrorCode.CLIPBOARD_UNAVAILABLE: "The clipboard could not be read.",
    ErrorCode.IO_FAILED: "Reading theme data failed. See details for more information.",
}


@dataclass
class ThemeEngineError(Exception):
    """Base exception for Chromagate with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or UI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class ThemeIOError(ThemeEngineError):
    """Raised when reading theme content from a file or the clipboard fails."""


class ColorFormatError(ValueError):
    """Raised when a color string does not match any accepted grammar."""


class ThemeValidationError(ValueError):
    """Raised when a theme fails validation where a valid theme is required."""


def classify_exception(exc: Exception, path: Path | None = None) -> ThemeIOError:
    """Classify a read failure into a ThemeIOError with an appropriate code."""
    if isinstance(exc, ThemeIOError):
        return exc
    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, FileNotFoundError) or "no such file" in exc_str:
        return ThemeIOError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError) or "permission denied" in exc_str:
        return ThemeIOError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if isinstance(exc, UnicodeDecodeError):
        return ThemeIOError(ErrorCode.FILE_UNREADABLE, path=path, details={"original": exc_str})
    if "clipboard" in exc_str:
        return ThemeIOError(ErrorCode.CLIPBOARD_UNAVAILABLE, details={"original": exc_str})

    return ThemeIOError(
        ErrorCode.IO_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: ThemeEngineError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, ThemeEngineError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        if error.path:
            parts.append(f"\n\nFile: {error.path.name}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
