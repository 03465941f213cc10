"""Theme import and export at the file and clipboard boundary.

Every import runs the same pipeline: size and type checks before anything is
read or decoded, decoding into plain data, envelope validation, allow-list
projection and sanitization. The result is all-or-nothing: one sanitized
theme, or the complete list of problems.
"""

from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
from pathlib import Path
import re
from typing import Any, Literal, Protocol

from PySide6.QtGui import QGuiApplication
import yaml

from chromagate.errors import (
    ErrorCode,
    ThemeIOError,
    ThemeValidationError,
    classify_exception,
)
from chromagate.themes.constants import (
    DEFAULT_EXPORTED_BY,
    EXPORT_FORMAT_VERSION,
    JSON_CONTENT_TYPES,
    JSON_SUFFIXES,
    MAX_IMPORT_BYTES,
    MIN_IMPORT_BYTES,
    YAML_CONTENT_TYPES,
    YAML_SUFFIXES,
)
from chromagate.themes.models import ImportResult, Theme, ThemeExportEnvelope
from chromagate.themes.sanitizer import sanitize_theme
from chromagate.themes.schema import clean_exported_by, normalize_envelope, validate_envelope

logger = logging.getLogger(__name__)

DocumentKind = Literal["json", "yaml"]


class ClipboardLike(Protocol):
    """The part of QClipboard used here."""

    def text(self) -> str: ...

    def setText(self, text: str) -> None: ...  # noqa: N802


def document_kind(name: str, content_type: str | None = None) -> DocumentKind | None:
    """Work out whether a file holds JSON or YAML from its type or name."""
    if content_type:
        mime = content_type.split(";", 1)[0].strip().lower()
        if mime in JSON_CONTENT_TYPES:
            return "json"
        if mime in YAML_CONTENT_TYPES:
            return "yaml"
    lowered = name.lower()
    if lowered.endswith(JSON_SUFFIXES):
        return "json"
    if lowered.endswith(YAML_SUFFIXES):
        return "yaml"
    return None


def _size_errors(size: int, subject: str = "File") -> list[str]:
    if size > MAX_IMPORT_BYTES:
        return [f"{subject} is too large (max 1MB)"]
    if size < MIN_IMPORT_BYTES:
        return [f"{subject} is too small to be a valid theme"]
    return []


def check_theme_file(name: str, size: int, content_type: str | None = None) -> list[str]:
    """Pre-read checks for a theme file; empty when the file may be read."""
    errors: list[str] = []
    if document_kind(name, content_type) is None:
        errors.append("File must be a JSON or YAML file")
    errors.extend(_size_errors(size))
    return errors


def _failed(errors: list[str], source: str) -> ImportResult:
    logger.info("theme import from %s refused: %s", source, "; ".join(errors))
    return ImportResult(errors=errors, source=source)


def _decode(text: str, kind: DocumentKind) -> tuple[Any, str | None]:
    if kind == "yaml":
        try:
            return yaml.safe_load(text), None
        except yaml.YAMLError as exc:
            return None, f"Invalid YAML: {exc}"
        except RecursionError:
            return None, "Invalid YAML: document is nested too deeply"
    try:
        return json.loads(text), None
    except json.JSONDecodeError as exc:
        return None, f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
    except RecursionError:
        return None, "Invalid JSON: document is nested too deeply"


def import_theme_data(data: object, *, source: str = "data") -> ImportResult:
    """Gate already-decoded envelope data and sanitize the theme it carries."""
    validation = validate_envelope(data)
    if not validation.is_valid:
        return _failed(validation.errors, source)
    envelope = normalize_envelope(data)
    if envelope is None:
        return _failed(["theme: rejected by sanitization"], source)
    logger.info("imported theme %r from %s", envelope.theme.id, source)
    return ImportResult(theme=envelope.theme, warnings=validation.warnings, source=source)


def import_theme_text(
    text: object,
    *,
    source: str = "clipboard",
    kind: DocumentKind = "json",
) -> ImportResult:
    """Import an export envelope from text, e.g. clipboard content."""
    if not isinstance(text, str):
        return _failed(["Clipboard content is not text"], source)
    subject = "Clipboard content" if source == "clipboard" else "Theme text"
    size_errors = _size_errors(len(text.encode("utf-8")), subject)
    if size_errors:
        return _failed(size_errors, source)
    data, error = _decode(text, kind)
    if error:
        return _failed([error], source)
    return import_theme_data(data, source=source)


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        with path.open("rb") as handle:
            raw = handle.read(max_bytes + 1)
    except OSError as exc:
        raise classify_exception(exc, path) from exc
    if len(raw) > max_bytes:
        raise ThemeIOError(ErrorCode.FILE_TOO_LARGE, path=path)
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise classify_exception(exc, path) from exc


def import_theme_file(path: str | Path, content_type: str | None = None) -> ImportResult:
    """Import a theme export file.

    Type and size are checked from the file's name and metadata before any
    content is read.
    """
    path = Path(path)
    source = str(path)
    try:
        if not path.is_file():
            return _failed([f"Theme path is not a file: {path}"], source)
        size = path.stat().st_size
    except OSError as exc:
        return _failed([_io_message(classify_exception(exc, path))], source)

    errors = check_theme_file(path.name, size, content_type)
    if errors:
        return _failed(errors, source)

    try:
        text = _read_text_limited(path, max_bytes=MAX_IMPORT_BYTES)
    except ThemeIOError as exc:
        return _failed([_io_message(exc)], source)

    kind = document_kind(path.name, content_type) or "json"
    data, error = _decode(text, kind)
    if error:
        return _failed([error], source)
    return import_theme_data(data, source=source)


def _io_message(error: ThemeIOError) -> str:
    if error.path is not None:
        return f"Unable to read {error.path.name}: {error.message}"
    return error.message


def _system_clipboard() -> ClipboardLike:
    if QGuiApplication.instance() is None:
        raise ThemeIOError(
            ErrorCode.CLIPBOARD_UNAVAILABLE,
            details={"reason": "no running QGuiApplication"},
        )
    return QGuiApplication.clipboard()


def import_theme_from_clipboard(clipboard: ClipboardLike | None = None) -> ImportResult:
    """Read clipboard text once and import it; a failed read is reported, not retried."""
    try:
        board = clipboard if clipboard is not None else _system_clipboard()
        text = board.text()
    except ThemeIOError as exc:
        return _failed([exc.message], "clipboard")
    except (RuntimeError, OSError) as exc:
        error = ThemeIOError(ErrorCode.CLIPBOARD_UNAVAILABLE, details={"original": str(exc)})
        return _failed([error.message], "clipboard")
    return import_theme_text(text, source="clipboard")


def build_export_envelope(
    theme: Theme | dict[str, Any],
    *,
    exported_by: str | None = DEFAULT_EXPORTED_BY,
    now: datetime | None = None,
) -> ThemeExportEnvelope:
    """Wrap a sanitized copy of ``theme`` in a versioned envelope."""
    sanitized = sanitize_theme(theme)
    if sanitized is None:
        raise ThemeValidationError("Invalid theme provided for export")
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    exported_at = moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return ThemeExportEnvelope(
        version=EXPORT_FORMAT_VERSION,
        theme=sanitized,
        exported_at=exported_at,
        exported_by=clean_exported_by(exported_by),
    )


def create_theme_json(
    theme: Theme | dict[str, Any],
    *,
    exported_by: str | None = DEFAULT_EXPORTED_BY,
    now: datetime | None = None,
) -> str:
    envelope = build_export_envelope(theme, exported_by=exported_by, now=now)
    return json.dumps(envelope.to_dict(), indent=2, ensure_ascii=False)


def export_filename(theme: Theme) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", theme.name.lower()).strip("-") or "custom"
    return f"{slug}-theme.json"


def export_theme_file(
    theme: Theme | dict[str, Any],
    directory: str | Path,
    filename: str | None = None,
    *,
    exported_by: str | None = DEFAULT_EXPORTED_BY,
) -> Path:
    """Write an export envelope into ``directory`` and return the file path."""
    sanitized = sanitize_theme(theme)
    if sanitized is None:
        raise ThemeValidationError("Invalid theme provided for export")
    name = filename or export_filename(sanitized)
    if Path(name).name != name:
        raise ValueError(f"Export filename must not contain directories: {name!r}")

    target = Path(directory) / name
    content = create_theme_json(sanitized, exported_by=exported_by)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise classify_exception(exc, target) from exc
    logger.info("exported theme %r to %s", sanitized.id, target)
    return target


def copy_theme_to_clipboard(
    theme: Theme | dict[str, Any],
    clipboard: ClipboardLike | None = None,
    *,
    exported_by: str | None = DEFAULT_EXPORTED_BY,
) -> str:
    """Put the theme's export JSON on the clipboard and return the text."""
    content = create_theme_json(theme, exported_by=exported_by)
    board = clipboard if clipboard is not None else _system_clipboard()
    try:
        board.setText(content)
    except RuntimeError as exc:
        raise ThemeIOError(
            ErrorCode.CLIPBOARD_UNAVAILABLE,
            message="Failed to copy theme to clipboard",
            details={"original": str(exc)},
        ) from exc
    return content
