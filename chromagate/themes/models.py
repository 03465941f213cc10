"""Theme engine models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Literal, Mapping

from chromagate.colors.contrast import ContrastResult

ThemeMode = Literal["light", "dark"]


@dataclass(frozen=True, slots=True)
class Theme:
    """A validated, sanitized theme.

    Instances are only produced by the sanitizer and are never modified
    afterwards; an edited theme is a new candidate that goes through
    sanitization again. ``colors`` is a read-only view over a private copy.
    """

    id: str
    name: str
    mode: ThemeMode
    colors: Mapping[str, str]
    description: str | None = None
    author: str | None = None
    version: str | None = None
    tags: tuple[str, ...] | None = None
    is_built_in: bool | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    def __hash__(self) -> int:
        colors = tuple(sorted(self.colors.items()))
        return hash((self.id, self.name, self.mode, colors, self.tags))

    @classmethod
    def from_sanitized(cls, data: Mapping[str, Any]) -> Theme:
        tags = data.get("tags")
        return cls(
            id=data["id"],
            name=data["name"],
            mode=data["mode"],
            colors=data["colors"],
            description=data.get("description"),
            author=data.get("author"),
            version=data.get("version"),
            tags=tuple(tags) if tags is not None else None,
            is_built_in=data.get("isBuiltIn"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the external (camelCase) form, omitting unset optional fields."""
        data: dict[str, Any] = {"id": self.id, "name": self.name}
        optional = (
            ("description", self.description),
            ("author", self.author),
            ("version", self.version),
            ("tags", list(self.tags) if self.tags is not None else None),
            ("isBuiltIn", self.is_built_in),
            ("createdAt", self.created_at),
            ("updatedAt", self.updated_at),
        )
        for key, value in optional:
            if value is not None:
                data[key] = value
        data["mode"] = self.mode
        data["colors"] = dict(self.colors)
        return data


@dataclass(frozen=True, slots=True)
class ThemeExportEnvelope:
    """Versioned wrapper around an exported theme."""

    version: str
    theme: Theme
    exported_at: str
    exported_by: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "version": self.version,
            "theme": self.theme.to_dict(),
            "exportedAt": self.exported_at,
        }
        if self.exported_by is not None:
            data["exportedBy"] = self.exported_by
        return data


@dataclass(frozen=True, slots=True)
class EnvelopeValidation:
    """Outcome of checking an export envelope."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Either one sanitized theme or the full list of reasons it was refused."""

    theme: Theme | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    source: str = ""

    def __post_init__(self) -> None:
        if (self.theme is None) == (not self.errors):
            raise ValueError("ImportResult needs exactly one of theme or errors")

    @property
    def ok(self) -> bool:
        return self.theme is not None


@dataclass(frozen=True, slots=True)
class AccessibilityIssue:
    """A foreground/background role pair below WCAG AA."""

    pair: tuple[str, str]
    contrast: ContrastResult


@dataclass(frozen=True, slots=True)
class AccessibilityReport:
    is_accessible: bool
    issues: list[AccessibilityIssue] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ThemeEntry:
    """A registry theme together with where it was loaded from."""

    theme: Theme
    source_path: Path
    is_builtin: bool


@dataclass(frozen=True, slots=True)
class ThemeSummary:
    """Display-ready theme metadata."""

    theme_id: str
    name: str
    mode: ThemeMode
    description: str
    author: str
    tags: tuple[str, ...]
    is_builtin: bool
    source_path: Path
