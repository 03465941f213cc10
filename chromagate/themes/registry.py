"""Theme discovery and registry."""

from __future__ import annotations

import dataclasses
from importlib import resources
import logging
from pathlib import Path
from typing import Iterable

from chromagate.themes.constants import JSON_SUFFIXES, YAML_SUFFIXES
from chromagate.themes.models import Theme, ThemeEntry, ThemeMode, ThemeSummary
from chromagate.themes.transfer import import_theme_file

logger = logging.getLogger(__name__)

_MAX_THEME_FILE_CANDIDATES = 512
_THEME_SUFFIXES = JSON_SUFFIXES + YAML_SUFFIXES


def preset_themes_root() -> Path:
    """Directory of the preset theme files shipped as package data."""
    return Path(str(resources.files("chromagate.themes") / "presets"))


class ThemeRegistry:
    """Loads preset themes and user theme files.

    Every file goes through the same import pipeline as a user-chosen file,
    so built-in presets get no shortcut past validation.
    """

    def __init__(self, builtin_root: Path, user_root: Path | None = None) -> None:
        self._builtin_root = builtin_root
        self._user_root = user_root
        self._themes: dict[str, ThemeEntry] = {}
        self._load_errors: list[str] = []

    @property
    def builtin_root(self) -> Path:
        return self._builtin_root

    @property
    def user_root(self) -> Path | None:
        return self._user_root

    def set_user_root(self, path: Path | None) -> None:
        self._user_root = path

    def reload(self) -> None:
        self._themes = {}
        self._load_errors = []
        self._load_from_root(self._builtin_root, is_builtin=True, can_override=False)
        if self._user_root is not None:
            self._load_from_root(self._user_root, is_builtin=False, can_override=True)

    def list_themes(self) -> list[ThemeSummary]:
        rows = [
            ThemeSummary(
                theme_id=entry.theme.id,
                name=entry.theme.name,
                mode=entry.theme.mode,
                description=entry.theme.description or "",
                author=entry.theme.author or "",
                tags=entry.theme.tags or (),
                is_builtin=entry.is_builtin,
                source_path=entry.source_path,
            )
            for entry in self._themes.values()
        ]
        return sorted(rows, key=lambda row: (0 if row.is_builtin else 1, row.name.lower()))

    def get_theme(self, theme_id: str) -> Theme | None:
        entry = self._themes.get(theme_id)
        return entry.theme if entry is not None else None

    def get_entry(self, theme_id: str) -> ThemeEntry | None:
        return self._themes.get(theme_id)

    def themes(self) -> list[Theme]:
        return [entry.theme for entry in self._themes.values()]

    def themes_by_mode(self, mode: ThemeMode) -> list[Theme]:
        return [theme for theme in self.themes() if theme.mode == mode]

    def themes_by_tags(self, tags: Iterable[str]) -> list[Theme]:
        wanted = set(tags)
        return [theme for theme in self.themes() if wanted.intersection(theme.tags or ())]

    def search(self, query: str) -> list[Theme]:
        """Case-insensitive match on name, description or any tag."""
        needle = query.strip().lower()
        results: list[Theme] = []
        for theme in self.themes():
            haystack = [theme.name, theme.description or "", *(theme.tags or ())]
            if any(needle in text.lower() for text in haystack):
                results.append(theme)
        return results

    def load_errors(self) -> list[str]:
        return list(self._load_errors)

    def _load_from_root(self, root: Path, *, is_builtin: bool, can_override: bool) -> None:
        if not root.exists():
            return
        try:
            all_files = sorted(
                path
                for path in root.iterdir()
                if path.suffix.lower() in _THEME_SUFFIXES and not path.is_dir()
            )
        except OSError as exc:
            self._load_errors.append(f"Failed to list themes in {root}: {exc}")
            return

        candidates: list[Path] = []
        for path in all_files:
            if path.is_symlink():
                self._load_errors.append(f"Skipping symlink theme file: {path}")
                continue
            candidates.append(path)
        if len(candidates) > _MAX_THEME_FILE_CANDIDATES:
            self._load_errors.append(
                f"Theme file limit exceeded in {root}; "
                f"only first {_MAX_THEME_FILE_CANDIDATES} files were scanned."
            )
            candidates = candidates[:_MAX_THEME_FILE_CANDIDATES]

        for theme_path in candidates:
            result = import_theme_file(theme_path)
            if result.theme is None:
                self._load_errors.append(f"{theme_path}: {'; '.join(result.errors)}")
                continue

            theme = result.theme
            if theme.is_built_in != is_builtin:
                # Only files under the built-in root may claim to be built in.
                theme = dataclasses.replace(theme, is_built_in=is_builtin)

            existing = self._themes.get(theme.id)
            if existing is not None and (not can_override or not existing.is_builtin):
                kind = "builtin" if is_builtin else "user"
                self._load_errors.append(
                    f"Duplicate {kind} theme id {theme.id!r} at {theme_path}; skipping."
                )
                continue
            if existing is not None and can_override:
                self._load_errors.append(f"User theme {theme.id!r} overrides built-in theme.")
            self._themes[theme.id] = ThemeEntry(
                theme=theme,
                source_path=theme_path,
                is_builtin=is_builtin,
            )
        logger.debug("loaded %d theme(s) from %s", len(self._themes), root)
