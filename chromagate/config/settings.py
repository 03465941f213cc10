"""Application settings via QSettings."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from chromagate.themes.constants import DEFAULT_EXPORTED_BY


class AppSettings:
    """Wraps QSettings for persistent theme engine configuration."""

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("Chromagate", "Chromagate")

    # -- directories --

    @property
    def user_themes_dir(self) -> Path:
        raw = self._qs.value("dirs/user_themes", "", type=str)
        value = (raw or "").strip()
        if value:
            return Path(value)
        return self.app_data_dir / "themes"

    @user_themes_dir.setter
    def user_themes_dir(self, value: Path | str) -> None:
        self._qs.setValue("dirs/user_themes", str(value).strip())

    @property
    def export_dir(self) -> Path:
        raw = self._qs.value("dirs/export", "", type=str)
        value = (raw or "").strip()
        return Path(value) if value else Path.home()

    @export_dir.setter
    def export_dir(self, value: Path | str) -> None:
        self._qs.setValue("dirs/export", str(value).strip())

    # -- export --

    @property
    def exported_by(self) -> str:
        raw = self._qs.value("export/exported_by", DEFAULT_EXPORTED_BY, type=str)
        value = (raw or "").strip()
        return value or DEFAULT_EXPORTED_BY

    @exported_by.setter
    def exported_by(self, value: str) -> None:
        cleaned = (value or "").strip() or DEFAULT_EXPORTED_BY
        self._qs.setValue("export/exported_by", cleaned)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        raw = self._qs.value("dirs/app_data", "", type=str)
        value = (raw or "").strip()
        return Path(value) if value else self._default_app_data_dir()

    @app_data_dir.setter
    def app_data_dir(self, value: Path | str) -> None:
        self._qs.setValue("dirs/app_data", str(value).strip())

    @property
    def log_dir(self) -> Path:
        return self.app_data_dir / "logs"

    def sync(self) -> None:
        self._qs.sync()

    @staticmethod
    def _default_app_data_dir() -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "chromagate"
