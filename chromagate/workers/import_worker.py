"""Worker for importing theme files off the GUI thread."""

from __future__ import annotations

from pathlib import Path

from chromagate.themes.models import ImportResult
from chromagate.themes.transfer import import_theme_file
from chromagate.workers.base_worker import BaseWorker


class ThemeImportWorker(BaseWorker):
    """Imports theme files; ``finished`` carries ``[(path, ImportResult), ...]``.

    Each file is read once; a failed read ends up in that file's errors.
    """

    def __init__(self, paths: list[str | Path]) -> None:
        super().__init__(Path(p) for p in paths)

    def process_item(self, item: Path) -> ImportResult:
        return import_theme_file(item)

    def describe_item(self, item: Path) -> str:
        return item.name
