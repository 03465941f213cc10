"""Per-item background worker with progress, cancel and error signals."""

from __future__ import annotations

import logging
from threading import Event
from typing import Any, Iterable

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class BaseWorker(QObject):
    """Runs ``process_item`` over a fixed list of items on a worker thread.

    ``finished`` carries ``[(item, result), ...]`` in input order. Cancel is
    checked before each item; a cancelled run emits ``cancelled`` and no
    ``finished``. Any exception ends the run with ``error``.

    Usage:
        worker = ThemeImportWorker(paths)
        thread = QThread()
        worker.moveToThread(thread)
        thread.started.connect(worker.run)
        worker.finished.connect(thread.quit)
        worker.finished.connect(worker.deleteLater)
        thread.finished.connect(thread.deleteLater)
        thread.start()
    """

    started = Signal()
    progress = Signal(int, int, str)    # current, total, item label
    finished = Signal(object)           # list of (item, result)
    error = Signal(str)
    cancelled = Signal()

    def __init__(self, items: Iterable[Any] = (), parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._items = list(items)
        self._cancel_event = Event()

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def _is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def process_item(self, item: Any) -> Any:
        raise NotImplementedError(f"{type(self).__name__} does not implement process_item")

    def describe_item(self, item: Any) -> str:
        return str(item)

    def run(self) -> None:
        self.started.emit()
        try:
            results: list[tuple[Any, Any]] = []
            total = len(self._items)
            for index, item in enumerate(self._items, start=1):
                if self._is_cancelled:
                    logger.info(
                        "%s cancelled after %d of %d", type(self).__name__, index - 1, total
                    )
                    self.cancelled.emit()
                    return
                results.append((item, self.process_item(item)))
                self.progress.emit(index, total, self.describe_item(item))
            self.finished.emit(results)
        except Exception as exc:
            logger.warning("%s failed: %s", type(self).__name__, exc)
            self.error.emit(str(exc))
