from chromagate.workers.base_worker import BaseWorker
from chromagate.workers.import_worker import ThemeImportWorker

__all__ = ["BaseWorker", "ThemeImportWorker"]
