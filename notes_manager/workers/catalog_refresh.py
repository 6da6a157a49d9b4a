# notes_manager/workers/catalog_refresh.py

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from notes_manager.core.catalog import list_notes
from notes_manager.core.models import NoteSnapshot


class CatalogRefreshSignals(QObject):
    finished = Signal(int, object)   # req_id, tuple[Note, ...]
    failed = Signal(int, str)        # req_id, error


class CatalogRefreshWorker(QRunnable):
    """
    Scans the note directory off the UI thread.

    The snapshot is a tuple, so the receiving side can swap it in whole.
    """

    def __init__(self, *, req_id: int, notes_dir: Path):
        super().__init__()
        self.req_id = req_id
        self.notes_dir = Path(notes_dir)
        self.signals = CatalogRefreshSignals()

    def run(self) -> None:
        t0 = time.perf_counter()
        try:
            snapshot = list_notes(self.notes_dir)
        except Exception as exc:
            self.signals.failed.emit(self.req_id, str(exc))
            return
        logging.getLogger(__name__).debug(
            "Catalog refresh req=%d notes=%d time_ms=%.1f",
            self.req_id, len(snapshot), (time.perf_counter() - t0) * 1000.0,
        )
        self.signals.finished.emit(self.req_id, snapshot)


class CatalogController(QObject):
    """
    Runs CatalogRefreshWorker in a QThreadPool:
      - monotonic req_id, results of older requests are dropped
      - on_loaded gets the whole snapshot, on_failed the error text
    """

    def __init__(
        self,
        *,
        notes_dir: Path,
        on_loaded: Callable[[NoteSnapshot], None],
        on_failed: Callable[[str], None],
        parent: Optional[QObject] = None,
        pool: Optional[QThreadPool] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(parent)
        self._log = logger or logging.getLogger(__name__)
        self._pool = pool or QThreadPool.globalInstance()
        self.notes_dir = Path(notes_dir)
        self._on_loaded_cb = on_loaded
        self._on_failed_cb = on_failed

        self._req_id = 0

    @property
    def req_id(self) -> int:
        return self._req_id

    def request(self) -> int:
        self._req_id += 1
        worker = CatalogRefreshWorker(req_id=self._req_id, notes_dir=self.notes_dir)
        worker.signals.finished.connect(self._on_worker_finished)
        worker.signals.failed.connect(self._on_worker_failed)
        self._pool.start(worker)
        return self._req_id

    @Slot(int, object)
    def _on_worker_finished(self, req_id: int, snapshot: NoteSnapshot) -> None:
        if req_id != self._req_id:
            return
        try:
            self._on_loaded_cb(snapshot)
        except Exception:
            self._log.exception("Failed to apply catalog snapshot")

    @Slot(int, str)
    def _on_worker_failed(self, req_id: int, err: str) -> None:
        if req_id != self._req_id:
            return
        self._log.warning("Catalog refresh failed: %s", err)
        try:
            self._on_failed_cb(err)
        except Exception:
            self._log.exception("Failed to handle catalog failure")
