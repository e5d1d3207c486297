# ui/workers/duration_probe_worker.py
from __future__ import annotations

import logging
from typing import Sequence

from PySide6.QtCore import QObject, QThread, Signal, Slot

from core.engine import ProbeCallback
from core.models import Track
from library.probe import probe_duration

logger = logging.getLogger(__name__)


class DurationProbeWorker(QThread):
    probed = Signal(object, object)   # Track, seconds | None

    def __init__(self, tracks: Sequence[Track], parent=None):
        super().__init__(parent)
        self.tracks = list(tracks)

    def run(self):
        for track in self.tracks:
            if self.isInterruptionRequested():
                return
            # probe_duration never raises for unreadable files
            self.probed.emit(track, probe_duration(track.location))


class ThreadedDurationProber(QObject):
    """
    DurationProber backed by one QThread per batch of added tracks.
    Results are delivered through a queued connection, so the callback runs on
    the GUI thread like every other controller event.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._workers: list[DurationProbeWorker] = []
        self._pending: dict[Track, ProbeCallback] = {}

    def probe(self, tracks: Sequence[Track], on_probed: ProbeCallback) -> None:
        if not tracks:
            return
        for track in tracks:
            self._pending[track] = on_probed

        worker = DurationProbeWorker(tracks, self)
        worker.probed.connect(self._on_probed)
        worker.finished.connect(self._on_worker_finished)
        self._workers.append(worker)
        worker.start()
        logger.debug("Probing %d track(s)", len(tracks))

    @Slot(object, object)
    def _on_probed(self, track: Track, seconds) -> None:
        callback = self._pending.pop(track, None)
        if callback is not None:
            callback(track, seconds)

    @Slot()
    def _on_worker_finished(self) -> None:
        worker = self.sender()
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def shutdown(self, timeout_ms: int = 2000) -> None:
        for worker in list(self._workers):
            worker.requestInterruption()
            worker.wait(timeout_ms)
        self._workers.clear()
        self._pending.clear()
