# src/player/player.py
from __future__ import annotations

import logging
import os
from typing import Optional

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QAudioOutput, QMediaPlayer

from core.engine import EngineListener
from core.errors import LoadError, PlaybackError

logger = logging.getLogger(__name__)


class QtMediaResource(QObject):
    """
    One QMediaPlayer + QAudioOutput pair bound to a single file.
    Qt reports milliseconds; everything exposed here is seconds.
    """

    def __init__(self, location: str, listener: EngineListener):
        super().__init__()
        self.location = location
        self._listener = listener
        self._disposed = False

        self.audio = QAudioOutput()
        self.media = QMediaPlayer()
        self.media.setAudioOutput(self.audio)

        self.media.positionChanged.connect(self._on_position)
        self.media.durationChanged.connect(self._on_duration)
        self.media.mediaStatusChanged.connect(self._on_media_status)
        self.media.errorOccurred.connect(self._on_error)

        self.media.setSource(QUrl.fromLocalFile(location))

    # ----------------------------
    # Qt handlers
    # ----------------------------

    def _on_position(self, ms: int) -> None:
        if self._disposed:
            return
        self._listener.on_position_changed(self, max(0, int(ms)) / 1000.0)

    def _on_duration(self, ms: int) -> None:
        if self._disposed or int(ms) <= 0:
            return
        self._listener.on_ready(self)

    def _on_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        if self._disposed:
            return
        if status == QMediaPlayer.MediaStatus.LoadedMedia:
            self._listener.on_ready(self)
        elif status == QMediaPlayer.MediaStatus.EndOfMedia:
            self._listener.on_end_of_media(self)

    def _on_error(self, error: QMediaPlayer.Error, message: str) -> None:
        if self._disposed or error == QMediaPlayer.Error.NoError:
            return
        logger.warning("Playback error for %s: %s", self.location, message)
        self._listener.on_error(self, message or str(error))

    # ----------------------------
    # MediaResource
    # ----------------------------

    def play(self) -> None:
        if self.media.error() != QMediaPlayer.Error.NoError:
            raise PlaybackError(f"Cannot play {self.location}: {self.media.errorString()}")
        self.media.play()

    def pause(self) -> None:
        self.media.pause()

    def stop(self) -> None:
        self.media.stop()

    def seek(self, position_s: float) -> None:
        self.media.setPosition(max(0, int(round(position_s * 1000.0))))

    def set_volume(self, fraction: float) -> None:
        self.audio.setVolume(min(1.0, max(0.0, float(fraction))))

    def position(self) -> float:
        return int(self.media.position()) / 1000.0

    def duration(self) -> Optional[float]:
        ms = int(self.media.duration())
        return ms / 1000.0 if ms > 0 else None

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self.media.stop()
        self.media.positionChanged.disconnect(self._on_position)
        self.media.durationChanged.disconnect(self._on_duration)
        self.media.mediaStatusChanged.disconnect(self._on_media_status)
        self.media.errorOccurred.disconnect(self._on_error)
        self.media.setSource(QUrl())
        self.media.deleteLater()
        self.audio.deleteLater()
        self.deleteLater()


class QtPlaybackEngine:
    def load(self, location: str, listener: EngineListener) -> QtMediaResource:
        if not os.path.isfile(location):
            raise LoadError(location, "file not found")

        resource = QtMediaResource(location, listener)
        if resource.media.error() != QMediaPlayer.Error.NoError:
            reason = resource.media.errorString()
            resource.dispose()
            raise LoadError(location, reason)
        return resource

    def backend_name(self) -> str:
        return "qt-multimedia"
