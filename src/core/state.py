from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from PySide6.QtCore import QObject, Signal, Slot

from core.controller import Change, PlaybackController
from core.errors import PlayerError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warning/error


class AppState(QObject):
    notification = Signal(object)      # emits Notify
    playback_changed = Signal(object)  # emits core.controller.Change

    def __init__(self):
        super().__init__()
        self.controller: PlaybackController | None = None
        self.queued_notifications: list[Notify] = []
        self._unsubscribe: list[Callable[[], None]] = []

    def bind(self, controller: PlaybackController) -> None:
        self.unbind()
        self.controller = controller
        self._unsubscribe = [
            controller.subscribe(self.playback_changed.emit),
            controller.subscribe_errors(self._on_controller_error),
        ]

    def unbind(self) -> None:
        for unsubscribe in self._unsubscribe:
            unsubscribe()
        self._unsubscribe = []
        self.controller = None

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))

    def dispatch(self, intent: Callable, *args) -> bool:
        """
        Run a user intent against the controller. Player errors become error
        notifications instead of propagating into the Qt event loop.
        """
        try:
            intent(*args)
        except PlayerError as e:
            logger.info("Intent %s failed: %s", getattr(intent, "__name__", intent), e)
            self.notify(str(e), "error")
            return False
        return True

    def _on_controller_error(self, error: PlayerError) -> None:
        self.notify(str(error), "error")
