from __future__ import annotations

from PySide6.QtCore import Qt, QTimer, QPoint, QPropertyAnimation, QEasingCurve
from PySide6.QtWidgets import QWidget, QFrame, QLabel, QHBoxLayout, QGraphicsOpacityEffect

from core.state import Notify

# (background, border)
_COLORS = {
    "success": ("#052e1a", "#16a34a"),
    "warning": ("#2a1a05", "#f59e0b"),
    "error": ("#2a0a0a", "#ef4444"),
    "info": ("#0b1222", "#38bdf8"),
}


class ToastWidget(QFrame):
    def __init__(self, notify: Notify, parent: QWidget):
        super().__init__(parent)
        kind = (notify.notify_type or "info").lower()
        if kind == "warn":
            kind = "warning"
        bg, border = _COLORS.get(kind, _COLORS["info"])

        self.setObjectName("Toast")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"""
        QFrame#Toast {{
            background: {bg};
            border: 1px solid {border};
            border-radius: 12px;
        }}
        QLabel {{
            color: #e5e7eb;
            font-size: 12px;
        }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        self.label = QLabel(notify.message)
        self.label.setWordWrap(True)
        layout.addWidget(self.label)

        self._opacity = QGraphicsOpacityEffect(self)
        self._opacity.setOpacity(1.0)
        self.setGraphicsEffect(self._opacity)
        self._anim: QPropertyAnimation | None = None

    def fade_out(self, on_done):
        self._anim = QPropertyAnimation(self._opacity, b"opacity", self)
        self._anim.setDuration(180)
        self._anim.setStartValue(self._opacity.opacity())
        self._anim.setEndValue(0.0)
        self._anim.setEasingCurve(QEasingCurve.Type.InCubic)
        self._anim.finished.connect(on_done)
        self._anim.start()


class ToastManager(QWidget):
    """Overlay that stacks toasts in the bottom-right corner of its host."""

    def __init__(self, host: QWidget, timeout_ms: int = 3000, max_visible: int = 4):
        super().__init__(host)
        self.host = host
        self.timeout_ms = timeout_ms
        self.max_visible = max_visible
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground, True)

        self._toasts: list[ToastWidget] = []
        self._margin = 16
        self._spacing = 8
        self.show()

    def show_notify(self, notify: Notify):
        if not notify.message:
            return
        toast = ToastWidget(notify, parent=self)
        toast.setFixedWidth(min(420, max(260, self.host.width() // 2)))
        self._toasts.insert(0, toast)

        while len(self._toasts) > self.max_visible:
            old = self._toasts.pop()
            old.hide()
            old.deleteLater()

        toast.show()
        self.relayout()
        QTimer.singleShot(max(500, int(self.timeout_ms)), lambda: self._dismiss(toast))

    def _dismiss(self, toast: ToastWidget):
        if toast not in self._toasts:
            return

        def remove():
            if toast in self._toasts:
                self._toasts.remove(toast)
            toast.hide()
            toast.deleteLater()
            self.relayout()

        toast.fade_out(remove)

    def relayout(self):
        self.setGeometry(self.host.rect())
        self.raise_()

        y = self.height() - self._margin
        for t in self._toasts:
            t.adjustSize()
            h = t.sizeHint().height()
            y -= h
            t.move(QPoint(self.width() - t.width() - self._margin, y))
            y -= self._spacing
