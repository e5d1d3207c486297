# ui/player_bar.py
from __future__ import annotations

from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QIcon, QPixmap, QPainter
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QToolButton, QSlider
from PySide6.QtCore import QByteArray
from PySide6.QtSvg import QSvgRenderer

from core.models import PlaybackState, format_duration

SLIDER_MAX = 1000

def _svg_icon(path_d: str, size: int = 20, color: str = "#e5e7eb") -> QIcon:
    svg = f"""
    <svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24">
      <path d="{path_d}" fill="{color}"/>
    </svg>
    """.strip()

    renderer = QSvgRenderer(QByteArray(svg.encode("utf-8")))
    pm = QPixmap(size, size)
    pm.fill(Qt.transparent)

    p = QPainter(pm)
    renderer.render(p)
    p.end()

    return QIcon(pm)


# Simple, clean icons (Material-ish)
SVG_PREV = "M6 18V6h2v12H6zm3.5-6L18 6v12l-8.5-6z"
SVG_NEXT = "M16 6v12h2V6h-2zM6 18l8.5-6L6 6v12z"
SVG_PLAY = "M8 5v14l11-7L8 5z"
SVG_PAUSE = "M6 5h4v14H6V5zm8 0h4v14h-4V5z"
SVG_STOP = "M6 6h12v12H6z"
SVG_SHUFFLE = (
    "M10.59 9.17L5.41 4 4 5.41l5.17 5.17 1.42-1.41zM14.5 4l2.04 2.04L4 18.59 5.41 20 "
    "17.96 7.46 20 9.5V4h-5.5zm.33 9.41l-1.41 1.41 3.13 3.13L14.5 20H20v-5.5l-2.04 2.04-3.13-3.13z"
)
SVG_REPEAT = "M7 7h10v3l4-4-4-4v3H5v6h2V7zm10 10H7v-3l-4 4 4 4v-3h12v-6h-2v4z"
SVG_VOLUME = "M3 9v6h4l5 5V4L7 9H3zm13.5 3c0-1.77-1.02-3.29-2.5-4.03v8.05c1.48-.73 2.5-2.25 2.5-4.02z"

IDLE = "#e5e7eb"
ACTIVE = "#38bdf8"

class PlayerBar(QWidget):
    """
    Transport controls. Buttons and sliders forward intents through
    app_state.dispatch; `render` is the only place widgets are updated.
    """

    def __init__(self, controller, app_state, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.app_state = app_state

        self._is_playing = False

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 6, 8, 6)
        root.setSpacing(8)

        # --- slider ---
        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setRange(0, SLIDER_MAX)
        self.slider.setSingleStep(10)
        self.slider.setPageStep(50)
        self.slider.setEnabled(False)
        root.addWidget(self.slider)

        # --- buttons ---
        self.btn_shuffle = self._tool_button(SVG_SHUFFLE, 20, "Shuffle", checkable=True)
        self.btn_prev = self._tool_button(SVG_PREV, 20, "Previous")
        self.btn_play = self._tool_button(SVG_PLAY, 22, "Play")
        self.btn_play.setObjectName("BtnPlay")
        self.btn_stop = self._tool_button(SVG_STOP, 20, "Stop")
        self.btn_next = self._tool_button(SVG_NEXT, 20, "Next")
        self.btn_repeat = self._tool_button(SVG_REPEAT, 20, "Repeat", checkable=True)

        # --- volume ---
        self.lbl_volume = QLabel()
        self.lbl_volume.setPixmap(_svg_icon(SVG_VOLUME, 18).pixmap(18, 18))
        self.vol_slider = QSlider(Qt.Orientation.Horizontal)
        self.vol_slider.setRange(0, 100)
        self.vol_slider.setFixedWidth(100)
        self.vol_slider.setToolTip("Volume")

        controls = QHBoxLayout()
        controls.setSpacing(20)
        controls.addStretch(1)
        for btn in (self.btn_shuffle, self.btn_prev, self.btn_play, self.btn_stop, self.btn_next, self.btn_repeat):
            controls.addWidget(btn)
        controls.addStretch(1)
        controls.addWidget(self.lbl_volume)
        controls.addWidget(self.vol_slider)
        root.addLayout(controls)

        # --- signals ---
        self.slider.sliderPressed.connect(self._on_slider_pressed)
        self.slider.sliderReleased.connect(self._on_slider_released)
        self.slider.sliderMoved.connect(self._on_slider_moved)

        dispatch = self.app_state.dispatch
        self.btn_play.clicked.connect(lambda: dispatch(self.controller.toggle_play))
        self.btn_stop.clicked.connect(lambda: dispatch(self.controller.stop))
        self.btn_prev.clicked.connect(lambda: dispatch(self.controller.previous))
        self.btn_next.clicked.connect(lambda: dispatch(self.controller.next))
        self.btn_shuffle.clicked.connect(lambda: dispatch(self.controller.toggle_shuffle))
        self.btn_repeat.clicked.connect(lambda: dispatch(self.controller.toggle_repeat))
        self.vol_slider.valueChanged.connect(
            lambda v: dispatch(self.controller.set_volume, v / 100.0)
        )

        self.setObjectName("PlayerBar")
        self._apply_styles()

    def _tool_button(self, path_d: str, size: int, tip: str, checkable: bool = False) -> QToolButton:
        btn = QToolButton()
        btn.setIcon(_svg_icon(path_d, size))
        btn.setIconSize(QSize(size, size))
        btn.setToolTip(tip)
        btn.setCheckable(checkable)
        return btn

    # --- slider handling ---
    def _on_slider_pressed(self):
        self.controller.begin_seek()

    def _on_slider_moved(self, value: int):
        # preview time while dragging
        self.controller.preview_seek(value / SLIDER_MAX)

    def _on_slider_released(self):
        self.app_state.dispatch(self.controller.end_seek, self.slider.value() / SLIDER_MAX)

    # --- rendering ---
    def render(self, state: PlaybackState):
        self.slider.setEnabled(state.progress_enabled)
        if not state.seek_in_progress:
            self.slider.blockSignals(True)
            self.slider.setValue(int(round(state.progress_fraction * SLIDER_MAX)))
            self.slider.blockSignals(False)

        self._set_playing(state.is_playing)

        for btn, on, path_d in (
            (self.btn_shuffle, state.shuffle_enabled, SVG_SHUFFLE),
            (self.btn_repeat, state.repeat_enabled, SVG_REPEAT),
        ):
            btn.blockSignals(True)
            btn.setChecked(on)
            btn.blockSignals(False)
            btn.setIcon(_svg_icon(path_d, 20, ACTIVE if on else IDLE))

        volume = int(round(state.volume * 100))
        if self.vol_slider.value() != volume:
            self.vol_slider.blockSignals(True)
            self.vol_slider.setValue(volume)
            self.vol_slider.blockSignals(False)

    def _set_playing(self, playing: bool):
        if self._is_playing == bool(playing):
            return
        self._is_playing = bool(playing)
        if self._is_playing:
            self.btn_play.setIcon(_svg_icon(SVG_PAUSE, 22))
            self.btn_play.setToolTip("Pause")
        else:
            self.btn_play.setIcon(_svg_icon(SVG_PLAY, 22))
            self.btn_play.setToolTip("Play")

    def _apply_styles(self):
        self.setStyleSheet("""
        QWidget#PlayerBar {
            background-color: #1a1a1a;
        }

        QToolButton {
            border: 1px solid transparent;
            background: transparent;
            padding: 6px;
            border-radius: 10px;
            color: #e5e7eb;
        }
        QToolButton:hover {
            background: #2a2a2a;
            border-color: #333333;
        }
        QToolButton:checked {
            border-color: #38bdf8;
        }

        /* Round play button */
        QToolButton#BtnPlay {
            background: #2a2a2a;
            border: 1px solid #333333;
            border-radius: 999px;
            padding: 8px;
        }
        QToolButton#BtnPlay:hover {
            border-color: #38bdf8;
        }

        QSlider::groove:horizontal {
            height: 4px;
            background: #333333;
            border-radius: 2px;
        }
        QSlider::handle:horizontal {
            width: 12px;
            height: 12px;
            margin: -4px 0;
            border-radius: 6px;
            background: #38bdf8;
        }
        QSlider::sub-page:horizontal {
            background: #38bdf8;
            border-radius: 2px;
        }
        QSlider::handle:horizontal:disabled {
            background: #555555;
        }
        """)
