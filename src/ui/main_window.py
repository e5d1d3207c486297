from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QHBoxLayout, QFileDialog
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QShortcut, QKeySequence

from core.config import AppConfig
from core.controller import Change, PlaybackController
from core.models import format_duration
from library.probe import file_dialog_filter, is_audio_file
from ui.player_bar import PlayerBar
from ui.widgets.track_list_widget import TrackListWidget
from ui.widgets.toast import ToastManager


class MainWindow(QMainWindow):
    def __init__(self, app_state, controller: PlaybackController, config: AppConfig):
        super().__init__()
        self.setWindowTitle("Modern Music Player")
        self.resize(config.window_width, config.window_height)
        self.app_state = app_state
        self.controller = controller
        self.config = config

        # --- Shortcuts ---
        dispatch = self.app_state.dispatch
        QShortcut(QKeySequence("Space"), self, activated=lambda: dispatch(self.controller.toggle_play))
        QShortcut(QKeySequence("Return"), self, activated=self._play_selected)
        QShortcut(QKeySequence("Enter"), self, activated=self._play_selected)
        QShortcut(QKeySequence("Ctrl+Right"), self, activated=lambda: dispatch(self.controller.next))
        QShortcut(QKeySequence("Ctrl+Left"), self, activated=lambda: dispatch(self.controller.previous))

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)
        self.layout.setContentsMargins(20, 20, 20, 20)
        self.layout.setSpacing(20)

        self.toasts = ToastManager(self, timeout_ms=config.toast_timeout_ms)
        self.app_state.notification.connect(self.toasts.show_notify)

        # --- Track info ---
        self.lbl_track = QLabel("No track selected")
        self.lbl_track.setObjectName("TrackTitle")
        self.lbl_track.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.lbl_time = QLabel("00:00")
        self.lbl_total = QLabel("00:00")
        time_row = QHBoxLayout()
        time_row.addStretch(1)
        time_row.addWidget(self.lbl_time)
        time_row.addWidget(QLabel("/"))
        time_row.addWidget(self.lbl_total)
        time_row.addStretch(1)

        self.layout.addWidget(self.lbl_track)
        self.layout.addLayout(time_row)

        # --- Controls ---
        self.player_bar = PlayerBar(self.controller, self.app_state, self)
        self.layout.addWidget(self.player_bar)

        # --- Playlist ---
        lbl_playlist = QLabel("Playlist")
        lbl_playlist.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.track_list = TrackListWidget(self)
        self.track_list.playTrack.connect(lambda row: dispatch(self.controller.select_track, row))

        self.btn_add = QPushButton("Add Songs")
        self.btn_add.setObjectName("AddButton")
        self.btn_add.clicked.connect(self.add_songs)

        self.layout.addWidget(lbl_playlist)
        self.layout.addWidget(self.track_list, 1)
        self.layout.addWidget(self.btn_add, 0, Qt.AlignmentFlag.AlignHCenter)

        # --- Controller observation ---
        self.app_state.playback_changed.connect(self.render)

        self.render(None)
        self.show_queued_notifications()

        self.setStyleSheet("""
            QMainWindow, QWidget {
                background-color: #1a1a1a;
                color: #e5e7eb;
            }
            QLabel {
                color: #9ca3af;
                font-size: 12px;
            }
            QLabel#TrackTitle {
                color: #e5e7eb;
                font-size: 18px;
                font-weight: bold;
            }
            QPushButton#AddButton {
                background: #2a2a2a;
                border: 1px solid #333333;
                border-radius: 10px;
                padding: 6px 18px;
                color: #e5e7eb;
            }
            QPushButton#AddButton:hover {
                border-color: #38bdf8;
            }
            """)

    # ------------------ rendering ------------------
    def render(self, change):
        state = self.controller.state

        if change in (None, Change.PLAYLIST):
            self.track_list.refresh(self.controller.playlist.tracks())

        loaded = self.controller.loaded_track
        self.lbl_track.setText(loaded.display_name if loaded else "No track selected")
        self.lbl_time.setText(format_duration(state.position_s))
        self.lbl_total.setText(format_duration(state.duration_s))

        if change in (None, Change.PLAYLIST, Change.TRACK):
            row = state.current_index if loaded is not None else None
            self.track_list.set_now_playing(row)

        self.player_bar.render(state)

    # ------------------ actions ------------------
    def add_songs(self):
        paths, _ = QFileDialog.getOpenFileNames(
            self,
            "Add Songs",
            "",
            file_dialog_filter(self.config.audio_extensions),
        )
        paths = [p for p in paths if is_audio_file(p, self.config.audio_extensions)]
        if not paths:
            return
        self.app_state.dispatch(self.controller.add_tracks, paths)

    def _play_selected(self):
        row = self.track_list.selected_row()
        if row is not None:
            self.app_state.dispatch(self.controller.select_track, row)

    # ------------------ notifications ------------------
    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self.toasts.show_notify(n)
        self.app_state.queued_notifications.clear()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if getattr(self, "toasts", None) is not None:
            self.toasts.relayout()
