# ui/track_table_model.py
from __future__ import annotations
from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QFont

from core.models import Track

class TrackTableModel(QAbstractTableModel):
    def __init__(self, tracks=()):
        super().__init__()
        self._tracks: list[Track] = list(tracks)
        self._now_playing: int = -1

    def set_tracks(self, tracks):
        self.beginResetModel()
        self._tracks = list(tracks)
        self.endResetModel()

    def set_now_playing(self, row: int):
        old = self._now_playing
        self._now_playing = row
        for r in (old, row):
            if 0 <= r < len(self._tracks):
                self.dataChanged.emit(self.index(r, 0), self.index(r, 1))

    def rowCount(self, parent=QModelIndex()) -> int:
        return len(self._tracks)

    def columnCount(self, parent=QModelIndex()) -> int:
        return 2

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole or orientation != Qt.Horizontal:
            return None
        return ["Name", "Duration"][section]

    def data(self, index: QModelIndex, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        track = self._tracks[index.row()]
        col = index.column()

        if role == Qt.DisplayRole:
            if col == 0:
                return track.display_name
            if col == 1:
                return track.duration_text
        if role == Qt.FontRole and index.row() == self._now_playing:
            font = QFont()
            font.setBold(True)
            return font
        if role == Qt.ToolTipRole and col == 0:
            return track.location
        if role == Qt.UserRole:
            return track
        return None

    def track_at(self, row: int) -> Track | None:
        if row < 0 or row >= len(self._tracks):
            return None
        return self._tracks[row]
