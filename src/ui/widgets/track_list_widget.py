# ui/track_list_widget.py
from __future__ import annotations

from PySide6.QtCore import Signal, Qt, QItemSelectionModel
from PySide6.QtWidgets import QWidget, QVBoxLayout, QTableView, QMenu, QHeaderView

from ui.models.track_table_model import TrackTableModel


class TrackListWidget(QWidget):
    playTrack = Signal(int)       # playlist row

    def __init__(self, parent=None):
        super().__init__(parent)

        self.table = QTableView()
        self.model = TrackTableModel([])
        self.table.setModel(self.model)

        self.table.setSelectionBehavior(QTableView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableView.SelectionMode.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.setShowGrid(False)
        self.table.setAlternatingRowColors(True)

        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.setColumnWidth(1, 90)
        self.table.setObjectName("TrackTable")

        self.table.verticalHeader().setDefaultSectionSize(24)
        self.table.setMinimumHeight(200)

        self._apply_styles()

        # Double click -> play
        self.table.doubleClicked.connect(self._on_double_click)

        # Right-click context menu
        self.table.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.table.customContextMenuRequested.connect(self._on_context_menu)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.table)

    # -------------------------
    # External API
    # -------------------------
    def refresh(self, tracks):
        selected = self.selected_row()
        self.model.set_tracks(tracks)
        if selected is not None and selected < self.model.rowCount():
            self.table.selectRow(selected)

    def set_now_playing(self, row: int | None):
        self.model.set_now_playing(-1 if row is None else row)
        if row is None or row < 0 or row >= self.model.rowCount():
            return

        idx = self.model.index(row, 0)
        sm = self.table.selectionModel()
        if sm is None:
            return

        sm.setCurrentIndex(idx, QItemSelectionModel.ClearAndSelect | QItemSelectionModel.Rows)
        self.table.scrollTo(idx, QTableView.ScrollHint.EnsureVisible)

    def selected_row(self) -> int | None:
        idx = self.table.currentIndex()
        if not idx.isValid():
            return None
        return idx.row()

    # -------------------------
    # UI Events
    # -------------------------
    def _on_double_click(self, index):
        if not index.isValid():
            return
        self.playTrack.emit(index.row())

    def _on_context_menu(self, pos):
        idx = self.table.indexAt(pos)
        if not idx.isValid():
            return

        menu = QMenu(self)
        act_play = menu.addAction("Play")

        chosen = menu.exec(self.table.viewport().mapToGlobal(pos))
        if chosen == act_play:
            self.playTrack.emit(idx.row())

    def _apply_styles(self):
        self.setStyleSheet("""
        QTableView#TrackTable {
            background-color: #2a2a2a;
            alternate-background-color: #242424;
            border: none;
            color: #e5e7eb;
            gridline-color: #2a2a2a;
            selection-background-color: rgba(56, 189, 248, 0.2);
            selection-color: #e5e7eb;
        }

        QHeaderView::section {
            background-color: #1a1a1a;
            color: #9ca3af;
            padding: 4px 6px;
            border: none;
            border-bottom: 1px solid #333333;
            font-size: 11px;
            text-transform: uppercase;
        }

        QTableView::item {
            padding: 4px 6px;
        }
        """)
