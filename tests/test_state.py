"""Tests for the Qt bridge between the controller and the UI."""

from __future__ import annotations

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QCoreApplication

from conftest import FakeEngine
from core.controller import Change, PlaybackController
from core.state import AppState, Notify


@pytest.fixture(scope="module")
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def bound(qapp):
    engine = FakeEngine()
    controller = PlaybackController(engine)
    state = AppState()
    state.bind(controller)
    notes: list[Notify] = []
    changes: list[Change] = []
    state.notification.connect(notes.append)
    state.playback_changed.connect(changes.append)
    yield state, controller, engine, notes, changes
    state.unbind()
    controller.close()


def test_dispatch_turns_player_errors_into_notifications(bound) -> None:
    state, controller, _engine, notes, _changes = bound

    assert state.dispatch(controller.toggle_play) is False

    assert len(notes) == 1
    assert notes[0].notify_type == "error"
    assert "add songs" in notes[0].message


def test_dispatch_success(bound) -> None:
    state, controller, _engine, notes, _changes = bound
    assert state.dispatch(controller.add_tracks, ["/music/a.mp3"]) is True
    assert notes == []


def test_controller_changes_are_forwarded(bound) -> None:
    state, controller, _engine, _notes, changes = bound
    controller.toggle_shuffle()
    assert changes == [Change.MODES]


def test_engine_driven_errors_are_notified(bound) -> None:
    state, controller, engine, notes, _changes = bound
    controller.add_tracks(["/music/a.mp3"])
    controller.toggle_play()

    engine.current.emit_error("corrupt stream")

    assert notes[-1].notify_type == "error"
    assert "corrupt stream" in notes[-1].message


def test_unbind_stops_forwarding(bound) -> None:
    state, controller, _engine, _notes, changes = bound
    state.unbind()
    controller.toggle_repeat()
    assert changes == []
