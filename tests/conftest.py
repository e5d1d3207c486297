"""Shared fixtures: an in-memory playback engine and a synchronous prober."""

from __future__ import annotations

from typing import Optional

import pytest

from core.controller import PlaybackController
from core.errors import LoadError, PlaybackError


class FakeResource:
    def __init__(self, engine: "FakeEngine", location: str, listener, duration: Optional[float]):
        self.engine = engine
        self.location = location
        self.listener = listener
        self._duration = duration
        self._position = 0.0
        self.volume: Optional[float] = None
        self.calls: list[tuple] = []
        self.disposed = False
        self.fail_play = False

    def play(self) -> None:
        if self.fail_play:
            raise PlaybackError(f"cannot play {self.location}")
        self.calls.append(("play",))

    def pause(self) -> None:
        self.calls.append(("pause",))

    def stop(self) -> None:
        self._position = 0.0
        self.calls.append(("stop",))

    def seek(self, position_s: float) -> None:
        self._position = position_s
        self.calls.append(("seek", position_s))

    def set_volume(self, fraction: float) -> None:
        self.volume = fraction
        self.calls.append(("set_volume", fraction))

    def position(self) -> float:
        return self._position

    def duration(self) -> Optional[float]:
        return self._duration

    def dispose(self) -> None:
        self.disposed = True
        self.calls.append(("dispose",))

    # engine-side events
    def emit_ready(self, duration: float) -> None:
        self._duration = duration
        self.listener.on_ready(self)

    def emit_position(self, position_s: float) -> None:
        self._position = position_s
        self.listener.on_position_changed(self, position_s)

    def emit_end(self) -> None:
        self.listener.on_end_of_media(self)

    def emit_error(self, message: str) -> None:
        self.listener.on_error(self, message)


class FakeEngine:
    def __init__(self, duration: Optional[float] = 200.0):
        self.duration = duration
        self.failing: set[str] = set()
        self.fail_play: set[str] = set()
        self.resources: list[FakeResource] = []
        self.max_live = 0

    def load(self, location: str, listener) -> FakeResource:
        if location in self.failing:
            raise LoadError(location, "unsupported format")
        resource = FakeResource(self, location, listener, self.duration)
        resource.fail_play = location in self.fail_play
        self.resources.append(resource)
        self.max_live = max(self.max_live, len(self.live()))
        return resource

    def live(self) -> list[FakeResource]:
        return [r for r in self.resources if not r.disposed]

    @property
    def current(self) -> Optional[FakeResource]:
        live = self.live()
        return live[-1] if live else None

    def loaded_locations(self) -> list[str]:
        return [r.location for r in self.resources]


class SyncProber:
    """Resolves durations immediately from a lookup table."""

    def __init__(self, durations: Optional[dict[str, Optional[float]]] = None):
        self.durations = durations or {}
        self.requests: list[list] = []

    def probe(self, tracks, on_probed) -> None:
        self.requests.append(list(tracks))
        for track in tracks:
            on_probed(track, self.durations.get(track.location))


class FixedRandom:
    """Stand-in for random.Random that returns scripted indices."""

    def __init__(self, values):
        self.values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        return self.values.pop(0)


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def controller(engine: FakeEngine) -> PlaybackController:
    with PlaybackController(engine) as c:
        yield c


@pytest.fixture
def abc_controller(controller: PlaybackController) -> PlaybackController:
    controller.add_tracks(["/music/A.mp3", "/music/B.mp3", "/music/C.mp3"])
    return controller
