# core/engine.py
"""
Contracts between the playback controller and whatever decodes audio.

The controller only ever talks to these protocols; `player.player` provides
the Qt Multimedia implementation and the tests provide an in-memory one.

Time values are seconds (float). All listener callbacks are expected on the
GUI thread, one at a time.
"""
from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from core.models import Track


class MediaResource(Protocol):
    """One loaded media file. At most one is live at a time."""

    location: str

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...

    def seek(self, position_s: float) -> None: ...

    def set_volume(self, fraction: float) -> None: ...

    def position(self) -> float: ...

    def duration(self) -> Optional[float]:
        """Total length in seconds, None until the engine knows it."""

    def dispose(self) -> None:
        """Release everything the resource holds. Must be called before dropping it."""


class EngineListener(Protocol):
    def on_ready(self, resource: MediaResource) -> None: ...

    def on_position_changed(self, resource: MediaResource, position_s: float) -> None: ...

    def on_end_of_media(self, resource: MediaResource) -> None: ...

    def on_error(self, resource: MediaResource, message: str) -> None: ...


class PlaybackEngine(Protocol):
    def load(self, location: str, listener: EngineListener) -> MediaResource:
        """Open `location`. Raises core.errors.LoadError when it cannot."""


ProbeCallback = Callable[[Track, Optional[float]], None]


class DurationProber(Protocol):
    def probe(self, tracks: Sequence[Track], on_probed: ProbeCallback) -> None:
        """
        Resolve durations in the background. `on_probed(track, seconds)` is
        called once per track on the GUI thread, in any order; seconds is None
        when the file could not be read.
        """
