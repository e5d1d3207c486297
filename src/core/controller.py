# core/controller.py
from __future__ import annotations

import logging
import random
from dataclasses import replace
from enum import Enum, auto
from typing import Callable, Iterable, Optional

from core.engine import DurationProber, MediaResource, PlaybackEngine
from core.errors import EmptyPlaylistError, LoadError, PlaybackError, PlayerError
from core.models import PlaybackState, PlaybackStatus, Track
from core.playlist import Playlist

logger = logging.getLogger(__name__)


class Change(Enum):
    PLAYLIST = auto()
    TRACK = auto()
    STATUS = auto()
    POSITION = auto()
    MODES = auto()
    VOLUME = auto()


def _clamp01(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


class PlaybackController:
    """
    Owns the playlist and the playback state machine.

    User intents (toggle_play, next, select_track, ...) raise PlayerError
    subclasses on failure and leave the state as it was. Transitions started by
    the engine itself (end of track, late decode errors) and the auto-load after
    the first add report failures to `subscribe_errors` listeners instead.

    Observers get a Change after every mutation and read `state` / `playlist`
    to render; nothing here knows about widgets.
    """

    def __init__(
        self,
        engine: PlaybackEngine,
        *,
        prober: DurationProber | None = None,
        volume: float = 0.5,
        rng: random.Random | None = None,
    ):
        self._engine = engine
        self._prober = prober
        self._rng = rng or random.Random()

        self._playlist = Playlist()
        self._state = PlaybackState(volume=_clamp01(volume))

        self._resource: MediaResource | None = None
        self._loaded_track: Track | None = None

        self._listeners: list[Callable[[Change], None]] = []
        self._error_listeners: list[Callable[[PlayerError], None]] = []

    # ----------------------------
    # Lifetime
    # ----------------------------

    def __enter__(self) -> "PlaybackController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._resource is not None:
            logger.info("Releasing %s on shutdown", self._resource.location)
        self._release_resource()

    # ----------------------------
    # Observation
    # ----------------------------

    @property
    def playlist(self) -> Playlist:
        return self._playlist

    @property
    def state(self) -> PlaybackState:
        return replace(self._state)

    @property
    def status(self) -> PlaybackStatus:
        return self._state.status

    @property
    def current_index(self) -> int:
        return self._state.current_index

    @property
    def current_track(self) -> Track | None:
        if self._playlist.is_empty():
            return None
        return self._playlist.get(self._state.current_index)

    @property
    def loaded_track(self) -> Track | None:
        return self._loaded_track

    @property
    def has_resource(self) -> bool:
        return self._resource is not None

    def subscribe(self, callback: Callable[[Change], None]) -> Callable[[], None]:
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def subscribe_errors(self, callback: Callable[[PlayerError], None]) -> Callable[[], None]:
        self._error_listeners.append(callback)
        return lambda: self._error_listeners.remove(callback)

    def _emit(self, *changes: Change) -> None:
        for change in changes:
            for cb in list(self._listeners):
                cb(change)

    def _report(self, error: PlayerError) -> None:
        logger.warning("%s", error)
        for cb in list(self._error_listeners):
            cb(error)

    # ----------------------------
    # Playlist
    # ----------------------------

    def add_tracks(self, locations: Iterable) -> list[Track]:
        was_empty = self._playlist.is_empty()
        added = self._playlist.add_tracks(locations)
        if not added:
            return added

        logger.info("Added %d track(s); playlist size %d", len(added), self._playlist.size())
        self._emit(Change.PLAYLIST)

        if self._prober is not None:
            self._prober.probe(added, self._on_duration_probed)

        # Auto-load (not auto-play) when nothing is loaded yet.
        if self._resource is None:
            if was_empty:
                self._state.current_index = 0
            try:
                self._switch_to(self._state.current_index)
            except PlayerError as e:
                self._report(e)

        return added

    def _on_duration_probed(self, track: Track, seconds: Optional[float]) -> None:
        if seconds is None:
            logger.debug("Duration unknown for %s", track.location)
            return
        if track.resolve_duration(seconds):
            self._emit(Change.PLAYLIST)

    # ----------------------------
    # Transport
    # ----------------------------

    def toggle_play(self) -> None:
        if self._playlist.is_empty():
            raise EmptyPlaylistError()

        if self._state.status is PlaybackStatus.PLAYING and self._resource is not None:
            self._resource.pause()
            self._set_status(PlaybackStatus.PAUSED)
            return

        if self._resource is None:
            self._switch_to(self._state.current_index)

        self._play_resource()
        self._set_status(PlaybackStatus.PLAYING)

    def stop(self) -> None:
        if self._resource is not None:
            self._resource.stop()
        self._state.position_s = 0.0
        self._set_status(PlaybackStatus.STOPPED)
        self._emit(Change.POSITION)

    def next(self) -> None:
        self._advance(1)

    def previous(self) -> None:
        self._advance(-1)

    def select_track(self, index: int) -> None:
        self._playlist.get(index)  # IndexError for rows that do not exist
        self._switch_to(index)

    def toggle_shuffle(self) -> bool:
        self._state.shuffle_enabled = not self._state.shuffle_enabled
        self._emit(Change.MODES)
        return self._state.shuffle_enabled

    def toggle_repeat(self) -> bool:
        self._state.repeat_enabled = not self._state.repeat_enabled
        self._emit(Change.MODES)
        return self._state.repeat_enabled

    def set_volume(self, volume: float) -> None:
        self._state.volume = _clamp01(volume)
        if self._resource is not None:
            self._resource.set_volume(self._state.volume)
        self._emit(Change.VOLUME)

    # ----------------------------
    # Seeking
    # ----------------------------

    def begin_seek(self) -> None:
        self._state.seek_in_progress = True

    def preview_seek(self, fraction: float) -> None:
        if not self._state.seek_in_progress or not self._state.duration_s:
            return
        self._state.position_s = self._state.duration_s * _clamp01(fraction)
        self._emit(Change.POSITION)

    def end_seek(self, fraction: float) -> float | None:
        try:
            if self._resource is None:
                return None
            total = self._resource.duration()
            if not total:
                return None
            target = total * _clamp01(fraction)
            self._resource.seek(target)
            self._state.position_s = target
            self._state.duration_s = total
            logger.debug("Seek to %.2fs of %.2fs", target, total)
            return target
        finally:
            self._state.seek_in_progress = False
            self._emit(Change.POSITION)

    # ----------------------------
    # Engine listener
    # ----------------------------

    def on_ready(self, resource: MediaResource) -> None:
        if resource is not self._resource:
            return
        self._state.duration_s = resource.duration()
        self._emit(Change.POSITION)

    def on_position_changed(self, resource: MediaResource, position_s: float) -> None:
        if resource is not self._resource or self._state.seek_in_progress:
            return
        self._state.position_s = max(0.0, float(position_s))
        self._state.duration_s = resource.duration()
        self._emit(Change.POSITION)

    def on_end_of_media(self, resource: MediaResource) -> None:
        if resource is not self._resource or self._state.status is not PlaybackStatus.PLAYING:
            return

        if self._state.repeat_enabled:
            logger.debug("Repeating %s", resource.location)
            resource.seek(0.0)
            self._state.position_s = 0.0
            try:
                self._play_resource()
            except PlaybackError as e:
                self._set_status(PlaybackStatus.PAUSED)
                self._report(e)
            self._emit(Change.POSITION)
            return

        try:
            self._advance(1)
        except PlayerError as e:
            self._report(e)

    def on_error(self, resource: MediaResource, message: str) -> None:
        if resource is not self._resource:
            return
        location = resource.location
        self._release_resource()
        if self._state.status is not PlaybackStatus.STOPPED:
            self._set_status(PlaybackStatus.STOPPED)
        self._emit(Change.TRACK, Change.POSITION)
        self._report(LoadError(location, message))

    # ----------------------------
    # Internals
    # ----------------------------

    def _set_status(self, status: PlaybackStatus) -> None:
        if self._state.status is status:
            return
        logger.debug("Status %s -> %s", self._state.status.name, status.name)
        self._state.status = status
        self._emit(Change.STATUS)

    def _pick_index(self, step: int) -> int:
        size = self._playlist.size()
        if self._state.shuffle_enabled:
            # current index may come up again
            return self._rng.randrange(size)
        return (self._state.current_index + step) % size

    def _advance(self, step: int) -> None:
        if self._playlist.is_empty():
            return
        self._switch_to(self._pick_index(step))

    def _play_resource(self) -> None:
        try:
            self._resource.play()
        except PlaybackError:
            raise
        except Exception as e:
            raise PlaybackError(f"Cannot play {self._resource.location}: {e}") from e

    def _release_resource(self) -> None:
        resource = self._resource
        self._resource = None
        self._loaded_track = None
        self._state.progress_enabled = False
        self._state.position_s = 0.0
        self._state.duration_s = None
        if resource is None:
            return
        try:
            resource.dispose()
        except Exception:
            logger.exception("Failed to dispose %s", resource.location)

    def _switch_to(self, index: int) -> None:
        track = self._playlist.get(index)
        resume = self._state.status is PlaybackStatus.PLAYING
        self._state.current_index = index

        self._release_resource()

        try:
            resource = self._engine.load(track.location, self)
        except LoadError:
            if resume:
                self._set_status(PlaybackStatus.STOPPED)
            self._emit(Change.TRACK, Change.POSITION)
            raise

        self._resource = resource
        self._loaded_track = track
        resource.set_volume(self._state.volume)
        self._state.progress_enabled = True
        self._state.duration_s = resource.duration()
        logger.info("Loaded [%d] %s", index, track.display_name)

        if resume:
            try:
                self._play_resource()
            except PlaybackError:
                self._set_status(PlaybackStatus.PAUSED)
                self._emit(Change.TRACK, Change.POSITION)
                raise

        self._emit(Change.TRACK, Change.POSITION)
