# core/models.py
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum, auto


def format_duration(seconds: float | None) -> str:
    if seconds is None:
        return "00:00"
    total = max(0, int(seconds))
    m = total // 60
    s = total % 60
    return f"{m:02d}:{s:02d}"


class Track:
    """
    One playlist entry.

    `location` is fixed at construction. `duration_s` starts unknown and is
    filled in once, by whoever probes the file; entries are compared by
    identity so the same file added twice gives two distinct tracks.
    """

    __slots__ = ("_location", "display_name", "_duration_s")

    def __init__(self, location, display_name: str | None = None, duration_s: float | None = None):
        self._location = os.fspath(location)
        self.display_name = display_name or os.path.basename(self._location)
        self._duration_s: float | None = None
        if duration_s is not None:
            self.resolve_duration(duration_s)

    @property
    def location(self) -> str:
        return self._location

    @property
    def duration_s(self) -> float | None:
        return self._duration_s

    @property
    def duration_text(self) -> str:
        return format_duration(self._duration_s)

    @property
    def is_probed(self) -> bool:
        return self._duration_s is not None

    def resolve_duration(self, seconds: float) -> bool:
        if self._duration_s is not None:
            return False
        value = float(seconds)
        if value < 0:
            raise ValueError(f"duration must be non-negative, got {seconds!r}")
        self._duration_s = value
        return True

    def __repr__(self) -> str:
        return f"Track({self.display_name!r}, duration={self.duration_text})"


class PlaybackStatus(Enum):
    STOPPED = auto()
    PLAYING = auto()
    PAUSED = auto()


@dataclass
class PlaybackState:
    current_index: int = 0
    status: PlaybackStatus = PlaybackStatus.STOPPED
    shuffle_enabled: bool = False
    repeat_enabled: bool = False
    seek_in_progress: bool = False
    volume: float = 0.5

    # progress indicator
    position_s: float = 0.0
    duration_s: float | None = None
    progress_enabled: bool = False

    @property
    def is_playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING

    @property
    def progress_fraction(self) -> float:
        if not self.duration_s:
            return 0.0
        return min(1.0, max(0.0, self.position_s / self.duration_s))
