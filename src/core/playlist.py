from __future__ import annotations

import os
from typing import Iterable, Iterator

from core.models import Track


class Playlist:
    """Ordered, append-only list of tracks."""

    def __init__(self, tracks: Iterable[Track] = ()):
        self._tracks: list[Track] = list(tracks)

    def add_tracks(self, locations: Iterable) -> list[Track]:
        if isinstance(locations, (str, bytes, os.PathLike)):
            raise TypeError("add_tracks expects a sequence of locations, not a single location")

        added = [Track(location) for location in locations]
        self._tracks.extend(added)
        return added

    def get(self, index: int) -> Track:
        if index < 0 or index >= len(self._tracks):
            raise IndexError(f"playlist index {index} out of range (size {len(self._tracks)})")
        return self._tracks[index]

    def size(self) -> int:
        return len(self._tracks)

    def is_empty(self) -> bool:
        return not self._tracks

    def index_of(self, track: Track) -> int | None:
        for i, t in enumerate(self._tracks):
            if t is track:
                return i
        return None

    def tracks(self) -> tuple[Track, ...]:
        return tuple(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __iter__(self) -> Iterator[Track]:
        return iter(tuple(self._tracks))
