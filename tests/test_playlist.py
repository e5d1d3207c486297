"""Tests for Track and Playlist."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.models import PlaybackState, Track, format_duration
from core.playlist import Playlist


class TestFormatDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(None, "00:00"), (0, "00:00"), (59.9, "00:59"), (61, "01:01"), (6000, "100:00"), (-3, "00:00")],
    )
    def test_format(self, seconds, expected: str) -> None:
        assert format_duration(seconds) == expected


class TestTrack:
    def test_display_name_is_base_name(self) -> None:
        track = Track("/music/album/song.mp3")
        assert track.display_name == "song.mp3"
        assert track.duration_text == "00:00"
        assert track.is_probed is False

    def test_display_name_override(self) -> None:
        assert Track("/music/song.mp3", display_name="Song").display_name == "Song"

    def test_accepts_path_objects(self) -> None:
        assert Track(Path("/music/song.mp3")).location == "/music/song.mp3"

    def test_location_is_read_only(self) -> None:
        track = Track("/music/song.mp3")
        with pytest.raises(AttributeError):
            track.location = "/music/other.mp3"

    def test_duration_resolves_once(self) -> None:
        track = Track("/music/song.mp3")
        assert track.resolve_duration(125.4) is True
        assert track.resolve_duration(300.0) is False
        assert track.duration_s == 125.4
        assert track.duration_text == "02:05"

    def test_negative_duration_rejected(self) -> None:
        with pytest.raises(ValueError):
            Track("/music/song.mp3").resolve_duration(-1)


class TestPlaybackState:
    def test_progress_fraction(self) -> None:
        assert PlaybackState(position_s=50.0, duration_s=200.0).progress_fraction == 0.25
        assert PlaybackState(position_s=50.0, duration_s=None).progress_fraction == 0.0
        assert PlaybackState(position_s=250.0, duration_s=200.0).progress_fraction == 1.0


class TestPlaylist:
    def test_starts_empty(self) -> None:
        playlist = Playlist()
        assert playlist.is_empty()
        assert playlist.size() == 0
        assert len(playlist) == 0

    def test_preserves_insertion_order(self) -> None:
        playlist = Playlist()
        playlist.add_tracks(["/b.mp3", "/a.mp3"])
        playlist.add_tracks(["/c.mp3"])
        assert [t.location for t in playlist] == ["/b.mp3", "/a.mp3", "/c.mp3"]

    def test_duplicates_are_distinct_entries(self) -> None:
        playlist = Playlist()
        first, second = playlist.add_tracks(["/a.mp3", "/a.mp3"])

        assert first is not second
        assert playlist.index_of(first) == 0
        assert playlist.index_of(second) == 1

    def test_index_of_unknown_track(self) -> None:
        playlist = Playlist()
        playlist.add_tracks(["/a.mp3"])
        assert playlist.index_of(Track("/a.mp3")) is None

    def test_get_out_of_range(self) -> None:
        playlist = Playlist()
        playlist.add_tracks(["/a.mp3"])
        assert playlist.get(0).location == "/a.mp3"
        with pytest.raises(IndexError):
            playlist.get(1)
        with pytest.raises(IndexError):
            playlist.get(-1)

    def test_rejects_single_string(self) -> None:
        with pytest.raises(TypeError):
            Playlist().add_tracks("/a.mp3")

    def test_duration_update_is_visible_through_playlist(self) -> None:
        playlist = Playlist()
        (track,) = playlist.add_tracks(["/a.mp3"])
        track.resolve_duration(30)
        assert playlist.get(0).duration_text == "00:30"

    def test_tracks_snapshot(self) -> None:
        playlist = Playlist()
        playlist.add_tracks(["/a.mp3"])
        snapshot = playlist.tracks()
        playlist.add_tracks(["/b.mp3"])
        assert len(snapshot) == 1
        assert playlist.size() == 2
