"""Tests for mutagen-based duration probing."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import patch

from mutagen import MutagenError

from library.probe import file_dialog_filter, is_audio_file, probe_duration


def test_probe_reads_stream_length() -> None:
    audio = SimpleNamespace(info=SimpleNamespace(length=215.3))
    with patch("library.probe.MutagenFile", return_value=audio) as mock_file:
        assert probe_duration("/music/song.mp3") == 215.3
    mock_file.assert_called_once_with("/music/song.mp3")


def test_probe_unrecognized_format() -> None:
    with patch("library.probe.MutagenFile", return_value=None):
        assert probe_duration("/music/notes.txt") is None


def test_probe_unreadable_file() -> None:
    with patch("library.probe.MutagenFile", side_effect=MutagenError("truncated")):
        assert probe_duration("/music/broken.mp3") is None


def test_probe_missing_file() -> None:
    with patch("library.probe.MutagenFile", side_effect=FileNotFoundError("nope")):
        assert probe_duration("/music/missing.mp3") is None


def test_probe_without_length() -> None:
    audio = SimpleNamespace(info=None)
    with patch("library.probe.MutagenFile", return_value=audio):
        assert probe_duration("/music/song.mp3") is None


def test_is_audio_file() -> None:
    assert is_audio_file("/music/Song.MP3")
    assert is_audio_file("/music/clip.m4a")
    assert not is_audio_file("/music/cover.jpg")
    assert is_audio_file("/music/a.flac", extensions=(".flac",))


def test_file_dialog_filter() -> None:
    assert file_dialog_filter() == "Audio Files (*.mp3 *.wav *.m4a)"
