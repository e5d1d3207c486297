"""Tests for environment-driven configuration."""

from __future__ import annotations

from core.config import AppConfig


def test_defaults() -> None:
    config = AppConfig.from_env({})
    assert config.initial_volume == 0.5
    assert config.audio_extensions == (".mp3", ".wav", ".m4a")
    assert config.log_level == "WARNING"
    assert config.toast_timeout_ms == 3000


def test_overrides() -> None:
    config = AppConfig.from_env(
        {
            "MUSICPLAYER_VOLUME": "0.3",
            "MUSICPLAYER_EXTENSIONS": "flac, .OGG,,mp3",
            "MUSICPLAYER_LOG_LEVEL": "debug",
            "MUSICPLAYER_TOAST_MS": "5000",
        }
    )
    assert config.initial_volume == 0.3
    assert config.audio_extensions == (".flac", ".ogg", ".mp3")
    assert config.log_level == "DEBUG"
    assert config.toast_timeout_ms == 5000


def test_invalid_values_fall_back() -> None:
    config = AppConfig.from_env(
        {
            "MUSICPLAYER_VOLUME": "loud",
            "MUSICPLAYER_EXTENSIONS": " , ",
            "MUSICPLAYER_LOG_LEVEL": "chatty",
            "MUSICPLAYER_TOAST_MS": "-1",
        }
    )
    assert config == AppConfig()


def test_volume_out_of_range_falls_back() -> None:
    assert AppConfig.from_env({"MUSICPLAYER_VOLUME": "1.5"}).initial_volume == 0.5
