from __future__ import annotations


class PlayerError(Exception):
    """Base class for failures that are shown to the user instead of crashing."""


class EmptyPlaylistError(PlayerError):
    def __init__(self, message: str = "Please add songs to the playlist first!"):
        super().__init__(message)


class LoadError(PlayerError):
    """The playback engine could not open or decode a media file."""

    def __init__(self, location: str, reason: str = ""):
        self.location = location
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Error loading media file {location}{detail}")


class PlaybackError(PlayerError):
    """The playback engine refused to start playback of a loaded file."""
