# src/library/probe.py
from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from mutagen import File as MutagenFile
from mutagen import MutagenError

from core.config import DEFAULT_AUDIO_EXTS

logger = logging.getLogger(__name__)


def is_audio_file(path: str, extensions: Iterable[str] = DEFAULT_AUDIO_EXTS) -> bool:
    ext = os.path.splitext(path)[1].lower()
    return ext in {e.lower() for e in extensions}


def file_dialog_filter(extensions: Iterable[str] = DEFAULT_AUDIO_EXTS) -> str:
    patterns = " ".join(f"*{e}" for e in extensions)
    return f"Audio Files ({patterns})"


def probe_duration(path: str) -> Optional[float]:
    """
    Length of an audio file in seconds, read from its headers with mutagen.
    Returns None for files mutagen cannot identify or read.
    """
    try:
        audio = MutagenFile(path)
    except (MutagenError, OSError) as e:
        logger.warning("Failed to probe %s: %s", path, e)
        return None

    if audio is None:
        logger.warning("Unrecognized audio format: %s", path)
        return None

    length = getattr(getattr(audio, "info", None), "length", None)
    if length is None:
        return None
    try:
        seconds = float(length)
    except (TypeError, ValueError):
        return None
    return seconds if seconds >= 0 else None
