from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "MUSICPLAYER_"

DEFAULT_AUDIO_EXTS = (".mp3", ".wav", ".m4a")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    initial_volume: float = 0.5
    audio_extensions: tuple[str, ...] = field(default=DEFAULT_AUDIO_EXTS)
    window_width: int = 800
    window_height: int = 600
    toast_timeout_ms: int = 3000
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            initial_volume=_volume(env.get(ENV_PREFIX + "VOLUME"), defaults.initial_volume),
            audio_extensions=_extensions(env.get(ENV_PREFIX + "EXTENSIONS"), defaults.audio_extensions),
            toast_timeout_ms=_positive_int(env.get(ENV_PREFIX + "TOAST_MS"), defaults.toast_timeout_ms),
            log_level=_log_level(env.get(ENV_PREFIX + "LOG_LEVEL"), defaults.log_level),
        )


def _volume(raw: str | None, default: float) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        v = float(raw)
    except ValueError:
        logger.warning("Ignoring %sVOLUME=%r: not a number", ENV_PREFIX, raw)
        return default
    if not 0.0 <= v <= 1.0:
        logger.warning("Ignoring %sVOLUME=%r: must be between 0 and 1", ENV_PREFIX, raw)
        return default
    return v


def _extensions(raw: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if raw is None:
        return default
    exts = []
    for part in raw.split(","):
        part = part.strip().lower()
        if not part:
            continue
        exts.append(part if part.startswith(".") else "." + part)
    if not exts:
        logger.warning("Ignoring empty %sEXTENSIONS", ENV_PREFIX)
        return default
    return tuple(exts)


def _positive_int(raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        v = int(raw)
    except ValueError:
        logger.warning("Ignoring %sTOAST_MS=%r: not an integer", ENV_PREFIX, raw)
        return default
    return v if v > 0 else default


def _log_level(raw: str | None, default: str) -> str:
    if raw is None or not raw.strip():
        return default
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Ignoring %sLOG_LEVEL=%r", ENV_PREFIX, raw)
        return default
    return level
