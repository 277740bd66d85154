"""Environment-driven settings shared by the engine and its telemetry."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "VIRTUAL_EDITOR_"

_TRUTHY = {"1", "true", "yes", "on"}


def _lookup(env: Mapping[str, str], name: str) -> Optional[str]:
    return env.get(f"{ENV_PREFIX}{name}")


def _flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _lookup(env, name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = _lookup(env, name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved configuration for one process.

    ``display_offset`` is added to 0-indexed rows/columns whenever positions
    are exposed in physical form (1 matches editors that count from one).
    """

    logger_name: str = "virtual_editor"
    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    log_buffered: bool = False
    log_buffer_size: int = 2048
    console: bool = True
    color: bool = True
    display_offset: int = 1
    verbose: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        source = os.environ if env is None else env
        return cls(
            logger_name=_lookup(source, "LOGGER") or "virtual_editor",
            log_level=(_lookup(source, "LOG_LEVEL") or "INFO").upper(),
            log_file=_lookup(source, "LOG_FILE") or "",
            log_json=_flag(source, "LOG_JSON", False),
            log_buffered=_flag(source, "LOG_BUFFERED", False),
            log_buffer_size=_int(source, "LOG_BUFFER_SIZE", 2048),
            console=not _flag(source, "DISABLE_CONSOLE", False),
            color=not _flag(source, "NO_COLOR", False),
            display_offset=_int(source, "DISPLAY_OFFSET", 1),
            verbose=_flag(source, "VERBOSE", False),
        )


_CACHED: Optional[Settings] = None


def load_settings(*, reload: bool = False) -> Settings:
    """Return process-wide settings, reading the environment once."""

    global _CACHED
    if _CACHED is None or reload:
        _CACHED = Settings.from_env()
    return _CACHED


__all__ = ["ENV_PREFIX", "Settings", "load_settings"]
