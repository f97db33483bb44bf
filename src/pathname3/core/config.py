from __future__ import annotations

import os
from dataclasses import dataclass

from .pathname import SYMLOOP_MAX

_ENV_PREFIX = "PATHNAME3_"


def _env(name: str, default: str) -> str:
    if not name.startswith(_ENV_PREFIX):
        raise ValueError(f"Only {_ENV_PREFIX}* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, "1" if default else "0").strip().lower()
    if raw in {"1", "true", "yes", "on"}:
        return True
    if raw in {"0", "false", "no", "off"}:
        return False
    return default


@dataclass(frozen=True)
class FilesystemConfig:
    """
    Filesystem provider configuration.
    """
    # Refuse unlink/chmod/chown/... unless explicitly disabled.
    read_only: bool = True
    max_entries: int = 1000
    max_read_chars: int = 80_000
    symloop_max: int = SYMLOOP_MAX

    @classmethod
    def from_env(cls) -> FilesystemConfig:
        """
        Overrides from PATHNAME3_READ_ONLY, PATHNAME3_MAX_ENTRIES,
        PATHNAME3_MAX_READ_CHARS and PATHNAME3_SYMLOOP_MAX. Malformed values keep the default.
        """
        defaults = cls()
        return cls(
            read_only=_env_bool("PATHNAME3_READ_ONLY", defaults.read_only),
            max_entries=_env_int("PATHNAME3_MAX_ENTRIES", defaults.max_entries),
            max_read_chars=_env_int("PATHNAME3_MAX_READ_CHARS", defaults.max_read_chars),
            symloop_max=_env_int("PATHNAME3_SYMLOOP_MAX", defaults.symloop_max),
        )
