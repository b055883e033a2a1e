"""Environment variable parsing helpers for the report entry point."""

from __future__ import annotations

import os


def get_env_str(name: str, default: str | None = None) -> str | None:
    """Return a stripped environment value, or ``default`` when unset/blank."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_env_int(name: str, default: int) -> int:
    """Parse integer environment variables with a safe default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


__all__ = ["get_env_str", "get_env_int"]
