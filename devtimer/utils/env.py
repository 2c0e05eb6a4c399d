"""Environment parsing helpers.

Small helpers to consistently parse env vars with sane defaults.
"""
from __future__ import annotations

import os


def env_int(name: str, default: int, minimum: int | None = None) -> int:
    try:
        v = int(os.getenv(name, str(default)))
    except ValueError:
        v = int(default)
    if minimum is not None:
        v = max(minimum, v)
    return v


def env_str(name: str, default: str) -> str:
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip()
