"""Telemetry subpackage (lightweight).

Only logging lives here; the timers themselves never log on their own.
"""

from .logging import get_logger

__all__ = [
    "get_logger",
]
