"""Single start/stop timer over the monotonic nanosecond clock.

Usage:

    t = DevTime()
    t.start()
    do_work()
    t.stop()
    print(t.time_in_micros())

Calling ``start()`` again resets the timer for a new measurement.
"""
from __future__ import annotations

import threading
import time
from datetime import timedelta
from typing import Optional

from .errors import IncompleteMeasurement, NotStarted
from .units import TimeUnit


def _now() -> int:
    return time.perf_counter_ns()


class DevTime:
    """Holds an optional start and stop instant (integer nanoseconds)."""

    __slots__ = ("name", "start_instant", "end_instant")

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name if name is not None else (threading.current_thread().name or "unnamed-thread")
        self.start_instant: Optional[int] = None
        self.end_instant: Optional[int] = None

    def __repr__(self) -> str:
        return f"DevTime(name={self.name!r}, start={self.start_instant}, end={self.end_instant})"

    # ---- lifecycle ----
    def reset(self) -> None:
        """Discard any recorded instants."""
        self.start_instant, self.end_instant = None, None

    def start(self) -> None:
        self.reset()
        self.start_instant = _now()

    def start_after(self, delay: float | timedelta) -> None:
        """Block for ``delay`` (seconds or timedelta), then start.

        The sleep is not cancellable; exact precision is up to the platform.
        """
        seconds = delay.total_seconds() if isinstance(delay, timedelta) else float(delay)
        if seconds < 0:
            raise ValueError(f"delay must be non-negative, got {seconds}")
        time.sleep(seconds)
        self.start()

    def stop(self) -> None:
        # Stopping again re-stops: the end moves, the start stays.
        call_time = _now()
        if self.start_instant is None:
            raise NotStarted(f"Timer `{self.name}` was never started")
        self.end_instant = call_time

    def start_checked(self) -> bool:
        """Start only if no start is recorded since the last reset."""
        if self.start_instant is not None:
            return False
        self.start_instant = _now()
        return True

    def stop_checked(self) -> bool:
        """Stop only if running; never raises."""
        call_time = _now()
        if not self.is_running:
            return False
        self.end_instant = call_time
        return True

    @property
    def is_running(self) -> bool:
        return self.start_instant is not None and self.end_instant is None

    @property
    def is_complete(self) -> bool:
        return self.start_instant is not None and self.end_instant is not None

    # ---- queries ----
    def _elapsed_nanos(self) -> int:
        if self.start_instant is None or self.end_instant is None:
            raise IncompleteMeasurement(
                f"Timer `{self.name}` has no complete start/stop measurement"
            )
        return self.end_instant - self.start_instant

    def elapsed_as(self, unit: TimeUnit | str) -> int:
        """Elapsed time floored to ``unit``.

        Raises IncompleteMeasurement unless both ``start()`` and ``stop()``
        happened since the last reset.
        """
        unit = TimeUnit.parse(unit)
        return unit.convert(self._elapsed_nanos())

    def time_in_nanos(self) -> int:
        return self.elapsed_as(TimeUnit.NANOS)

    def time_in_micros(self) -> int:
        return self.elapsed_as(TimeUnit.MICROS)

    def time_in_millis(self) -> int:
        return self.elapsed_as(TimeUnit.MILLIS)

    def time_in_secs(self) -> int:
        return self.elapsed_as(TimeUnit.SECONDS)

    # ---- context manager ----
    def __enter__(self) -> "DevTime":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):  # noqa: ANN001, ANN201
        if exc_type is not None:
            # keep the body's error even if it reset the timer
            self.stop_checked()
        else:
            self.stop()
        return False
