"""Time units used when reporting elapsed durations."""
from __future__ import annotations

from enum import Enum


class TimeUnit(Enum):
    SECONDS = 1_000_000_000
    MILLIS = 1_000_000
    MICROS = 1_000
    NANOS = 1

    @property
    def per_unit(self) -> int:
        """Nanoseconds in one unit."""
        return self.value

    @property
    def suffix(self) -> str:
        return _SUFFIX[self]

    def convert(self, nanos: int) -> int:
        # durations from a monotonic clock are never negative, so // truncates
        return int(nanos) // self.value

    @classmethod
    def parse(cls, value: "TimeUnit | str") -> "TimeUnit":
        if isinstance(value, TimeUnit):
            return value
        try:
            return _ALIASES[str(value).strip().lower()]
        except KeyError:
            raise ValueError(f"unknown time unit: {value!r}") from None


_SUFFIX = {
    TimeUnit.SECONDS: "s",
    TimeUnit.MILLIS: "ms",
    TimeUnit.MICROS: "us",
    TimeUnit.NANOS: "ns",
}

_ALIASES = {
    "s": TimeUnit.SECONDS,
    "sec": TimeUnit.SECONDS,
    "secs": TimeUnit.SECONDS,
    "seconds": TimeUnit.SECONDS,
    "ms": TimeUnit.MILLIS,
    "millis": TimeUnit.MILLIS,
    "milliseconds": TimeUnit.MILLIS,
    "us": TimeUnit.MICROS,
    "micros": TimeUnit.MICROS,
    "microseconds": TimeUnit.MICROS,
    "ns": TimeUnit.NANOS,
    "nanos": TimeUnit.NANOS,
    "nanoseconds": TimeUnit.NANOS,
}
