"""Configuration defaults for devtimer reporting and benchmarking."""
from __future__ import annotations

from dataclasses import dataclass

from .utils.env import env_int


@dataclass(slots=True)
class ReportConfig:
    unavailable: str = "unavailable"
    # Incomplete timers are left out of reports unless this is False
    skip_incomplete: bool = True


@dataclass(slots=True)
class BenchConfig:
    iterations: int = 10

    @classmethod
    def from_env(cls) -> "BenchConfig":
        """Read DEVTIMER_BENCH_ITERATIONS (minimum 1)."""
        return cls(iterations=env_int("DEVTIMER_BENCH_ITERATIONS", cls().iterations, minimum=1))


DEFAULT_REPORT = ReportConfig()
