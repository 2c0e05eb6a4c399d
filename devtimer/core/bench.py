"""Repeated-benchmark runner.

Runs an operation N times, timing each call with a fresh ``DevTime``, and
returns a ``BenchmarkResult`` holding the per-iteration nanoseconds plus
min/max/average.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import operator
from typing import IO, Any, Callable, Iterable, List, Optional, Tuple

from .errors import InvalidIterationCount
from .schemas import BenchmarkSummary
from .timer import DevTime


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    durations: Tuple[int, ...]
    min_ns: int
    max_ns: int
    average_ns: int

    @classmethod
    def from_durations(cls, durations: Iterable[int]) -> "BenchmarkResult":
        samples = tuple(int(d) for d in durations)
        if not samples:
            raise InvalidIterationCount("benchmark result needs at least one duration")
        # Python ints do not overflow; floor mean keeps min <= avg <= max
        return cls(
            durations=samples,
            min_ns=min(samples),
            max_ns=max(samples),
            average_ns=sum(samples) // len(samples),
        )

    @property
    def iterations(self) -> int:
        return len(self.durations)

    def __len__(self) -> int:
        return len(self.durations)

    def stats_lines(self) -> List[str]:
        return [
            f"Slowest: {self.max_ns} ns",
            f"Fastest: {self.min_ns} ns",
            f"Average: {self.average_ns} ns",
        ]

    def print_stats(self, file: Optional[IO[str]] = None) -> None:
        for line in self.stats_lines():
            print(line, file=file)

    def log_stats(self, logger: Optional[logging.Logger] = None) -> None:
        if logger is None:
            from ..telemetry.logging import get_logger

            logger = get_logger("devtimer.bench", {"iterations": self.iterations})
        for line in self.stats_lines():
            logger.info(line)

    def to_dict(self) -> BenchmarkSummary:
        return BenchmarkSummary(
            iterations=self.iterations,
            min_ns=self.min_ns,
            max_ns=self.max_ns,
            average_ns=self.average_ns,
            durations_ns=list(self.durations),
        )

    def to_dataframe(self):
        """Per-iteration durations as a pandas DataFrame.

        Columns: [iteration, nanos]
        """
        import pandas as pd

        return pd.DataFrame(
            {"iteration": range(len(self.durations)), "nanos": list(self.durations)}
        )


def _check_iterations(iterations: int) -> int:
    if isinstance(iterations, bool):
        raise InvalidIterationCount("iterations must be an int, got bool")
    try:
        count = operator.index(iterations)
    except TypeError:
        raise InvalidIterationCount(
            f"iterations must be an int, got {type(iterations).__name__}"
        ) from None
    if count < 1:
        raise InvalidIterationCount(f"iterations must be positive, got {count}")
    return count


def _run(iterations: int, operation: Callable[..., Any], pass_index: bool) -> BenchmarkResult:
    count = _check_iterations(iterations)
    durations: List[int] = []
    for i in range(count):
        timer = DevTime(name=f"bench-{i}")
        # separate calls so the zero-argument path times only operation()
        if pass_index:
            timer.start()
            operation(i)
            timer.stop()
        else:
            timer.start()
            operation()
            timer.stop()
        durations.append(timer.time_in_nanos())
    return BenchmarkResult.from_durations(durations)


def run_benchmark(iterations: int, operation: Callable[[], Any]) -> BenchmarkResult:
    """Time ``operation()`` ``iterations`` times.

    Exceptions from ``operation`` propagate; nothing is returned for the
    run in that case.
    """
    return _run(iterations, operation, pass_index=False)


def run_benchmark_indexed(iterations: int, operation: Callable[[int], Any]) -> BenchmarkResult:
    """Like ``run_benchmark`` but passes the iteration index (0-based)."""
    return _run(iterations, operation, pass_index=True)
