"""devtimer: elapsed-time measurement over the monotonic nanosecond clock.

Exposes a single start/stop timer, a registry of tagged timers and a
repeated-benchmark runner.
"""

from .core import (
    BenchmarkResult,
    DevTime,
    DevtimerError,
    DuplicateTag,
    IncompleteMeasurement,
    InvalidIterationCount,
    NotStarted,
    TaggedTimers,
    TimeUnit,
    UnknownTag,
    run_benchmark,
    run_benchmark_indexed,
)

__all__ = [
    "BenchmarkResult",
    "DevTime",
    "DevtimerError",
    "DuplicateTag",
    "IncompleteMeasurement",
    "InvalidIterationCount",
    "NotStarted",
    "TaggedTimers",
    "TimeUnit",
    "UnknownTag",
    "run_benchmark",
    "run_benchmark_indexed",
]

__version__ = "0.1.0"
