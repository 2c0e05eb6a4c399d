from .bench import BenchmarkResult, run_benchmark, run_benchmark_indexed
from .errors import (
    DevtimerError,
    DuplicateTag,
    IncompleteMeasurement,
    InvalidIterationCount,
    NotStarted,
    UnknownTag,
)
from .registry import TaggedTimers
from .timer import DevTime
from .units import TimeUnit
