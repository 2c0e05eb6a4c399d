"""Shared schema types for exported timing summaries."""
from __future__ import annotations

from typing import List, Optional, TypedDict


class BenchmarkSummary(TypedDict):
    iterations: int
    min_ns: int
    max_ns: int
    average_ns: int
    durations_ns: List[int]


class TimerEntry(TypedDict):
    tag: str
    nanos: Optional[int]
