"""Time a few phases of a toy workload with a tagged registry."""
from __future__ import annotations

import time

from devtimer import TaggedTimers, run_benchmark_indexed


def main() -> None:
    reg = TaggedTimers()
    for tag in ("prepare", "compute", "never-run"):
        reg.create(tag)

    with reg.measure("prepare"):
        data = list(range(200_000))
    with reg.measure("compute"):
        total = sum(x * x for x in data)
    _ = total

    reg.print_all()  # "never-run" is skipped: it has no measurement

    res = run_benchmark_indexed(5, lambda i: time.sleep(0.001 * (i + 1)))
    res.print_stats()


if __name__ == "__main__":
    main()
