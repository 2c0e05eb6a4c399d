from __future__ import annotations

import argparse
import json

from devtimer import DevTime, TaggedTimers, run_benchmark
from devtimer.config import BenchConfig


def _start_stop() -> None:
    t = DevTime("overhead")
    t.start()
    t.stop()
    t.time_in_nanos()


def _registry_cycle(reg: TaggedTimers) -> None:
    reg.start("cycle")
    reg.stop("cycle")


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--repeat", type=int, default=BenchConfig.from_env().iterations)
    ap.add_argument("--stats", action="store_true", help="print min/max/avg instead of JSON")
    args = ap.parse_args()

    reg = TaggedTimers()
    reg.create("cycle")
    results = {
        "start_stop": run_benchmark(args.repeat, _start_stop),
        "registry_cycle": run_benchmark(args.repeat, lambda: _registry_cycle(reg)),
    }
    if args.stats:
        for name, res in results.items():
            print(name)
            res.print_stats()
        return
    out = {name: res.to_dict() for name, res in results.items()}
    print(json.dumps(out, indent=2))


if __name__ == "__main__":
    main()
