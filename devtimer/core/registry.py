"""Tagged timer registry: many named timers in one structure.

Tags are unique and must be created explicitly; operating on a tag that was
never created raises ``UnknownTag``. Iteration walks a snapshot of the
entries taken when it begins. There is no internal locking: sharing a
registry across threads needs external synchronization.
"""
from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import IO, Dict, Iterator, List, Optional, Tuple

from ..config import DEFAULT_REPORT, ReportConfig
from .errors import DuplicateTag, UnknownTag
from .schemas import TimerEntry
from .timer import DevTime
from .units import TimeUnit


class TaggedTimers:
    def __init__(self) -> None:
        self._timers: Dict[str, DevTime] = {}

    def __len__(self) -> int:
        return len(self._timers)

    def __contains__(self, tag: object) -> bool:
        return tag in self._timers

    def __iter__(self) -> Iterator[Tuple[str, DevTime]]:
        return self.iterate()

    def __repr__(self) -> str:
        return f"TaggedTimers(tags={list(self._timers)!r})"

    def create(self, tag: str) -> DevTime:
        if tag in self._timers:
            raise DuplicateTag(f"timer tag already exists: {tag!r}")
        timer = DevTime(name=tag)
        self._timers[tag] = timer
        return timer

    def get(self, tag: str) -> DevTime:
        try:
            return self._timers[tag]
        except KeyError:
            raise UnknownTag(f"no timer with tag {tag!r}") from None

    def tags(self) -> List[str]:
        return list(self._timers)

    def start(self, tag: str) -> None:
        self.get(tag).start()

    def stop(self, tag: str) -> None:
        self.get(tag).stop()

    def elapsed_as(self, tag: str, unit: TimeUnit | str) -> int:
        return self.get(tag).elapsed_as(unit)

    @contextmanager
    def measure(self, tag: str) -> Iterator[DevTime]:
        """Start ``tag`` on entry and stop it on exit (also on error)."""
        timer = self.get(tag)
        timer.start()
        try:
            yield timer
        except BaseException:
            # keep the body's error even if it reset the timer
            timer.stop_checked()
            raise
        timer.stop()

    def iterate(self) -> Iterator[Tuple[str, DevTime]]:
        """Lazily yield (tag, timer) pairs from a snapshot of the registry."""
        snapshot = list(self._timers.items())
        for tag, timer in snapshot:
            yield tag, timer

    # ---- reporting ----
    def report_all(self, config: ReportConfig = DEFAULT_REPORT) -> List[str]:
        """One ``"<tag> - <nanos> ns"`` line per timer, in creation order.

        Incomplete timers are skipped, or rendered as ``"<tag> - unavailable"``
        when ``config.skip_incomplete`` is False.
        """
        lines: List[str] = []
        for tag, timer in self.iterate():
            if timer.is_complete:
                lines.append(f"{tag} - {timer.time_in_nanos()} {TimeUnit.NANOS.suffix}")
            elif not config.skip_incomplete:
                lines.append(f"{tag} - {config.unavailable}")
        return lines

    def print_all(self, file: Optional[IO[str]] = None, config: ReportConfig = DEFAULT_REPORT) -> None:
        for line in self.report_all(config):
            print(line, file=file)

    def log_all(self, logger: Optional[logging.Logger] = None, config: ReportConfig = DEFAULT_REPORT) -> None:
        if logger is None:
            from ..telemetry.logging import get_logger

            logger = get_logger("devtimer.registry")
        for line in self.report_all(config):
            logger.info(line)

    def entries(self) -> List[TimerEntry]:
        return [
            TimerEntry(tag=tag, nanos=timer.time_in_nanos() if timer.is_complete else None)
            for tag, timer in self.iterate()
        ]

    def to_dataframe(self):
        """Registry contents as a pandas DataFrame.

        Columns: [tag, nanos]; nanos is None for incomplete timers.
        """
        import pandas as pd

        return pd.DataFrame(self.entries(), columns=["tag", "nanos"])
