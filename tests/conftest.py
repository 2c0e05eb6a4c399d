from __future__ import annotations

import pytest

import devtimer.core.timer as timer_mod


class FakeClock:
    def __init__(self, start: int = 1_000) -> None:
        self.now = start

    def advance(self, nanos: int) -> None:
        self.now += nanos

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(timer_mod, "_now", fake)
    return fake
