from __future__ import annotations

from datetime import timedelta
import threading

import pytest

from devtimer import DevTime, IncompleteMeasurement, NotStarted, TimeUnit


def test_query_before_start_and_stop_fails():
    t = DevTime()
    for unit in TimeUnit:
        with pytest.raises(IncompleteMeasurement):
            t.elapsed_as(unit)
    t.start()
    # still running: no stop yet
    with pytest.raises(IncompleteMeasurement):
        t.time_in_nanos()


def test_stop_without_start_raises():
    t = DevTime("lonely")
    with pytest.raises(NotStarted, match="lonely"):
        t.stop()
    assert t.end_instant is None


def test_unit_conversions_floor_same_nanos(clock):
    t = DevTime()
    t.start()
    clock.advance(3_456_789_123)
    t.stop()
    assert t.time_in_nanos() == 3_456_789_123
    assert t.time_in_micros() == 3_456_789
    assert t.time_in_millis() == 3_456
    assert t.time_in_secs() == 3
    nanos = t.elapsed_as("ns")
    for unit in TimeUnit:
        assert t.elapsed_as(unit) == nanos // unit.per_unit


def test_real_clock_consistency():
    t = DevTime()
    t.start()
    sum(range(1000))
    t.stop()
    nanos = t.time_in_nanos()
    assert nanos >= 0
    assert nanos // 1000 == t.time_in_micros()
    assert nanos // 1_000_000 == t.time_in_millis()
    assert nanos // 1_000_000_000 == t.time_in_secs()


def test_restart_resets_measurement(clock):
    t = DevTime()
    t.start()
    clock.advance(500)
    t.stop()
    assert t.time_in_nanos() == 500
    t.start()
    assert t.end_instant is None
    with pytest.raises(IncompleteMeasurement):
        t.time_in_nanos()
    clock.advance(20)
    t.stop()
    assert t.time_in_nanos() == 20


def test_reset_then_stop_raises(clock):
    t = DevTime()
    t.start()
    t.stop()
    t.reset()
    with pytest.raises(NotStarted):
        t.stop()
    with pytest.raises(IncompleteMeasurement):
        t.time_in_nanos()


def test_double_stop_measures_from_original_start(clock):
    t = DevTime()
    t.start()
    clock.advance(100)
    t.stop()
    clock.advance(50)
    t.stop()
    assert t.time_in_nanos() == 150


def test_checked_variants(clock):
    t = DevTime()
    assert t.stop_checked() is False
    assert t.start_checked() is True
    assert t.start_checked() is False
    clock.advance(7)
    assert t.stop_checked() is True
    clock.advance(7)
    assert t.stop_checked() is False
    assert t.time_in_nanos() == 7


def test_running_and_complete_flags():
    t = DevTime()
    assert not t.is_running and not t.is_complete
    t.start()
    assert t.is_running and not t.is_complete
    t.stop()
    assert not t.is_running and t.is_complete


def test_context_manager_stops_on_error(clock):
    t = DevTime()
    with pytest.raises(RuntimeError):
        with t:
            clock.advance(42)
            raise RuntimeError("boom")
    assert t.time_in_nanos() == 42


def test_start_after_sleeps_before_start(monkeypatch, clock):
    import devtimer.core.timer as timer_mod

    slept = []

    def fake_sleep(s):
        slept.append(s)
        clock.advance(round(s * 1_000_000_000))

    monkeypatch.setattr(timer_mod.time, "sleep", fake_sleep)
    t = DevTime()
    before = clock.now
    t.start_after(timedelta(milliseconds=2))
    assert slept == [0.002]
    assert t.start_instant == before + 2_000_000
    t.start_after(0)
    assert slept[-1] == 0.0
    with pytest.raises(ValueError):
        t.start_after(-1)


def test_default_name_is_thread_name():
    names = []
    th = threading.Thread(target=lambda: names.append(DevTime().name), name="worker-7")
    th.start()
    th.join()
    assert names == ["worker-7"]
    assert DevTime("x").name == "x"


def test_unit_parse():
    assert TimeUnit.parse("MS") is TimeUnit.MILLIS
    assert TimeUnit.parse(" micros ") is TimeUnit.MICROS
    assert TimeUnit.parse(TimeUnit.SECONDS) is TimeUnit.SECONDS
    assert TimeUnit.NANOS.suffix == "ns"
    with pytest.raises(ValueError):
        TimeUnit.parse("fortnights")


def test_context_manager_keeps_body_error_after_reset():
    t = DevTime()
    with pytest.raises(ValueError, match="body"):
        with t:
            t.reset()
            raise ValueError("body")
    assert t.start_instant is None and t.end_instant is None


def test_context_manager_reset_without_error_raises_not_started():
    t = DevTime()
    with pytest.raises(NotStarted):
        with t:
            t.reset()
