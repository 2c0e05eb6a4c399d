"""Common exceptions for devtimer library."""
from __future__ import annotations


class DevtimerError(Exception):
    pass


class NotStarted(DevtimerError):
    """``stop()`` was called on a timer that was never started."""


class IncompleteMeasurement(DevtimerError):
    """A duration was queried before a start/stop pair exists."""


class UnknownTag(DevtimerError):
    pass


class DuplicateTag(DevtimerError):
    pass


class InvalidIterationCount(DevtimerError):
    pass
