"""Wall-clock stopwatch with second/microsecond time values."""

from __future__ import annotations

import time
from dataclasses import dataclass

_USEC_PER_SEC = 1_000_000
_FORMAT_LIMIT = 19


@dataclass(frozen=True, order=True)
class TimeVal:
    """A point or span of time as whole seconds plus microseconds."""

    sec: int = 0
    usec: int = 0

    @classmethod
    def now(cls) -> "TimeVal":
        ns = time.time_ns()
        return cls(ns // 1_000_000_000, (ns % 1_000_000_000) // 1000)

    def __sub__(self, other: "TimeVal") -> "TimeVal":
        return subtract(other, self)

    def __str__(self) -> str:
        return format_timeval(self)


def subtract(subtrahend: TimeVal, minuend: TimeVal) -> TimeVal:
    """Return minuend - subtrahend with the microseconds normalised."""
    sec = minuend.sec - subtrahend.sec
    usec = minuend.usec - subtrahend.usec
    if usec < 0:
        sec -= 1
        usec += _USEC_PER_SEC
    if usec >= _USEC_PER_SEC:
        sec += 1
        usec -= _USEC_PER_SEC
    return TimeVal(sec, usec)


def format_timeval(t: TimeVal) -> str:
    """Render as 'seconds.microseconds' with six fractional digits."""
    return f"{t.sec}.{t.usec:06d}"[:_FORMAT_LIMIT]


class Stopwatch:
    """Measures elapsed wall-clock time since the last start."""

    def __init__(self) -> None:
        self.time_start = TimeVal()

    def start(self) -> None:
        self.time_start = TimeVal.now()

    def get_and_restart(self) -> TimeVal:
        """Elapsed time since start; the stopwatch restarts from now."""
        now = TimeVal.now()
        elapsed = subtract(self.time_start, now)
        self.time_start = now
        return elapsed

    def get_and_continue(self) -> TimeVal:
        """Elapsed time since start, leaving the stopwatch running."""
        return subtract(self.time_start, TimeVal.now())