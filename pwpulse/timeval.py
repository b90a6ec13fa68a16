"""Second/microsecond time values and clocks."""

from __future__ import annotations

import time
from dataclasses import dataclass

__all__ = [
    "USEC_PER_SEC",
    "USEC_INVALID",
    "TIME_T_MAX",
    "Timeval",
    "gettimeofday",
    "rtclock_now",
    "timeval_diff",
    "timeval_age",
]

USEC_PER_SEC = 1_000_000
USEC_INVALID = 2**64 - 1
TIME_T_MAX = 2**63 - 1


@dataclass(frozen=True, order=True)
class Timeval:
    """A point in time as whole seconds plus microseconds."""

    sec: int = 0
    usec: int = 0

    @classmethod
    def from_usec(cls, usec: int) -> "Timeval":
        """Split a microsecond count; USEC_INVALID maps to the largest value."""
        if usec == USEC_INVALID:
            return cls(TIME_T_MAX, USEC_PER_SEC - 1)
        sec, rest = divmod(usec, USEC_PER_SEC)
        return cls(sec, rest)

    def to_usec(self) -> int:
        """Total microseconds."""
        return self.sec * USEC_PER_SEC + self.usec

    def add(self, usec: int) -> "Timeval":
        """Return this time plus ``usec``, saturating at the largest value."""
        saturated = Timeval(TIME_T_MAX, USEC_PER_SEC - 1)
        secs = usec // USEC_PER_SEC
        if self.sec > TIME_T_MAX - secs:
            return saturated
        sec = self.sec + secs
        micro = self.usec + (usec - secs * USEC_PER_SEC)
        while micro >= USEC_PER_SEC:
            if sec >= TIME_T_MAX:
                return saturated
            sec += 1
            micro -= USEC_PER_SEC
        return Timeval(sec, micro)

    def sub(self, usec: int) -> "Timeval":
        """Return this time minus ``usec``, saturating at zero."""
        secs = usec // USEC_PER_SEC
        if self.sec < secs:
            return Timeval(0, 0)
        sec = self.sec - secs
        rest = usec - secs * USEC_PER_SEC
        if self.usec >= rest:
            return Timeval(sec, self.usec - rest)
        if sec <= 0:
            return Timeval(0, 0)
        return Timeval(sec - 1, self.usec + USEC_PER_SEC - rest)


def gettimeofday() -> Timeval:
    """Current wall-clock time."""
    return Timeval.from_usec(time.time_ns() // 1000)


def rtclock_now() -> int:
    """Monotonic clock reading in microseconds."""
    return time.monotonic_ns() // 1000


def timeval_diff(a: Timeval, b: Timeval) -> int:
    """Absolute difference between two times in microseconds."""
    if a < b:
        a, b = b, a
    return (a.sec - b.sec) * USEC_PER_SEC + (a.usec - b.usec)


def timeval_age(tv: Timeval) -> int:
    """Microseconds elapsed between ``tv`` and now."""
    return timeval_diff(gettimeofday(), tv)