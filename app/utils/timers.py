# timers.py

"""
Fire-once, cancellable delayed callbacks driven by an injectable clock.

Streamlit has no timer callbacks of its own: the flashcard page asks the
scheduler how long until the next deadline, sleeps, then calls run_due()
and reruns. Tests inject a fake clock and step it forward instead.
"""

from __future__ import annotations

import itertools
import time
from typing import Callable

from utils.logger import logger


def monotonic_ms() -> float:
    """Default clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000


class ScheduledCall:
    """
    Handle for a callback registered with Scheduler.call_later().
    """

    def __init__(self, deadline: float, seq: int, callback: Callable[[], None]):
        self.deadline = deadline
        self.seq = seq
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        """Prevent the callback from firing. No-op once it has fired."""
        self.cancelled = True


class Scheduler:
    """
    Holds pending delayed callbacks and fires them when their deadline
    has passed on the injected clock.
    """

    def __init__(self, clock: Callable[[], float] | None = None):
        self._clock = clock or monotonic_ms
        self._calls: list[ScheduledCall] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._clock()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledCall:
        """
        Schedule callback to run once, delay_ms after the current clock time.
        """
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}")

        call = ScheduledCall(self.now() + delay_ms, next(self._seq), callback)
        self._calls.append(call)
        logger.debug("Scheduled callback in %sms (deadline %.1f)", delay_ms, call.deadline)
        return call

    def pending(self) -> int:
        """Number of callbacks still waiting to fire."""
        self._calls = [c for c in self._calls if c.active]
        return len(self._calls)

    def ms_until_next(self) -> float | None:
        """
        Milliseconds until the earliest pending deadline (0 if already due),
        or None when nothing is pending.
        """
        if not self.pending():
            return None
        earliest = min(c.deadline for c in self._calls)
        return max(earliest - self.now(), 0.0)

    def run_due(self) -> int:
        """
        Fire every pending callback whose deadline has passed, in deadline
        order. Returns the number of callbacks fired.
        """
        now = self.now()
        due = sorted(
            (c for c in self._calls if c.active and c.deadline <= now),
            key=lambda c: (c.deadline, c.seq),
        )

        fired = 0
        for call in due:
            # An earlier callback may have cancelled this one
            if not call.active:
                continue
            call.fired = True
            call.callback()
            fired += 1

        self._calls = [c for c in self._calls if c.active]
        return fired

    def cancel_all(self) -> None:
        """Cancel every pending callback."""
        for call in self._calls:
            call.cancel()
        self._calls.clear()
