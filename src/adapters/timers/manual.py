"""
Manual scheduler adapter - Implements Scheduler protocol on a virtual clock.

Time only moves when advance() is called, which makes timer-driven flows
deterministic. Callbacks due at the same instant run in scheduling order.
"""

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ManualTimer:
    """Pending callback on the virtual clock."""

    due: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """
    Implements Scheduler protocol with an explicitly advanced clock.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[ManualTimer] = []
        self._sequence = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        timer = ManualTimer(self.now + delay, next(self._sequence), callback)
        heapq.heappush(self._queue, timer)
        return timer

    @property
    def pending(self) -> int:
        """Number of timers that are scheduled and not cancelled."""
        return sum(1 for timer in self._queue if not timer.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward, running every callback that falls due.

        Callbacks scheduled by a running callback also run if they fall
        due within the window.

        Returns:
            Number of callbacks run
        """
        deadline = self.now + seconds
        ran = 0
        while self._queue and self._queue[0].due <= deadline:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = timer.due
            timer.callback()
            ran += 1
        self.now = deadline
        logger.debug("Advanced clock to %.3fs (%d callbacks)", self.now, ran)
        return ran

    def run_all(self) -> int:
        """Run every pending callback, advancing the clock as needed."""
        ran = 0
        while self.pending:
            ran += self.advance(max(0.0, self._queue[0].due - self.now))
        return ran
