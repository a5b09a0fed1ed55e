"""
Availability checker - Simulated email uniqueness lookup.

A check moves the status to CHECKING immediately, then after a random
delay resolves to AVAILABLE or TAKEN. Only one check is current at a time:
starting a new check supersedes the previous one, so the result of an
older lookup can never overwrite a newer one.
"""

import logging
from collections.abc import Callable

from .ports import AvailabilityStatus, RandomSource, Scheduler
from .tasks import DeferredTask, Timing, draw_delay, draw_success

logger = logging.getLogger(__name__)

STATUS_TEXT = {
    AvailabilityStatus.IDLE: "",
    AvailabilityStatus.CHECKING: "⏳ Checking availability...",
    AvailabilityStatus.AVAILABLE: "✓ Email available",
    AvailabilityStatus.TAKEN: "⚠ Email already taken",
}


class AvailabilityChecker:
    """
    Runs simulated availability checks for the email field.

    Random draws per check, in order: delay at start, outcome at
    resolution.
    """

    def __init__(self, scheduler: Scheduler, rng: RandomSource, timing: Timing) -> None:
        self._scheduler = scheduler
        self._rng = rng
        self._timing = timing
        self._generation = 0
        self._current: DeferredTask[AvailabilityStatus] | None = None

    @property
    def current(self) -> DeferredTask[AvailabilityStatus] | None:
        return self._current

    def is_current(self, task: DeferredTask[AvailabilityStatus]) -> bool:
        return self._current is not None and task.token == self._current.token

    def check(
        self,
        email: str,
        on_result: Callable[[DeferredTask[AvailabilityStatus]], None],
    ) -> DeferredTask[AvailabilityStatus]:
        """
        Start a lookup for email, superseding any check in flight.

        Args:
            email: Non-empty email value to look up
            on_result: Called with the task once it resolves

        Returns:
            The pending task
        """
        self.cancel()
        self._generation += 1
        task: DeferredTask[AvailabilityStatus] = DeferredTask(self._generation, "availability")
        task.add_done_callback(on_result)

        delay = draw_delay(
            self._rng,
            self._timing.availability_min_delay,
            self._timing.availability_max_delay,
        )
        task.bind(self._scheduler.call_later(delay, lambda: self._finish(task, email)))
        self._current = task
        logger.debug("Checking availability of %s (%.2fs)", email, delay)
        return task

    def cancel(self) -> None:
        """Supersede the check in flight, if any."""
        if self._current is not None:
            self._current.supersede()
            self._current = None

    def _finish(self, task: DeferredTask[AvailabilityStatus], email: str) -> None:
        if not task.pending:
            return
        available = draw_success(self._rng, self._timing.availability_success_rate)
        status = AvailabilityStatus.AVAILABLE if available else AvailabilityStatus.TAKEN
        logger.info("Availability of %s: %s", email, status.value)
        task.resolve(status)
