"""
Submission controller - Simulated account creation state machine.

Submission State Machine
========================

States:
- IDLE: Form panel shown, submit allowed when the form is eligible
- SUBMITTING: Request in flight, submit disabled, loading indicator shown
- SUCCESS: Success panel shown
- ERROR: Error panel shown with a message from a fixed pool

Valid Transitions:
    IDLE -> SUBMITTING        (submit while eligible)
    SUBMITTING -> SUCCESS     (simulated request succeeded)
    SUBMITTING -> ERROR       (simulated request failed)
    ERROR -> IDLE             (retry, input preserved)
    any -> IDLE               (reset, input cleared by the orchestrator)

A reset while SUBMITTING supersedes the in-flight request; its result is
discarded when the timer fires.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import InvalidTransition
from .ports import Panel, RandomSource, Scheduler, SubmissionStatus
from .tasks import DeferredTask, Timing, draw_delay, draw_success

logger = logging.getLogger(__name__)

ERROR_MESSAGES = (
    "Network error. Please check your connection and try again.",
    "Server is temporarily unavailable. Please try again in a moment.",
    "Account creation failed. Please try again.",
    "Email verification service is down. Please try again later.",
    "Service maintenance in progress. Please try again later.",
)

SUBMIT_LABEL = "Create Account"
SUBMITTING_LABEL = "Creating Account..."

_ALLOWED = {
    SubmissionStatus.IDLE: {SubmissionStatus.SUBMITTING, SubmissionStatus.IDLE},
    SubmissionStatus.SUBMITTING: {
        SubmissionStatus.SUCCESS,
        SubmissionStatus.ERROR,
        SubmissionStatus.IDLE,
    },
    SubmissionStatus.SUCCESS: {SubmissionStatus.IDLE},
    SubmissionStatus.ERROR: {SubmissionStatus.IDLE},
}

_PANELS = {
    SubmissionStatus.IDLE: Panel.FORM,
    SubmissionStatus.SUBMITTING: Panel.FORM,
    SubmissionStatus.SUCCESS: Panel.SUCCESS,
    SubmissionStatus.ERROR: Panel.ERROR,
}


@dataclass(frozen=True)
class SubmissionState:
    status: SubmissionStatus = SubmissionStatus.IDLE
    error_message: str = ""

    @property
    def panel(self) -> Panel:
        return _PANELS[self.status]

    @property
    def submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING


IDLE_STATE = SubmissionState()


class SubmissionController:
    """
    Owns the submission state machine and its simulated request.

    Random draws per attempt, in order: delay at start, outcome at
    resolution, then the error message index on failure.
    """

    def __init__(self, scheduler: Scheduler, rng: RandomSource, timing: Timing) -> None:
        self._scheduler = scheduler
        self._rng = rng
        self._timing = timing
        self._state = IDLE_STATE
        self._attempt = 0
        self._current: DeferredTask[SubmissionState] | None = None

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def current(self) -> DeferredTask[SubmissionState] | None:
        return self._current

    def is_current(self, task: DeferredTask[SubmissionState]) -> bool:
        return self._current is not None and task.token == self._current.token

    def submit(
        self,
        eligible: bool,
        on_settled: Callable[[DeferredTask[SubmissionState]], None],
    ) -> DeferredTask[SubmissionState] | None:
        """
        Start a submission attempt if allowed.

        A submit while already SUBMITTING, or while the form is not
        eligible, is a no-op.

        Args:
            eligible: Whether the form currently passes submit-eligibility
            on_settled: Called with the task once it resolves

        Returns:
            The pending task, or None if nothing was started
        """
        if self._state.status is not SubmissionStatus.IDLE or not eligible:
            logger.debug("Submit ignored (status=%s, eligible=%s)", self._state.status.value, eligible)
            return None

        self._transition(SubmissionStatus.SUBMITTING)
        self._attempt += 1
        task: DeferredTask[SubmissionState] = DeferredTask(self._attempt, "submission")
        task.add_done_callback(on_settled)

        delay = draw_delay(
            self._rng,
            self._timing.submission_min_delay,
            self._timing.submission_max_delay,
        )
        task.bind(self._scheduler.call_later(delay, lambda: self._finish(task)))
        self._current = task
        logger.info("Submission #%d started (%.2fs)", self._attempt, delay)
        return task

    def retry(self) -> None:
        """
        Return from ERROR to IDLE, keeping the form input.

        Raises:
            InvalidTransition: If the controller is not in ERROR
        """
        if self._state.status is not SubmissionStatus.ERROR:
            raise InvalidTransition(self._state.status.value, "retry")
        self._transition(SubmissionStatus.IDLE)

    def reset(self) -> None:
        """Return to IDLE from any state, discarding a request in flight."""
        if self._current is not None:
            self._current.supersede()
            self._current = None
        self._transition(SubmissionStatus.IDLE)

    def _finish(self, task: DeferredTask[SubmissionState]) -> None:
        if not task.pending or not self.is_current(task):
            return
        if draw_success(self._rng, self._timing.submission_success_rate):
            self._transition(SubmissionStatus.SUCCESS)
        else:
            index = int(self._rng.random() * len(ERROR_MESSAGES))
            self._transition(SubmissionStatus.ERROR, ERROR_MESSAGES[index])
        logger.info("Submission #%d finished: %s", task.token, self._state.status.value)
        task.resolve(self._state)

    def _transition(self, target: SubmissionStatus, error_message: str = "") -> None:
        if target not in _ALLOWED[self._state.status]:
            raise InvalidTransition(self._state.status.value, target.value)
        self._state = SubmissionState(status=target, error_message=error_message)
