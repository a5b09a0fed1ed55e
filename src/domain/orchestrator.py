"""
Form orchestrator - Turns input events into form state.

The orchestrator is the single writer of the FormSnapshot. Each input
event updates touch state, re-runs the validators, recomputes
submit-eligibility, and pushes a fresh FormView to the presenter. Timer
resolutions from the availability checker and the submission controller
are applied only while their task is still current.
"""

import logging
from dataclasses import dataclass, field, replace

from .availability import AvailabilityChecker
from .exceptions import UnknownField
from .form import FormSnapshot, FormView
from .ports import AvailabilityStatus, FieldId, Presenter, RandomSource, Scheduler, SubmissionStatus
from .strength import score_password
from .submission import SubmissionController, SubmissionState
from .tasks import DeferredTask, Timing

logger = logging.getLogger(__name__)

NEWSLETTER = "newsletter"

_TEXT_FIELDS = frozenset(
    {FieldId.NAME, FieldId.EMAIL, FieldId.PASSWORD, FieldId.CONFIRM_PASSWORD}
)


def _field_id(name: FieldId | str) -> FieldId:
    try:
        return FieldId(name)
    except ValueError:
        raise UnknownField(str(name)) from None


@dataclass
class FormOrchestrator:
    """
    Owns one form session.

    Construct one per session; call reset() to return to the initial state
    or close() to discard pending timers before dropping the instance.
    """

    scheduler: Scheduler
    rng: RandomSource
    presenter: Presenter
    timing: Timing = field(default_factory=Timing)

    def __post_init__(self) -> None:
        self._availability = AvailabilityChecker(self.scheduler, self.rng, self.timing)
        self._submission = SubmissionController(self.scheduler, self.rng, self.timing)
        self._snapshot = FormSnapshot.initial()

    @property
    def snapshot(self) -> FormSnapshot:
        return self._snapshot

    @property
    def is_submittable(self) -> bool:
        return self._snapshot.is_submittable

    def view(self) -> FormView:
        return FormView.from_snapshot(self._snapshot)

    # Input events

    def change_value(self, name: FieldId | str, value: str) -> None:
        """
        Handle a keystroke or paste in a text field.

        Touches the field. Password edits rescore strength and re-validate
        the confirmation; email edits supersede any availability check in
        flight and clear an "available" result for the previous address.
        A "taken" result stands until the next blur.

        Raises:
            UnknownField: If name is not a text field
        """
        field_id = _field_id(name)
        if field_id not in _TEXT_FIELDS:
            raise UnknownField(field_id.value)
        if not self._accepting_input("change_value"):
            return

        changes: dict[str, object] = {}
        availability = None
        if field_id is FieldId.PASSWORD:
            changes["strength"] = score_password(value)
        if field_id is FieldId.EMAIL and self._snapshot.availability in (
            AvailabilityStatus.CHECKING,
            AvailabilityStatus.AVAILABLE,
        ):
            self._availability.cancel()
            availability = AvailabilityStatus.IDLE

        self._update(
            self._snapshot.evolve(
                values={field_id: value},
                touch=self._snapshot.touch.touch(field_id),
                availability=availability,
                **changes,
            )
        )

    def blur(self, name: FieldId | str) -> None:
        """
        Handle focus leaving a field.

        Blurring a non-empty email starts an availability check; blurring
        an empty one clears any earlier availability result. The newsletter
        checkbox is not tracked, so blurring it changes nothing.
        """
        if name == NEWSLETTER:
            return
        field_id = _field_id(name)
        if not self._accepting_input("blur"):
            return

        availability = None
        if field_id is FieldId.EMAIL:
            email = str(self._snapshot[FieldId.EMAIL].value)
            if email:
                self._availability.check(email, self._on_availability)
                availability = AvailabilityStatus.CHECKING
            else:
                self._availability.cancel()
                availability = AvailabilityStatus.IDLE

        self._update(
            self._snapshot.evolve(
                touch=self._snapshot.touch.touch(field_id),
                availability=availability,
            )
        )

    def toggle_checkbox(self, name: FieldId | str, checked: bool) -> None:
        """
        Handle the terms or newsletter checkbox changing.

        Raises:
            UnknownField: If name is not a checkbox
        """
        if name == NEWSLETTER:
            if self._accepting_input("toggle_checkbox"):
                self._update(replace(self._snapshot, newsletter=checked))
            return
        field_id = _field_id(name)
        if field_id is not FieldId.TERMS:
            raise UnknownField(field_id.value)
        if not self._accepting_input("toggle_checkbox"):
            return
        self._update(
            self._snapshot.evolve(
                values={FieldId.TERMS: checked},
                touch=self._snapshot.touch.touch(FieldId.TERMS),
            )
        )

    def submit(self) -> bool:
        """
        Handle the submit button.

        Returns:
            True if a submission attempt started
        """
        task = self._submission.submit(self._snapshot.is_submittable, self._on_submission)
        if task is None:
            return False
        self._sync_submission()
        return True

    def retry(self) -> None:
        """Leave the error panel and return to the filled-in form."""
        if self._submission.state.status is not SubmissionStatus.ERROR:
            logger.debug("Retry ignored (status=%s)", self._submission.state.status.value)
            return
        self._submission.retry()
        self._sync_submission()

    def reset(self) -> None:
        """Discard all input and pending work and show an empty form."""
        self._availability.cancel()
        self._submission.reset()
        self._update(FormSnapshot.initial())

    def close(self) -> None:
        """Supersede pending timers; the instance must not be used afterwards."""
        self._availability.cancel()
        self._submission.reset()

    # Timer resolutions

    def _on_availability(self, task: DeferredTask[AvailabilityStatus]) -> None:
        if not self._availability.is_current(task) or task.value is None:
            logger.debug("Discarding stale availability result %r", task)
            return
        self._update(self._snapshot.evolve(availability=task.value))

    def _on_submission(self, task: DeferredTask[SubmissionState]) -> None:
        if not self._submission.is_current(task):
            logger.debug("Discarding stale submission result %r", task)
            return
        self._sync_submission()

    # Helpers

    def _accepting_input(self, event: str) -> bool:
        status = self._submission.state.status
        if status is SubmissionStatus.IDLE:
            return True
        logger.debug("Ignoring %s while %s", event, status.value)
        return False

    def _sync_submission(self) -> None:
        self._update(replace(self._snapshot, submission=self._submission.state))

    def _update(self, snapshot: FormSnapshot) -> None:
        self._snapshot = snapshot
        self.presenter.render(self.view())
