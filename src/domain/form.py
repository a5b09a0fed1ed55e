"""
Form data model - Field states, the form snapshot, and the rendered view.

FormSnapshot is an immutable value. The orchestrator replaces it on every
event; nothing else writes form state.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from .availability import STATUS_TEXT
from .ports import AvailabilityStatus, FieldId, Panel, SubmissionStatus
from .strength import EMPTY_STRENGTH, PasswordStrength, StrengthTier
from .submission import IDLE_STATE, SUBMIT_LABEL, SUBMITTING_LABEL, SubmissionState
from .touch import TouchTracker
from .validators import EMAIL_TAKEN, Verdict, validate

FieldValue = str | bool

INITIAL_VALUES: Mapping[FieldId, FieldValue] = MappingProxyType(
    {
        FieldId.NAME: "",
        FieldId.EMAIL: "",
        FieldId.PASSWORD: "",
        FieldId.CONFIRM_PASSWORD: "",
        FieldId.TERMS: False,
    }
)


@dataclass(frozen=True)
class FieldState:
    """
    Per-field state.

    Invariant: error_message is empty while the field is untouched.
    """

    value: FieldValue
    touched: bool = False
    valid: bool = False
    error_message: str = ""


def evaluate_fields(
    values: Mapping[FieldId, FieldValue],
    touch: TouchTracker,
    availability: AvailabilityStatus,
) -> dict[FieldId, FieldState]:
    """
    Run every validator against the current values.

    A TAKEN availability result overrides the email verdict.
    """
    password = str(values[FieldId.PASSWORD])
    states: dict[FieldId, FieldState] = {}
    for field_id in FieldId:
        verdict = validate(field_id, values[field_id], password=password)
        if field_id is FieldId.EMAIL and availability is AvailabilityStatus.TAKEN:
            verdict = Verdict(False, EMAIL_TAKEN)
        states[field_id] = FieldState(
            value=values[field_id],
            touched=touch.is_touched(field_id),
            valid=verdict.valid,
            error_message=touch.visible_message(field_id, verdict),
        )
    return states


@dataclass(frozen=True)
class FormSnapshot:
    """Complete form state at one point in time."""

    fields: Mapping[FieldId, FieldState]
    touch: TouchTracker = field(default_factory=TouchTracker)
    newsletter: bool = False
    strength: PasswordStrength = EMPTY_STRENGTH
    availability: AvailabilityStatus = AvailabilityStatus.IDLE
    submission: SubmissionState = IDLE_STATE

    @classmethod
    def initial(cls) -> "FormSnapshot":
        touch = TouchTracker()
        return cls(
            fields=MappingProxyType(
                evaluate_fields(INITIAL_VALUES, touch, AvailabilityStatus.IDLE)
            ),
            touch=touch,
        )

    def __getitem__(self, field_id: FieldId) -> FieldState:
        return self.fields[field_id]

    def values(self) -> dict[FieldId, FieldValue]:
        return {field_id: state.value for field_id, state in self.fields.items()}

    @property
    def is_submittable(self) -> bool:
        """
        Every required field valid, terms checked, and no attempt in flight.

        Empty fields count as invalid even when untouched. The newsletter
        toggle never participates.
        """
        return (
            all(state.valid for state in self.fields.values())
            and self.fields[FieldId.TERMS].value is True
            and self.submission.status is SubmissionStatus.IDLE
        )

    def evolve(
        self,
        values: Mapping[FieldId, FieldValue] | None = None,
        touch: TouchTracker | None = None,
        availability: AvailabilityStatus | None = None,
        **changes: Any,
    ) -> "FormSnapshot":
        """Copy with changes applied and field states re-evaluated."""
        merged = self.values()
        if values:
            merged.update(values)
        touch = touch if touch is not None else self.touch
        availability = availability if availability is not None else self.availability
        fields = evaluate_fields(merged, touch, availability)
        return replace(
            self,
            fields=MappingProxyType(fields),
            touch=touch,
            availability=availability,
            **changes,
        )


@dataclass(frozen=True)
class FieldView:
    valid: bool
    touched: bool
    message: str


@dataclass(frozen=True)
class FormView:
    """Output record for the presentation surface."""

    fields: Mapping[FieldId, FieldView]
    values: Mapping[FieldId, FieldValue]
    newsletter: bool
    strength_score: int
    strength_tier: StrengthTier
    strength_label: str
    availability: AvailabilityStatus
    availability_text: str
    submit_enabled: bool
    submit_label: str
    loading: bool
    panel: Panel
    error_message: str

    @classmethod
    def from_snapshot(cls, snapshot: FormSnapshot) -> "FormView":
        submitting = snapshot.submission.submitting
        return cls(
            fields=MappingProxyType(
                {
                    field_id: FieldView(
                        valid=state.valid,
                        touched=state.touched,
                        message=state.error_message,
                    )
                    for field_id, state in snapshot.fields.items()
                }
            ),
            values=MappingProxyType(snapshot.values()),
            newsletter=snapshot.newsletter,
            strength_score=snapshot.strength.score,
            strength_tier=snapshot.strength.tier,
            strength_label=snapshot.strength.label,
            availability=snapshot.availability,
            availability_text=STATUS_TEXT[snapshot.availability],
            submit_enabled=snapshot.is_submittable,
            submit_label=SUBMITTING_LABEL if submitting else SUBMIT_LABEL,
            loading=submitting,
            panel=snapshot.submission.panel,
            error_message=snapshot.submission.error_message,
        )
