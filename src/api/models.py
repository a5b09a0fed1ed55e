"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from src.domain.form import FormView


class EventType(str, Enum):
    """Input events accepted from the presentation layer."""

    VALUE_CHANGED = "value_changed"
    BLUR = "blur"
    CHECKBOX_TOGGLED = "checkbox_toggled"
    SUBMIT = "submit"
    RETRY = "retry"
    RESET = "reset"


class EventRequest(BaseModel):
    """Request model for a single form input event."""

    type: EventType
    field: str | None = Field(
        default=None,
        description="Target field (name, email, password, confirm_password, terms, newsletter)",
    )
    value: str | None = Field(default=None, max_length=1024, description="New text value")
    checked: bool | None = Field(default=None, description="New checkbox state")

    @model_validator(mode="after")
    def check_payload(self) -> "EventRequest":
        if self.type in (EventType.VALUE_CHANGED, EventType.BLUR, EventType.CHECKBOX_TOGGLED):
            if not self.field:
                raise ValueError(f"'field' is required for {self.type.value} events")
        if self.type == EventType.VALUE_CHANGED and self.value is None:
            raise ValueError("'value' is required for value_changed events")
        if self.type == EventType.CHECKBOX_TOGGLED and self.checked is None:
            raise ValueError("'checked' is required for checkbox_toggled events")
        return self


class FieldViewModel(BaseModel):
    valid: bool
    touched: bool
    message: str


class StrengthModel(BaseModel):
    score: int = Field(..., ge=0, le=5)
    tier: str
    label: str


class AvailabilityModel(BaseModel):
    status: str
    text: str


class SubmitButtonModel(BaseModel):
    enabled: bool
    label: str
    loading: bool


class FormViewModel(BaseModel):
    """Everything the presentation layer needs to draw the form."""

    panel: str
    fields: dict[str, FieldViewModel]
    values: dict[str, str | bool]
    newsletter: bool
    strength: StrengthModel
    availability: AvailabilityModel
    submit: SubmitButtonModel
    error_message: str

    @classmethod
    def from_view(cls, view: FormView) -> "FormViewModel":
        return cls(
            panel=view.panel.value,
            fields={
                field_id.value: FieldViewModel(
                    valid=field_view.valid,
                    touched=field_view.touched,
                    message=field_view.message,
                )
                for field_id, field_view in view.fields.items()
            },
            values={field_id.value: value for field_id, value in view.values.items()},
            newsletter=view.newsletter,
            strength=StrengthModel(
                score=view.strength_score,
                tier=view.strength_tier.value,
                label=view.strength_label,
            ),
            availability=AvailabilityModel(
                status=view.availability.value,
                text=view.availability_text,
            ),
            submit=SubmitButtonModel(
                enabled=view.submit_enabled,
                label=view.submit_label,
                loading=view.loading,
            ),
            error_message=view.error_message,
        )


class SessionResponse(BaseModel):
    """Response model carrying a session id and its current view."""

    session_id: str
    view: FormViewModel


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
