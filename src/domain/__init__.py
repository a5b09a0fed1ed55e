"""
Domain layer - Pure form logic with zero framework imports.

This package contains the registration form engine: field validators, the
password strength scorer, touch tracking, the simulated availability check,
the submission state machine, and the orchestrator that composes them. It
defines its own port interfaces for timers, randomness, and presentation.
"""

from .exceptions import FormError, InvalidTransition, SessionNotFound, UnknownField
from .form import FieldState, FormSnapshot, FormView
from .orchestrator import NEWSLETTER, FormOrchestrator
from .ports import (
    AvailabilityStatus,
    FieldId,
    Panel,
    Presenter,
    RandomSource,
    Scheduler,
    SubmissionStatus,
    TimerHandle,
)
from .strength import PasswordStrength, StrengthTier, score_password
from .tasks import DeferredTask, TaskOutcome, Timing
from .validators import Verdict, validate

__all__ = [
    "NEWSLETTER",
    "AvailabilityStatus",
    "DeferredTask",
    "FieldId",
    "FieldState",
    "FormError",
    "FormOrchestrator",
    "FormSnapshot",
    "FormView",
    "InvalidTransition",
    "Panel",
    "PasswordStrength",
    "Presenter",
    "RandomSource",
    "Scheduler",
    "SessionNotFound",
    "StrengthTier",
    "SubmissionStatus",
    "TaskOutcome",
    "TimerHandle",
    "Timing",
    "UnknownField",
    "Verdict",
    "score_password",
    "validate",
]
