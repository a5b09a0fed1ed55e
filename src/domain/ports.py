"""
Port interfaces - Protocol definitions for the engine's collaborators.

This module defines the interfaces (ports) the form engine requires from
its environment: a timer service, a pseudo-random source, and a
presentation surface. Adapters implement these protocols.
"""

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .form import FormView


class FieldId(str, Enum):
    """Fields of the registration form that carry validation."""

    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirm_password"
    TERMS = "terms"


class AvailabilityStatus(str, Enum):
    """
    Email availability lifecycle.

    IDLE -> CHECKING (blur with non-empty email)
    CHECKING -> AVAILABLE | TAKEN (after simulated latency)

    TAKEN is a standing override on the email field until the next
    blur-triggered check or a full reset.
    """

    IDLE = "idle"
    CHECKING = "checking"
    AVAILABLE = "available"
    TAKEN = "taken"


class SubmissionStatus(str, Enum):
    """
    Submission state machine states.

    State Transitions:
    - IDLE -> SUBMITTING (submit while eligible)
    - SUBMITTING -> SUCCESS | ERROR (after simulated latency)
    - ERROR -> IDLE (retry, input preserved)
    - SUCCESS | ERROR | SUBMITTING -> IDLE (reset, input cleared)
    """

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class Panel(str, Enum):
    """Mutually exclusive visible region of the form page."""

    FORM = "form"
    SUCCESS = "success"
    ERROR = "error"


class TimerHandle(Protocol):
    """Handle returned by a scheduler for a pending callback."""

    def cancel(self) -> None:
        """Prevent the callback from running if it has not run yet."""
        ...


class Scheduler(Protocol):
    """Port interface for the timer service."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Run callback once after delay seconds.

        Args:
            delay: Seconds to wait (non-negative)
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the pending callback
        """
        ...


class RandomSource(Protocol):
    """
    Port interface for the pseudo-random source.

    random.Random satisfies this protocol structurally.
    """

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        ...


class Presenter(Protocol):
    """Port interface for the presentation surface."""

    def render(self, view: "FormView") -> None:
        """
        Display the current form view.

        Called by the orchestrator after every state change.

        Args:
            view: Read-only view state for the presentation layer
        """
        ...
