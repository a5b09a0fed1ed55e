"""
Domain exceptions - Semantic error types for the form engine.

Validation failures and simulated submission failures are form state,
not exceptions. These types signal misuse of the engine's API.
"""


class FormError(Exception):
    """Base class for form engine errors."""

    pass


class InvalidTransition(FormError):
    """Submission state change not allowed from the current state."""

    def __init__(self, current: str, target: str) -> None:
        super().__init__(f"Cannot move from {current} to {target}")
        self.current = current
        self.target = target


class UnknownField(FormError):
    """Event targets a field that does not accept it."""

    pass


class SessionNotFound(FormError):
    """No form session is registered under the given id."""

    pass
