"""
Test helpers shared across unit and integration tests.
"""

from collections.abc import Iterable

from src.domain.orchestrator import FormOrchestrator
from src.domain.ports import FieldId

VALID_PASSWORD = "SecurePass123!"


class ScriptedRandom:
    """
    RandomSource returning queued values, then a fallback.

    Draw order per operation:
    - availability check: delay, then outcome (< 0.7 available)
    - submission: delay, then outcome (< 0.7 success), then error index
    """

    def __init__(self, values: Iterable[float] = (), fallback: float = 0.0) -> None:
        self._values = list(values)
        self.fallback = fallback
        self.draws = 0

    def push(self, *values: float) -> None:
        self._values.extend(values)

    def random(self) -> float:
        self.draws += 1
        if self._values:
            return self._values.pop(0)
        return self.fallback


def fill_valid_form(orchestrator: FormOrchestrator, email: str = "john.doe@example.com") -> None:
    """Enter valid values in every field and accept the terms (no blur on email)."""
    orchestrator.change_value(FieldId.NAME, "John Doe")
    orchestrator.change_value(FieldId.EMAIL, email)
    orchestrator.change_value(FieldId.PASSWORD, VALID_PASSWORD)
    orchestrator.change_value(FieldId.CONFIRM_PASSWORD, VALID_PASSWORD)
    orchestrator.toggle_checkbox(FieldId.TERMS, True)
