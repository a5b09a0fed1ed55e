"""
Deferred tasks - Explicit result type for simulated asynchronous work.

Timer callbacks stand in for server round-trips. Each pending operation is
wrapped in a DeferredTask whose outcome is PENDING until it either resolves
with a value or is superseded by newer work. A superseded task never
resolves, so stale results are dropped instead of applied.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from .ports import RandomSource, TimerHandle

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TaskOutcome(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    SUPERSEDED = "superseded"


@dataclass(frozen=True)
class Timing:
    """Latency bounds (seconds) and success rates for simulated calls."""

    availability_min_delay: float = 0.5
    availability_max_delay: float = 2.5
    availability_success_rate: float = 0.7
    submission_min_delay: float = 1.5
    submission_max_delay: float = 4.5
    submission_success_rate: float = 0.7


def draw_delay(rng: RandomSource, low: float, high: float) -> float:
    """Uniform delay in [low, high)."""
    return low + rng.random() * (high - low)


def draw_success(rng: RandomSource, rate: float) -> bool:
    return rng.random() < rate


class DeferredTask(Generic[T]):
    """
    One in-flight simulated operation.

    The token identifies the task within its owner; owners compare tokens
    to tell the current task from stale ones.
    """

    def __init__(self, token: int, name: str) -> None:
        self.token = token
        self.name = name
        self.outcome = TaskOutcome.PENDING
        self._value: T | None = None
        self._handle: TimerHandle | None = None
        self._callbacks: list[Callable[["DeferredTask[T]"], None]] = []

    def __repr__(self) -> str:
        return f"<DeferredTask {self.name}#{self.token} {self.outcome.value}>"

    @property
    def pending(self) -> bool:
        return self.outcome is TaskOutcome.PENDING

    @property
    def value(self) -> T | None:
        """Resolved value, or None while pending or when superseded."""
        return self._value

    def bind(self, handle: TimerHandle) -> None:
        self._handle = handle

    def add_done_callback(self, callback: Callable[["DeferredTask[T]"], None]) -> None:
        """Call callback once the task resolves. Superseded tasks never call back."""
        self._callbacks.append(callback)

    def resolve(self, value: T) -> bool:
        """
        Settle the task with a value and notify callbacks.

        Returns:
            True if the value was accepted, False if the task had already
            settled or been superseded
        """
        if not self.pending:
            logger.debug("Dropping result for %r", self)
            return False
        self.outcome = TaskOutcome.RESOLVED
        self._value = value
        for callback in self._callbacks:
            callback(self)
        return True

    def supersede(self) -> bool:
        """Mark the task stale and cancel its timer if still pending."""
        if not self.pending:
            return False
        self.outcome = TaskOutcome.SUPERSEDED
        if self._handle is not None:
            self._handle.cancel()
        logger.debug("Superseded %r", self)
        return True
