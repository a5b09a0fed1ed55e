"""
Unit tests for the availability checker.

Random draws per check: delay first, then outcome (< 0.7 available).
"""

from unittest.mock import Mock

import pytest

from src.adapters.timers.manual import ManualScheduler
from src.domain.availability import STATUS_TEXT, AvailabilityChecker
from src.domain.ports import AvailabilityStatus
from src.domain.tasks import TaskOutcome, Timing
from tests.helpers import ScriptedRandom


@pytest.fixture
def checker(scheduler: ManualScheduler, rng: ScriptedRandom) -> AvailabilityChecker:
    return AvailabilityChecker(scheduler, rng, Timing())


class TestCheck:
    """Tests for a single availability check."""

    def test_check_is_pending_until_delay_elapses(
        self, checker: AvailabilityChecker, scheduler: ManualScheduler, rng: ScriptedRandom
    ) -> None:
        """The result arrives only after the drawn delay."""
        rng.push(0.5, 0.1)  # delay 1.5s, available
        on_result = Mock()

        task = checker.check("user@site.com", on_result)

        assert task.pending
        scheduler.advance(1.0)
        on_result.assert_not_called()

        scheduler.advance(0.5)
        on_result.assert_called_once_with(task)
        assert task.value == AvailabilityStatus.AVAILABLE

    def test_taken_when_draw_at_or_above_threshold(
        self, checker: AvailabilityChecker, scheduler: ManualScheduler, rng: ScriptedRandom
    ) -> None:
        """Draws >= 0.7 report the email as taken."""
        rng.push(0.0, 0.7)
        task = checker.check("user@site.com", Mock())

        scheduler.advance(0.5)

        assert task.value == AvailabilityStatus.TAKEN

    @pytest.mark.parametrize(("draw", "delay"), [(0.0, 0.5), (0.9999, 2.4998)])
    def test_delay_bounds(
        self,
        checker: AvailabilityChecker,
        scheduler: ManualScheduler,
        rng: ScriptedRandom,
        draw: float,
        delay: float,
    ) -> None:
        """Latency stays within [0.5s, 2.5s)."""
        rng.push(draw, 0.1)
        task = checker.check("user@site.com", Mock())

        scheduler.advance(delay - 0.01)
        assert task.pending
        scheduler.advance(0.02)
        assert task.outcome == TaskOutcome.RESOLVED

    def test_is_current_tracks_latest_task(self, checker: AvailabilityChecker) -> None:
        """Only the most recent check is current."""
        first = checker.check("a@b.co", Mock())
        second = checker.check("c@d.co", Mock())

        assert checker.is_current(second)
        assert not checker.is_current(first)


class TestSupersede:
    """Tests for re-entrant checks and cancellation."""

    def test_new_check_supersedes_old(
        self, checker: AvailabilityChecker, scheduler: ManualScheduler, rng: ScriptedRandom
    ) -> None:
        """A second blur discards the first lookup's result."""
        rng.push(0.9, 0.0, 0.8)  # first: 2.3s; second: 0.5s then taken
        first_result = Mock()
        second_result = Mock()

        first = checker.check("first@site.com", first_result)
        second = checker.check("second@site.com", second_result)
        scheduler.run_all()

        assert first.outcome == TaskOutcome.SUPERSEDED
        first_result.assert_not_called()
        second_result.assert_called_once_with(second)
        assert second.value == AvailabilityStatus.TAKEN

    def test_cancel_supersedes_in_flight_check(
        self, checker: AvailabilityChecker, scheduler: ManualScheduler
    ) -> None:
        """cancel() drops the pending check and its timer."""
        on_result = Mock()
        task = checker.check("user@site.com", on_result)

        checker.cancel()

        assert task.outcome == TaskOutcome.SUPERSEDED
        assert checker.current is None
        assert scheduler.pending == 0
        on_result.assert_not_called()

    def test_cancel_without_check_is_noop(self, checker: AvailabilityChecker) -> None:
        """Cancelling with nothing in flight does nothing."""
        checker.cancel()
        assert checker.current is None


class TestStatusText:
    """Tests for availability status texts."""

    def test_texts(self) -> None:
        """Each status has the text shown next to the email field."""
        assert STATUS_TEXT[AvailabilityStatus.IDLE] == ""
        assert STATUS_TEXT[AvailabilityStatus.CHECKING] == "⏳ Checking availability..."
        assert STATUS_TEXT[AvailabilityStatus.AVAILABLE] == "✓ Email available"
        assert STATUS_TEXT[AvailabilityStatus.TAKEN] == "⚠ Email already taken"
