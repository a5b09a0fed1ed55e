"""
Unit tests for ManualScheduler adapter.

Tests verify the virtual clock implements the Scheduler protocol and runs
callbacks in due order.
"""

from unittest.mock import Mock

import pytest

from src.adapters.timers.manual import ManualScheduler
from src.domain.ports import Scheduler


class TestManualSchedulerProtocol:
    """Tests for Scheduler protocol compliance."""

    def test_implements_scheduler_protocol(self) -> None:
        """ManualScheduler satisfies Scheduler structurally."""

        def accepts_scheduler(s: Scheduler) -> None:
            pass

        accepts_scheduler(ManualScheduler())

    def test_no_explicit_inheritance(self) -> None:
        """ManualScheduler uses structural subtyping, not inheritance."""
        assert ManualScheduler.__bases__ == (object,)


class TestAdvance:
    """Tests for advancing the virtual clock."""

    def test_callback_runs_when_due(self) -> None:
        """Callbacks run only once the clock reaches their due time."""
        scheduler = ManualScheduler()
        callback = Mock()
        scheduler.call_later(1.0, callback)

        assert scheduler.advance(0.5) == 0
        callback.assert_not_called()

        assert scheduler.advance(0.5) == 1
        callback.assert_called_once()
        assert scheduler.now == pytest.approx(1.0)

    def test_callbacks_run_in_due_order(self) -> None:
        """Earlier deadlines run first; ties run in scheduling order."""
        scheduler = ManualScheduler()
        order: list[str] = []
        scheduler.call_later(2.0, lambda: order.append("late"))
        scheduler.call_later(1.0, lambda: order.append("first"))
        scheduler.call_later(1.0, lambda: order.append("second"))

        scheduler.advance(5.0)

        assert order == ["first", "second", "late"]

    def test_cancelled_timer_does_not_run(self) -> None:
        """cancel() prevents the callback."""
        scheduler = ManualScheduler()
        callback = Mock()
        handle = scheduler.call_later(1.0, callback)
        handle.cancel()

        assert scheduler.pending == 0
        assert scheduler.advance(2.0) == 0
        callback.assert_not_called()

    def test_nested_scheduling_within_window(self) -> None:
        """Timers scheduled by a callback run if due within the same advance."""
        scheduler = ManualScheduler()
        inner = Mock()
        scheduler.call_later(1.0, lambda: scheduler.call_later(0.5, inner))

        scheduler.advance(2.0)

        inner.assert_called_once()

    def test_run_all_drains_queue(self) -> None:
        """run_all advances until nothing is pending."""
        scheduler = ManualScheduler()
        callbacks = [Mock(), Mock()]
        scheduler.call_later(3.0, callbacks[0])
        scheduler.call_later(10.0, callbacks[1])

        assert scheduler.run_all() == 2
        assert scheduler.now == pytest.approx(10.0)

    def test_negative_delay_rejected(self) -> None:
        """Delays must be non-negative."""
        with pytest.raises(ValueError):
            ManualScheduler().call_later(-1.0, Mock())
