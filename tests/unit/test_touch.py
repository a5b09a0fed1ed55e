"""
Unit tests for the touch tracker.
"""

from src.domain.ports import FieldId
from src.domain.touch import TouchTracker
from src.domain.validators import Verdict


class TestTouchTracker:
    """Tests for touch recording and message gating."""

    def test_fields_start_untouched(self) -> None:
        """A new tracker has no touched fields."""
        tracker = TouchTracker()
        assert not any(tracker.is_touched(field_id) for field_id in FieldId)

    def test_touch_returns_new_tracker(self) -> None:
        """Touching does not mutate the original tracker."""
        tracker = TouchTracker()
        touched = tracker.touch(FieldId.NAME)

        assert touched.is_touched(FieldId.NAME)
        assert not tracker.is_touched(FieldId.NAME)

    def test_touch_is_sticky(self) -> None:
        """Touching an already touched field keeps it touched."""
        tracker = TouchTracker().touch(FieldId.EMAIL)
        assert tracker.touch(FieldId.EMAIL) is tracker
        assert tracker.touch(FieldId.NAME).is_touched(FieldId.EMAIL)

    def test_message_hidden_until_touched(self) -> None:
        """Untouched fields never show a message, whatever the verdict."""
        tracker = TouchTracker()
        verdict = Verdict(False, "Full name is required")

        assert tracker.visible_message(FieldId.NAME, verdict) == ""
        assert tracker.touch(FieldId.NAME).visible_message(FieldId.NAME, verdict) == (
            "Full name is required"
        )

    def test_valid_verdict_has_empty_message(self) -> None:
        """Valid verdicts show nothing even when touched."""
        tracker = TouchTracker().touch(FieldId.NAME)
        assert tracker.visible_message(FieldId.NAME, Verdict(True)) == ""
