"""
Touch tracker - Records which fields the user has interacted with.

A field becomes touched on its first value change, blur, or toggle and
stays touched until a full reset. Error messages for untouched fields are
never shown.
"""

from dataclasses import dataclass, field

from .ports import FieldId
from .validators import Verdict


@dataclass(frozen=True)
class TouchTracker:
    """Immutable set of touched fields."""

    touched: frozenset[FieldId] = field(default_factory=frozenset)

    def touch(self, field_id: FieldId) -> "TouchTracker":
        if field_id in self.touched:
            return self
        return TouchTracker(self.touched | {field_id})

    def is_touched(self, field_id: FieldId) -> bool:
        return field_id in self.touched

    def visible_message(self, field_id: FieldId, verdict: Verdict) -> str:
        """Message to display for a verdict; empty until the field is touched."""
        if not self.is_touched(field_id):
            return ""
        return verdict.message
