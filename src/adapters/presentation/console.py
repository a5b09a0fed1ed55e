"""
Console presenter adapter - Implements Presenter protocol.

This module provides a logging-based implementation of the domain's
presentation port, writing each rendered form view to the log for demo
and headless sessions.
"""

import logging

from src.domain.form import FormView

logger = logging.getLogger(__name__)


class LoggingPresenter:
    """
    Implements Presenter protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, session_id: str = "-") -> None:
        self.session_id = session_id

    def render(self, view: FormView) -> None:
        """
        Log a one-line summary of the view at INFO level.

        Args:
            view: Form view produced by the orchestrator
        """
        errors = {
            field_id.value: field_view.message
            for field_id, field_view in view.fields.items()
            if field_view.message
        }
        logger.info(
            "[FORM] Session: %s Panel: %s Submit: %s Strength: %s Availability: %s Errors: %s",
            self.session_id,
            view.panel.value,
            "enabled" if view.submit_enabled else "disabled",
            view.strength_tier.value,
            view.availability.value,
            errors,
        )
        if view.error_message:
            logger.info("[FORM] Session: %s Error: %s", self.session_id, view.error_message)
