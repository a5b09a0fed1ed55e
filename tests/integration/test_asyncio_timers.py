"""
Integration tests for the orchestrator on a real asyncio event loop.

Uses millisecond latencies so timers fire during a short sleep.
"""

import asyncio
import random
from unittest.mock import Mock

import pytest

from src.adapters.timers.asyncio_scheduler import AsyncioScheduler
from src.domain.orchestrator import FormOrchestrator
from src.domain.ports import AvailabilityStatus, FieldId, Panel
from src.domain.tasks import Timing
from tests.helpers import fill_valid_form

pytestmark = pytest.mark.integration

FAST = Timing(
    availability_min_delay=0.001,
    availability_max_delay=0.01,
    availability_success_rate=1.0,
    submission_min_delay=0.001,
    submission_max_delay=0.01,
    submission_success_rate=1.0,
)


def build() -> FormOrchestrator:
    return FormOrchestrator(
        scheduler=AsyncioScheduler(),
        rng=random.Random(0),
        presenter=Mock(),
        timing=FAST,
    )


class TestAsyncioScheduler:
    """Tests for timer-driven resolution on an event loop."""

    def test_submission_resolves_on_loop(self) -> None:
        """A submission settles once the loop runs past its delay."""

        async def scenario() -> Panel:
            orchestrator = build()
            fill_valid_form(orchestrator)
            orchestrator.submit()
            assert orchestrator.view().loading is True
            await asyncio.sleep(0.1)
            return orchestrator.view().panel

        assert asyncio.run(scenario()) is Panel.SUCCESS

    def test_availability_resolves_on_loop(self) -> None:
        """A blurred email settles to available."""

        async def scenario() -> AvailabilityStatus:
            orchestrator = build()
            orchestrator.change_value(FieldId.EMAIL, "user@site.com")
            orchestrator.blur(FieldId.EMAIL)
            await asyncio.sleep(0.1)
            return orchestrator.snapshot.availability

        assert asyncio.run(scenario()) is AvailabilityStatus.AVAILABLE

    def test_close_cancels_loop_timers(self) -> None:
        """Closing a session keeps its pending submission from resolving."""

        async def scenario() -> FormOrchestrator:
            orchestrator = build()
            fill_valid_form(orchestrator)
            orchestrator.submit()
            orchestrator.close()
            await asyncio.sleep(0.1)
            return orchestrator

        orchestrator = asyncio.run(scenario())
        assert orchestrator.view().panel is Panel.FORM
