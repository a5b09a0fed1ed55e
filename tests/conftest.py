"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A scripted random source with predictable draws
- A manual (virtual clock) scheduler
- Orchestrators wired to a mock presenter
"""

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from src.adapters.timers.manual import ManualScheduler
from src.domain.orchestrator import FormOrchestrator
from src.domain.tasks import Timing
from tests.helpers import ScriptedRandom


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def presenter() -> Mock:
    return Mock()


@pytest.fixture
def make_orchestrator(
    scheduler: ManualScheduler, rng: ScriptedRandom, presenter: Mock
) -> Callable[..., FormOrchestrator]:
    """Factory for orchestrators sharing the test scheduler and random source."""

    def factory(timing: Timing | None = None) -> FormOrchestrator:
        return FormOrchestrator(
            scheduler=scheduler,
            rng=rng,
            presenter=presenter,
            timing=timing or Timing(),
        )

    return factory


@pytest.fixture
def orchestrator(make_orchestrator: Callable[..., FormOrchestrator]) -> FormOrchestrator:
    return make_orchestrator()
