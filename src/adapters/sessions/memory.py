"""
In-memory session registry - Holds one form orchestrator per session.

Sessions live only as long as the process; nothing is persisted. When the
registry is full, the oldest session is closed and evicted.
"""

import logging
import uuid
from collections import OrderedDict

from src.adapters.presentation.console import LoggingPresenter
from src.domain.exceptions import SessionNotFound
from src.domain.orchestrator import FormOrchestrator
from src.domain.ports import RandomSource, Scheduler
from src.domain.tasks import Timing

logger = logging.getLogger(__name__)


class InMemorySessionRegistry:
    """Creates, looks up, and discards form sessions."""

    def __init__(
        self,
        scheduler: Scheduler,
        rng: RandomSource,
        timing: Timing | None = None,
        max_sessions: int = 1000,
    ) -> None:
        """
        Initialize registry with the collaborators every session shares.

        Args:
            scheduler: Timer service for deferred results
            rng: Random source for latency and outcomes
            timing: Simulated latency bounds and success rates
            max_sessions: Capacity before the oldest session is evicted
        """
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._scheduler = scheduler
        self._rng = rng
        self._timing = timing or Timing()
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, FormOrchestrator] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def create(self) -> tuple[str, FormOrchestrator]:
        """Start a new session with a fresh form."""
        while len(self._sessions) >= self._max_sessions:
            evicted_id, evicted = self._sessions.popitem(last=False)
            evicted.close()
            logger.info("Evicted session %s", evicted_id)

        session_id = uuid.uuid4().hex
        orchestrator = FormOrchestrator(
            scheduler=self._scheduler,
            rng=self._rng,
            presenter=LoggingPresenter(session_id),
            timing=self._timing,
        )
        self._sessions[session_id] = orchestrator
        logger.info("Created session %s", session_id)
        return session_id, orchestrator

    def get(self, session_id: str) -> FormOrchestrator:
        """
        Look up a session.

        Raises:
            SessionNotFound: If no session has that id
        """
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def discard(self, session_id: str) -> None:
        """
        Close and remove a session, superseding its pending timers.

        Raises:
            SessionNotFound: If no session has that id
        """
        orchestrator = self._sessions.pop(session_id, None)
        if orchestrator is None:
            raise SessionNotFound(session_id)
        orchestrator.close()
        logger.info("Discarded session %s", session_id)

    def close(self) -> None:
        """Close every session."""
        for orchestrator in self._sessions.values():
            orchestrator.close()
        self._sessions.clear()
