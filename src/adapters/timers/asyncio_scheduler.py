"""
asyncio scheduler adapter - Implements Scheduler protocol.

Runs deferred callbacks on an asyncio event loop via loop.call_later.
Callbacks must be scheduled from the loop's own thread.
"""

import asyncio
from collections.abc import Callable


class AsyncioScheduler:
    """
    Implements Scheduler protocol on top of an asyncio event loop.

    Uses structural subtyping - no explicit inheritance from Protocol.
    asyncio.TimerHandle already satisfies the TimerHandle port.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(delay, callback)
