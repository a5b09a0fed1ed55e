"""Timer adapters - Scheduler implementations."""

from .asyncio_scheduler import AsyncioScheduler
from .manual import ManualScheduler

__all__ = ["AsyncioScheduler", "ManualScheduler"]
