"""Session adapters - Form session storage."""

from .memory import InMemorySessionRegistry

__all__ = ["InMemorySessionRegistry"]
