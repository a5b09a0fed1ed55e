"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the session
registry and the per-session form orchestrator into routes.
"""

from fastapi import Depends, HTTPException, Request, status

from src.adapters.sessions.memory import InMemorySessionRegistry
from src.domain.exceptions import SessionNotFound
from src.domain.orchestrator import FormOrchestrator


def get_registry(request: Request) -> InMemorySessionRegistry:
    """
    Get session registry from app state.

    The registry is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.registry


def get_orchestrator(
    session_id: str,
    registry: InMemorySessionRegistry = Depends(get_registry),
) -> FormOrchestrator:
    """
    Resolve the orchestrator for the session in the path.

    Raises:
        HTTPException: 404 if the session does not exist
    """
    try:
        return registry.get(session_id)
    except SessionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        ) from None
