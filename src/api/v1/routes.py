"""
API v1 routes.

Defines REST endpoints that bind the form engine to a remote presentation
layer: one in-memory form session per client, driven by input events.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.adapters.sessions.memory import InMemorySessionRegistry
from src.api.dependencies import get_orchestrator, get_registry
from src.api.models import ErrorResponse, EventRequest, EventType, FormViewModel, SessionResponse
from src.domain.exceptions import SessionNotFound, UnknownField
from src.domain.orchestrator import FormOrchestrator

router = APIRouter(tags=["v1"])


def apply_event(orchestrator: FormOrchestrator, event: EventRequest) -> None:
    """
    Forward one input event to the orchestrator.

    Raises:
        UnknownField: If the event targets a field that does not accept it
    """
    if event.type == EventType.VALUE_CHANGED:
        orchestrator.change_value(event.field or "", event.value or "")
    elif event.type == EventType.BLUR:
        orchestrator.blur(event.field or "")
    elif event.type == EventType.CHECKBOX_TOGGLED:
        orchestrator.toggle_checkbox(event.field or "", bool(event.checked))
    elif event.type == EventType.SUBMIT:
        orchestrator.submit()
    elif event.type == EventType.RETRY:
        orchestrator.retry()
    elif event.type == EventType.RESET:
        orchestrator.reset()


@router.post(
    "/sessions",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a form session",
    description="Create a fresh registration form and return its initial view.",
)
async def create_session(
    registry: InMemorySessionRegistry = Depends(get_registry),
) -> SessionResponse:
    session_id, orchestrator = registry.create()
    return SessionResponse(
        session_id=session_id,
        view=FormViewModel.from_view(orchestrator.view()),
    )


@router.get(
    "/sessions/{session_id}",
    response_model=SessionResponse,
    responses={404: {"model": ErrorResponse, "description": "Session not found"}},
    summary="Get the current form view",
    description="Poll the form view, including results of pending "
    "availability checks and submissions once they resolve.",
)
async def get_session(
    session_id: str,
    orchestrator: FormOrchestrator = Depends(get_orchestrator),
) -> SessionResponse:
    return SessionResponse(
        session_id=session_id,
        view=FormViewModel.from_view(orchestrator.view()),
    )


@router.post(
    "/sessions/{session_id}/events",
    response_model=SessionResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Session not found"},
        422: {"description": "Malformed event or unknown field"},
    },
    summary="Send an input event",
    description="Apply a value change, blur, checkbox toggle, submit, "
    "retry, or reset event and return the updated view.",
)
async def post_event(
    session_id: str,
    event: EventRequest,
    orchestrator: FormOrchestrator = Depends(get_orchestrator),
) -> SessionResponse:
    """
    Apply an input event to the session's form.

    - **type**: value_changed, blur, checkbox_toggled, submit, retry, or reset
    - **field**: target field for value_changed, blur, and checkbox_toggled
    - **value** / **checked**: new value for value_changed / checkbox_toggled
    """
    try:
        apply_event(orchestrator, event)
    except UnknownField as exc:
        raise HTTPException(
            status_code=422,
            detail=f"Field '{exc}' does not accept {event.type.value} events",
        ) from None
    return SessionResponse(
        session_id=session_id,
        view=FormViewModel.from_view(orchestrator.view()),
    )


@router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse, "description": "Session not found"}},
    summary="Discard a form session",
)
async def delete_session(
    session_id: str,
    registry: InMemorySessionRegistry = Depends(get_registry),
) -> Response:
    try:
        registry.discard(session_id)
    except SessionNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Session not found",
        ) from None
    return Response(status_code=status.HTTP_204_NO_CONTENT)
