"""Session start/pause endpoints."""

from fastapi import APIRouter

from access_time.api.v1.dependencies import AuthorizationDep, ClockDep, ServiceDep
from access_time.schemas.session import SessionResponse, SessionTransition
from access_time.services.access_time import AccessTimeService

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _session_response(service: AccessTimeService, owner: str, now: int) -> SessionResponse:
    session = service.get_session(owner)
    return SessionResponse(
        owner=owner,
        remaining_secs=session.remaining_secs,
        started_at=session.started_at,
        now=now,
        remaining_now=service.remaining(owner, now),
        active=service.is_active(owner, now),
        expires_at=service.get_access(owner).expires_at,
    )


@router.post("/start")
async def start_session(
    authorization: AuthorizationDep,
    service: ServiceDep,
    clock: ClockDep,
) -> SessionTransition:
    """Start consuming the signer's balance at the server clock."""
    owner = authorization.principal
    now = clock.now()
    changed = service.start(authorization, owner, now)
    return SessionTransition(owner=owner, changed=changed, session=_session_response(service, owner, now))


@router.post("/pause")
async def pause_session(
    authorization: AuthorizationDep,
    service: ServiceDep,
    clock: ClockDep,
) -> SessionTransition:
    """Freeze the signer's balance at the server clock."""
    owner = authorization.principal
    now = clock.now()
    changed = service.pause(authorization, owner, now)
    return SessionTransition(owner=owner, changed=changed, session=_session_response(service, owner, now))


@router.get("/{owner}")
async def get_session(owner: str, service: ServiceDep, clock: ClockDep) -> SessionResponse:
    return _session_response(service, owner, clock.now())
