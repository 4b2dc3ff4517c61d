"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from access_time.db.session import get_db
from access_time.services.access_time import AccessTimeService
from access_time.services.auth import Authorization
from access_time.services.clock import Clock, SystemClock

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]

_system_clock = SystemClock()


def get_clock() -> Clock:
    """Return the clock supplying ``now`` to time-dependent operations."""
    return _system_clock


def get_service(db: SessionDep) -> AccessTimeService:
    """Return the Access Time service bound to the request's database session."""
    return AccessTimeService(db)


def get_authorization(
    x_principal: Annotated[str | None, Header()] = None,
    x_nonce: Annotated[str | None, Header()] = None,
    x_signature: Annotated[str | None, Header()] = None,
) -> Authorization:
    """Build the caller's authorization from signed-request headers.

    Raises:
        HTTPException: If any of the signing headers is missing.
    """
    if not x_principal or not x_nonce or not x_signature:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Signed request headers X-Principal, X-Nonce and X-Signature are required",
        )
    return Authorization(
        principal=x_principal.strip().lower(),
        nonce=x_nonce,
        signature=x_signature.strip(),
    )


ClockDep = Annotated[Clock, Depends(get_clock)]
ServiceDep = Annotated[AccessTimeService, Depends(get_service)]
AuthorizationDep = Annotated[Authorization, Depends(get_authorization)]
