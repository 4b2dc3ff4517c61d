# src/access_time/schemas/session.py
"""Session-related Pydantic schemas."""

from pydantic import BaseModel, Field


class SessionResponse(BaseModel):
    """Stored session plus values derived at the server clock."""

    owner: str
    remaining_secs: int = Field(..., description="Stored balance; frozen while paused")
    started_at: int = Field(..., description="Start instant, 0 when paused")
    now: int
    remaining_now: int = Field(..., description="Effective balance at `now`")
    active: bool
    expires_at: int = Field(..., description="started_at + remaining_secs while running, else 0")


class SessionTransition(BaseModel):
    """Outcome of a start or pause request."""

    owner: str
    changed: bool
    session: SessionResponse
