"""Session accountant: per-owner time balance with start/pause.

A session is either paused (``started_at == 0``, balance frozen) or running
(``started_at > 0``, balance draining one unit per second since
``started_at``). All arithmetic saturates: the balance never drops below
zero and never wraps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from sqlalchemy.orm import Session

from access_time.db.time import saturating_add, saturating_sub
from access_time.models import AccessSession
from access_time.services.auth import Authenticator, Authorization
from access_time.services.events import EventSink

logger = logging.getLogger(__name__)


class _Balance(Protocol):
    remaining_secs: int
    started_at: int


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot of an owner's session."""

    owner: str
    remaining_secs: int = 0
    started_at: int = 0

    @property
    def is_running(self) -> bool:
        return self.started_at > 0


@dataclass(frozen=True)
class Access:
    """Virtual expiry view: ``started_at + remaining_secs`` while running, else 0."""

    owner: str
    expires_at: int


def remaining_at(session: _Balance, now: int) -> int:
    """Return the effective balance at ``now`` without mutating anything."""
    if session.started_at == 0:
        return session.remaining_secs
    return saturating_sub(session.remaining_secs, saturating_sub(now, session.started_at))


def is_active_at(session: _Balance, now: int) -> bool:
    return session.started_at > 0 and remaining_at(session, now) > 0


def expires_at(session: _Balance) -> int:
    if session.started_at == 0:
        return 0
    return saturating_add(session.started_at, session.remaining_secs)


class SessionAccountant:
    """Start, pause and credit owners' sessions."""

    def __init__(self, db: Session, events: EventSink, authenticator: Authenticator) -> None:
        self.db = db
        self.events = events
        self.authenticator = authenticator

    def _load_for_update(self, owner: str) -> AccessSession:
        """Return the owner's row locked until commit, adding a blank one if missing."""
        session = self.db.get(AccessSession, owner, with_for_update=True)
        if session is None:
            session = AccessSession(owner=owner, remaining_secs=0, started_at=0)
            self.db.add(session)
        return session

    def get_session(self, owner: str) -> SessionState:
        """Return the stored session, ``{0, 0}`` if the owner has none yet."""
        session = self.db.get(AccessSession, owner)
        if session is None:
            return SessionState(owner=owner)
        return SessionState(
            owner=owner,
            remaining_secs=session.remaining_secs,
            started_at=session.started_at,
        )

    def remaining(self, owner: str, now: int) -> int:
        return remaining_at(self.get_session(owner), now)

    def is_active(self, owner: str, now: int) -> bool:
        return is_active_at(self.get_session(owner), now)

    def get_access(self, owner: str) -> Access:
        return Access(owner=owner, expires_at=expires_at(self.get_session(owner)))

    def start(self, authorization: Authorization | None, owner: str, now: int) -> bool:
        """Begin consuming the balance at ``now``.

        No-op when the effective balance is zero or the session is already
        running; re-starting never resets the clock. Returns True only on an
        actual paused-to-running transition.
        """
        self.authenticator.require_auth(self.db, authorization, owner, "start", {"owner": owner})
        # Held until commit so a concurrent pause or grant cannot interleave.
        self.db.get(AccessSession, owner, with_for_update=True)
        current = self.get_session(owner)
        if remaining_at(current, now) == 0:
            logger.debug("Start ignored for %s: no balance", owner)
            return False
        if current.is_running:
            logger.debug("Start ignored for %s: already running", owner)
            return False
        if now == 0:
            # started_at == 0 encodes "paused".
            logger.debug("Start ignored for %s: clock at zero", owner)
            return False

        session = self._load_for_update(owner)
        session.started_at = now
        self.db.flush()
        self.events.publish("start", {"owner": owner, "started_at": now})
        logger.info("Session of %s started at %d with %ds", owner, now, session.remaining_secs)
        return True

    def pause(self, authorization: Authorization | None, owner: str, now: int) -> bool:
        """Freeze the balance, charging the time elapsed since the start."""
        self.authenticator.require_auth(self.db, authorization, owner, "pause", {"owner": owner})
        session = self.db.get(AccessSession, owner, with_for_update=True)
        if session is None or not session.is_running:
            logger.debug("Pause ignored for %s: not running", owner)
            return False

        elapsed = saturating_sub(now, session.started_at)
        session.remaining_secs = saturating_sub(session.remaining_secs, elapsed)
        session.started_at = 0
        self.db.flush()
        self.events.publish("pause", {"owner": owner, "remaining_secs": session.remaining_secs})
        logger.info("Session of %s paused with %ds left", owner, session.remaining_secs)
        return True

    def credit(self, owner: str, amount: int) -> int:
        """Add ``amount`` seconds without touching ``started_at``; return the new balance."""
        if amount < 0:
            raise ValueError(f"Cannot credit a negative duration: {amount}")
        session = self._load_for_update(owner)
        session.remaining_secs = saturating_add(session.remaining_secs, amount)
        self.db.flush()
        return session.remaining_secs
