"""Audit event publication."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy.orm import Session

from access_time.models import AuditEvent

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    """Fire-and-forget publication of ``(topic, payload)``; never read back."""

    def publish(self, topic: str, payload: Mapping[str, Any]) -> None: ...


class LoggingEventSink:
    """Sink that only writes events to the log."""

    def publish(self, topic: str, payload: Mapping[str, Any]) -> None:
        logger.info("event %s %s", topic, dict(payload))


class OutboxEventSink:
    """Persist events as ``AuditEvent`` rows in the operation's transaction.

    Events of an aborted operation are rolled back with the rest of it.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def publish(self, topic: str, payload: Mapping[str, Any]) -> None:
        self.db.add(AuditEvent(topic=topic, payload=dict(payload)))
        logger.debug("Queued %s event %s", topic, dict(payload))
