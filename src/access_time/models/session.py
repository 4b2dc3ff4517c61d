# src/access_time/models/session.py
"""Per-owner pausable time balance."""

from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from access_time.db.session import Base
from access_time.db.types import UnsignedInteger


class AccessSession(Base):
    """Time balance of one owner.

    ``started_at == 0`` means paused with the balance frozen; otherwise the
    balance has been draining since ``started_at``.
    """

    __tablename__ = "access_session"

    owner: Mapped[str] = mapped_column(Text, primary_key=True)
    remaining_secs: Mapped[int] = mapped_column(UnsignedInteger(64), nullable=False, default=0)
    started_at: Mapped[int] = mapped_column(UnsignedInteger(64), nullable=False, default=0)

    @property
    def is_running(self) -> bool:
        return self.started_at > 0
