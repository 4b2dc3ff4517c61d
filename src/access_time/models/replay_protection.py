# src/access_time/models/replay_protection.py
"""Models supporting replay protection of signed requests."""


from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from access_time.db.session import Base


class NonceReplay(Base):
    """Record indicating that a client nonce has already been used."""

    __tablename__ = "nonce_replay"

    # (principal, nonce_hash) -> existence means "already seen".
    principal: Mapped[str] = mapped_column(Text, primary_key=True)
    nonce_hash_hex: Mapped[str] = mapped_column(Text, primary_key=True)
    action: Mapped[str] = mapped_column(Text, nullable=False)
