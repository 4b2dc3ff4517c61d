# src/access_time/models/token_balance.py
"""Balances held by the SQL-backed reference token ledger."""

from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from access_time.db.session import Base
from access_time.db.types import UnsignedInteger


class TokenBalance(Base):
    """Amount of ``token`` held by ``account``. Absent means zero."""

    __tablename__ = "token_balance"

    token: Mapped[str] = mapped_column(Text, primary_key=True)
    account: Mapped[str] = mapped_column(Text, primary_key=True)
    amount: Mapped[int] = mapped_column(UnsignedInteger(128), nullable=False, default=0)
