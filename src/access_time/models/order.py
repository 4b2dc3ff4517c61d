# src/access_time/models/order.py
"""Purchase orders and the per-owner order sequence."""

from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Text
from sqlalchemy.orm import Mapped, mapped_column

from access_time.db.session import Base
from access_time.db.types import UnsignedInteger


class Order(Base):
    """A settled payment waiting to be credited, or already credited.

    Insert-only; ``credited`` flips from False to True exactly once.
    """

    __tablename__ = "purchase_order"

    owner: Mapped[str] = mapped_column(Text, primary_key=True)
    order_id: Mapped[int] = mapped_column(UnsignedInteger(128), primary_key=True)
    package_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    credited: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class OrderCounter(Base):
    """Last order id issued to an owner. Absent means zero."""

    __tablename__ = "order_counter"

    owner: Mapped[str] = mapped_column(Text, primary_key=True)
    last_order_id: Mapped[int] = mapped_column(UnsignedInteger(128), nullable=False, default=0)
