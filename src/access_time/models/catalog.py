# src/access_time/models/catalog.py
"""Administrator-owned singleton configuration and package catalog."""

from __future__ import annotations

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from access_time.db.session import Base
from access_time.db.types import UnsignedInteger

CONFIG_ROW_ID = 1


class ContractConfig(Base):
    """Configuration written once by ``init``; its presence means initialized."""

    __tablename__ = "contract_config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=CONFIG_ROW_ID)
    admin: Mapped[str] = mapped_column(Text, nullable=False)
    token: Mapped[str] = mapped_column(Text, nullable=False)


class Package(Base):
    """A purchasable (price, duration) entry, overwritten in place, never deleted."""

    __tablename__ = "package"

    package_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    price: Mapped[int] = mapped_column(UnsignedInteger(128), nullable=False)
    duration_secs: Mapped[int] = mapped_column(BigInteger, nullable=False)
