"""Column types for unsigned quantities wider than SQL BIGINT."""

from __future__ import annotations

from typing import Any

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1


class UnsignedInteger(TypeDecorator[int]):
    """Store a bounded non-negative integer exactly as a decimal string.

    BIGINT is signed and stops at 2**63 - 1, which cannot hold u64 balances
    or u128 order ids.
    """

    impl = String
    cache_ok = True

    def __init__(self, bits: int = 64, **kwargs: Any) -> None:
        self.bits = bits
        self.max_value = 2**bits - 1
        # 2**128 has 39 decimal digits.
        super().__init__(length=len(str(self.max_value)), **kwargs)

    def process_bind_param(self, value: int | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        number = int(value)
        if number < 0 or number > self.max_value:
            raise ValueError(f"{number} does not fit in an unsigned {self.bits}-bit integer")
        return str(number)

    def process_result_value(self, value: str | None, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return int(value)
