# src/access_time/db/time.py
"""Saturating arithmetic for time and balance quantities."""

from .types import U64_MAX


def saturating_sub(left: int, right: int) -> int:
    """Return ``left - right`` floored at zero."""
    return left - right if left > right else 0


def saturating_add(left: int, right: int, ceiling: int = U64_MAX) -> int:
    """Return ``left + right`` capped at ``ceiling``."""
    total = left + right
    return total if total < ceiling else ceiling
