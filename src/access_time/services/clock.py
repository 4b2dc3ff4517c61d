"""Time sources. Operations take ``now`` as an argument; only the HTTP edge reads a clock."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int: ...


class SystemClock:
    """Wall clock in whole Unix seconds."""

    def now(self) -> int:
        return int(time.time())


class FixedClock:
    """Clock pinned to a settable instant, used by tooling and tests."""

    def __init__(self, now: int = 0) -> None:
        self._now = now

    def now(self) -> int:
        return self._now

    def set(self, now: int) -> None:
        self._now = now

    def advance(self, seconds: int) -> None:
        self._now += seconds
