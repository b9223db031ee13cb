"""Kernel time – wall clocks used to stamp signature headers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...

    def timestamp(self) -> float: ...


class SystemClock:
    """Current UTC time."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return self.now().timestamp()


@dataclass(frozen=True)
class FrozenClock:
    """Always reports *at*."""

    at: datetime

    def now(self) -> datetime:
        return self.at

    def timestamp(self) -> float:
        return self.at.timestamp()


__all__ = ["Clock", "FrozenClock", "SystemClock"]
