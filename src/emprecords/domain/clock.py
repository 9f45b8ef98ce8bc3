"""Clock abstraction — the single source of "now" for audit stamping.

Exactly one clock is chosen at startup and passed down by constructor
injection. Production wires :class:`SystemClock`; test harnesses wire a
:class:`FrozenClock` so audit timestamps can be asserted exactly.

INVARIANT: The clock implementation never changes during a process lifetime.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Anything with a ``now()`` returning an aware UTC datetime."""

    def now(self) -> datetime: ...


class SystemClock:
    """Real wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return "SystemClock()"


class FrozenClock:
    """A clock stuck at one instant.

    Naive instants are taken to be UTC.
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = as_utc(instant)

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FrozenClock({self._instant.isoformat()})"


def as_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime (naive values are assumed UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def build_clock(frozen_at: datetime | None) -> Clock:
    """Pick the process clock from configuration.

    Examples:
        >>> build_clock(None)
        SystemClock()
        >>> build_clock(datetime(2022, 1, 1))
        FrozenClock(2022-01-01T00:00:00+00:00)
    """
    if frozen_at is None:
        return SystemClock()
    return FrozenClock(frozen_at)
