"""
Wall Clock
==========

Absolute-to-relative time conversion.

Everything downstream of this module works with `RelativeTime`. Absolute UTC
timestamps only enter through here, where times before the chain start are
handled once and for all.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from .types import RELATIVE_TIME_ZERO, RelativeTime, StartTime


def utc_now() -> datetime:
    """Current wall-clock time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def to_relative_time(start: StartTime, utc: datetime) -> RelativeTime | None:
    """
    Convert an absolute time to a time relative to the chain start.

    Returns None for times before the chain start.
    """
    if utc < start.utc:
        return None
    return RelativeTime(utc - start.utc)


def to_relative_time_or_zero(start: StartTime, utc: datetime) -> RelativeTime:
    """
    Convert an absolute time to a relative time that can never be negative.

    Times before the chain start only happen when launching testnets. They are
    reported as the chain origin.
    """
    rel = to_relative_time(start, utc)
    return RELATIVE_TIME_ZERO if rel is None else rel


@dataclass(frozen=True, slots=True)
class WallClock:
    """
    Reads the current time relative to the chain start.

    The time source is injectable so tests can pin it.
    """

    start_time: StartTime
    """When the chain started."""

    time_fn: Callable[[], datetime] = utc_now
    """Time source function returning an aware UTC datetime."""

    def current_time(self) -> datetime:
        """Get the current wall-clock time."""
        return self.time_fn()

    def current_relative_time(self) -> RelativeTime:
        """Get the time elapsed since the chain start (0 if before it)."""
        return to_relative_time_or_zero(self.start_time, self.current_time())
