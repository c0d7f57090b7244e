"""
Time Types
==========

Value types for time measured relative to the start of the chain.

Slots are discrete, but the conversions between them and wall-clock time go
through durations. All durations are `timedelta`, which keeps microsecond
precision. Comparisons that feed the sync estimate round to milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from fractions import Fraction

_ONE_MICROSECOND = timedelta(microseconds=1)


@dataclass(frozen=True, slots=True, order=True)
class RelativeTime:
    """A signed duration since the chain start time."""

    offset: timedelta
    """Time elapsed since the start of the chain."""

    @classmethod
    def from_seconds(cls, seconds: float) -> RelativeTime:
        """Build a relative time from a number of seconds."""
        return cls(timedelta(seconds=seconds))

    def to_milliseconds(self) -> int:
        """
        Round the offset to whole milliseconds.

        Ties round to the nearest even millisecond.
        """
        microseconds = self.offset // _ONE_MICROSECOND
        return round(Fraction(microseconds, 1000))

    def add(self, duration: timedelta) -> RelativeTime:
        """Shift this relative time forward by a duration."""
        return RelativeTime(self.offset + duration)


RELATIVE_TIME_ZERO = RelativeTime(timedelta(0))
"""The chain origin: slot 0 of the first era starts here."""


def diff_rel_time(later: RelativeTime, earlier: RelativeTime) -> timedelta:
    """Duration between two relative times (negative if `later` is earlier)."""
    return later.offset - earlier.offset


@dataclass(frozen=True, slots=True, order=True)
class StartTime:
    """The wall-clock instant at which the chain started."""

    utc: datetime
    """Timezone-aware UTC timestamp of genesis."""

    def __post_init__(self) -> None:
        """Reject naive datetimes; they cannot be compared to wall-clock UTC."""
        if self.utc.tzinfo is None:
            raise ValueError("StartTime requires a timezone-aware datetime")

    @classmethod
    def from_unix(cls, timestamp: float) -> StartTime:
        """Build a start time from a Unix timestamp in seconds."""
        return cls(datetime.fromtimestamp(timestamp, tz=UTC))

    def add_relative_time(self, rel: RelativeTime) -> datetime:
        """Absolute UTC time at a given offset from the start."""
        return self.utc + rel.offset


@dataclass(frozen=True, slots=True, order=True)
class SlotLength:
    """Duration of a single slot. Always positive."""

    duration: timedelta
    """Wall-clock length of the slot."""

    def __post_init__(self) -> None:
        """Reject empty or negative slot lengths."""
        if self.duration <= timedelta(0):
            raise ValueError(f"SlotLength must be positive, got {self.duration}")

    @classmethod
    def from_seconds(cls, seconds: float) -> SlotLength:
        """Build a slot length from a number of seconds."""
        return cls(timedelta(seconds=seconds))
