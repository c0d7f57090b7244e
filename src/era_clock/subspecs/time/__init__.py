"""Time values relative to the chain start and the wall clock that produces them."""

from .clock import WallClock, to_relative_time, to_relative_time_or_zero, utc_now
from .types import (
    RELATIVE_TIME_ZERO,
    RelativeTime,
    SlotLength,
    StartTime,
    diff_rel_time,
)

__all__ = [
    "RELATIVE_TIME_ZERO",
    "RelativeTime",
    "SlotLength",
    "StartTime",
    "WallClock",
    "diff_rel_time",
    "to_relative_time",
    "to_relative_time_or_zero",
    "utc_now",
]
